"""Domain exceptions."""


class TaskError(Exception):
    """Base class for task list errors."""

    pass


class InvalidStatus(TaskError, ValueError):
    """Raised when a status is not one of the four lanes."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid status: {value!r} (expected active, pending, wip or completed)")


class ValidationError(TaskError, ValueError):
    """Raised when task input is rejected (strict mode only)."""

    pass

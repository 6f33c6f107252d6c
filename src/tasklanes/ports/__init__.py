"""Ports - interfaces/protocols for external dependencies."""

from .notifier import Notifier
from .spreadsheet import SpreadsheetWriter

__all__ = [
    "Notifier",
    "SpreadsheetWriter",
]

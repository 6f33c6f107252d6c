"""Adapters - I/O implementations of ports."""

from .excel_export import ExcelExporter
from .log_notifier import LogNotifier

__all__ = [
    "ExcelExporter",
    "LogNotifier",
]

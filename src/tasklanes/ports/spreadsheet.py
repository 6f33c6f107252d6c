"""Spreadsheet export interface."""

from pathlib import Path
from typing import Protocol


class SpreadsheetWriter(Protocol):
    """Interface for encoding header-first rows as a spreadsheet document."""

    def write(self, rows: list[list[str]], path: Path | str) -> Path:
        """Write the document to a file. Returns the written path."""
        ...

    def to_bytes(self, rows: list[list[str]]) -> bytes:
        """Encode the document in memory, ready to be downloaded."""
        ...

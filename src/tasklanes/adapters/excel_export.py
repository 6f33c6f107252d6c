"""Excel export adapter - pandas/openpyxl spreadsheet encoding."""

import io
import logging
from pathlib import Path

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from tasklanes.core.export import EXPORT_SHEET_NAME

logger = logging.getLogger(__name__)

XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def clean_cell(value: str) -> str:
    """Drop control characters that worksheets cannot hold."""
    return ILLEGAL_CHARACTERS_RE.sub("", value)


class ExcelExporter:
    """
    Excel workbook writer.

    Implements SpreadsheetWriter protocol. Takes header-first rows and
    produces a single-sheet .xlsx document. No business logic - just I/O.
    """

    mime_type = XLSX_MIME_TYPE

    def __init__(self, sheet_name: str = EXPORT_SHEET_NAME):
        self.sheet_name = sheet_name

    def _frame(self, rows: list[list[str]]) -> pd.DataFrame:
        if not rows:
            raise ValueError("Export needs at least a header row")
        header, *body = rows
        body = [[clean_cell(v) for v in row] for row in body]
        return pd.DataFrame(body, columns=header, dtype=str)

    def _render(self, rows: list[list[str]], target) -> None:
        frame = self._frame(rows)
        with pd.ExcelWriter(target, engine="openpyxl") as writer:
            frame.to_excel(writer, sheet_name=self.sheet_name, index=False)
            # Task fields are text; keep "=..." values from becoming formulas
            for row in writer.sheets[self.sheet_name].iter_rows():
                for cell in row:
                    if cell.data_type == "f":
                        cell.data_type = "s"

    def write(self, rows: list[list[str]], path: Path | str) -> Path:
        """Write the workbook to a file. Returns the written path."""
        path = Path(path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        self._render(rows, path)
        logger.info(f"Exported {len(rows) - 1} task(s) to {path}")
        return path

    def to_bytes(self, rows: list[list[str]]) -> bytes:
        """Encode the workbook in memory."""
        buffer = io.BytesIO()
        self._render(rows, buffer)
        return buffer.getvalue()

"""Tests for the export projection and Excel adapter."""

import io

import openpyxl
import pytest

from tasklanes.adapters.excel_export import ExcelExporter
from tasklanes.core.export import EXPORT_COLUMNS, export_rows
from tasklanes.core.store import TaskStore
from tasklanes.core.tasks import Task, TaskStatus


def _read_sheet(workbook) -> list[list[str]]:
    """Cell values as strings; openpyxl reads empty strings back as None."""
    sheet = workbook["Todos"]
    return [["" if v is None else v for v in row] for row in sheet.iter_rows(values_only=True)]


@pytest.fixture
def ship_task():
    return Task(id=1, text="Ship", status=TaskStatus.WIP, deadline="2024-01-01", assignee="Ann", link="")


class TestExportRows:
    def test_header_and_row(self, ship_task):
        rows = export_rows([ship_task])
        assert rows == [
            ["Task", "Status", "Deadline", "Assignee", "Link"],
            ["Ship", "wip", "2024-01-01", "Ann", ""],
        ]

    def test_empty_store_has_header_only(self):
        assert export_rows([]) == [list(EXPORT_COLUMNS)]

    def test_all_lanes_in_store_order(self):
        store = TaskStore()
        first = store.add("First")
        store.add("Second", link="https://example.com")
        store.set_status(first.id, TaskStatus.COMPLETED)

        rows = export_rows(store.snapshot())

        assert rows[1] == ["First", "completed", "", "", ""]
        assert rows[2] == ["Second", "active", "", "", "https://example.com"]


class TestExcelExporter:
    def test_write_file(self, ship_task, tmp_path):
        path = ExcelExporter().write(export_rows([ship_task]), tmp_path / "out" / "todos.xlsx")

        assert path.exists()
        workbook = openpyxl.load_workbook(path)
        assert workbook.sheetnames == ["Todos"]
        assert _read_sheet(workbook) == [
            ["Task", "Status", "Deadline", "Assignee", "Link"],
            ["Ship", "wip", "2024-01-01", "Ann", ""],
        ]

    def test_deadline_stays_text(self, ship_task, tmp_path):
        path = ExcelExporter().write(export_rows([ship_task]), tmp_path / "todos.xlsx")
        sheet = openpyxl.load_workbook(path)["Todos"]
        assert sheet["C2"].value == "2024-01-01"

    def test_header_only(self, tmp_path):
        path = ExcelExporter().write(export_rows([]), tmp_path / "todos.xlsx")
        assert _read_sheet(openpyxl.load_workbook(path)) == [list(EXPORT_COLUMNS)]

    def test_to_bytes(self, ship_task):
        data = ExcelExporter().to_bytes(export_rows([ship_task]))
        workbook = openpyxl.load_workbook(io.BytesIO(data))
        assert _read_sheet(workbook)[1] == ["Ship", "wip", "2024-01-01", "Ann", ""]

    def test_rejects_missing_header(self, tmp_path):
        with pytest.raises(ValueError):
            ExcelExporter().write([], tmp_path / "todos.xlsx")


class TestCellContent:
    def test_control_characters_dropped(self, tmp_path):
        store = TaskStore()
        store.add("Ship\x07it", assignee="Ann\x1b[0m", link="https://x.io")

        path = ExcelExporter().write(export_rows(store.snapshot()), tmp_path / "todos.xlsx")

        rows = _read_sheet(openpyxl.load_workbook(path))
        assert rows[1] == ["Shipit", "active", "", "Ann[0m", "https://x.io"]

    def test_control_characters_dropped_in_memory(self):
        task = Task(id=1, text="Bell\x07", link="\x00https://x.io")
        data = ExcelExporter().to_bytes(export_rows([task]))
        rows = _read_sheet(openpyxl.load_workbook(io.BytesIO(data)))
        assert rows[1][0] == "Bell"
        assert rows[1][4] == "https://x.io"

    def test_equals_values_stay_text(self, tmp_path):
        task = Task(id=1, text="=1+1", assignee="=HYPERLINK(\"http://evil\")", link="=A1")

        path = ExcelExporter().write(export_rows([task]), tmp_path / "todos.xlsx")

        sheet = openpyxl.load_workbook(path)["Todos"]
        assert sheet["A2"].data_type == "s"
        assert sheet["A2"].value == "=1+1"
        assert sheet["D2"].data_type == "s"
        assert sheet["E2"].value == "=A1"

    def test_equals_values_stay_text_in_memory(self):
        data = ExcelExporter().to_bytes(export_rows([Task(id=1, text="=SUM(1,2)")]))
        sheet = openpyxl.load_workbook(io.BytesIO(data))["Todos"]
        assert sheet["A2"].data_type == "s"
        assert sheet["A2"].value == "=SUM(1,2)"

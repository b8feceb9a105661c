from __future__ import annotations

import re

import pytest

from employee_sheets.core.config import SheetConfig
from employee_sheets.core.exceptions import TransportError
from employee_sheets.services.record_store import EmployeeSheetStore

_CELL = re.compile(r"^([A-Z]+)(\d+)$")


def _column_index(letters: str) -> int:
    index = 0
    for ch in letters:
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


class FakeSheet:
    """In-memory stand-in for the values API: a grid of strings plus a call log."""

    def __init__(self, rows=None):
        self.grid = rows or []
        self.calls: list[tuple[str, str]] = []
        self.fail_writes_on: set[str] = set()
        self.fail_reads = False

    @property
    def grid(self) -> list[list[str]]:
        return self._grid

    @grid.setter
    def grid(self, rows) -> None:
        # the sheet owns its cells; callers' row lists are never written through
        self._grid = [list(r) for r in rows]

    @property
    def writes(self):
        return [c for c in self.calls if c[0] in ("write", "clear")]

    def _cells(self, range_spec: str):
        _, _, coords = range_spec.rpartition("!")
        start, _, end = coords.partition(":")
        m1 = _CELL.match(start)
        m2 = _CELL.match(end or start)
        return (
            int(m1.group(2)) - 1, _column_index(m1.group(1)),
            int(m2.group(2)) - 1, _column_index(m2.group(1)),
        )

    def _ensure(self, row: int, col: int):
        while len(self.grid) <= row:
            self.grid.append([])
        line = self.grid[row]
        while len(line) <= col:
            line.append("")

    async def read_range(self, range_spec: str):
        self.calls.append(("read", range_spec))
        if self.fail_reads:
            raise TransportError("HTTP error! status: 503", status_code=503)
        # trailing blanks are trimmed the way the values API does
        rows = []
        for line in self.grid:
            trimmed = list(line)
            while trimmed and trimmed[-1] == "":
                trimmed.pop()
            rows.append(trimmed)
        while rows and not rows[-1]:
            rows.pop()
        return rows

    async def write_range(self, range_spec: str, rows):
        self.calls.append(("write", range_spec))
        if range_spec in self.fail_writes_on:
            raise TransportError("HTTP error! status: 500", status_code=500)
        top, left, _, _ = self._cells(range_spec)
        for r, values in enumerate(rows):
            for c, value in enumerate(values):
                self._ensure(top + r, left + c)
                self.grid[top + r][left + c] = value
        return {"updatedRange": range_spec}

    async def clear_range(self, range_spec: str):
        self.calls.append(("clear", range_spec))
        top, left, bottom, right = self._cells(range_spec)
        for r in range(top, bottom + 1):
            for c in range(left, right + 1):
                if r < len(self.grid) and c < len(self.grid[r]):
                    self.grid[r][c] = ""
        return {"clearedRange": range_spec}




@pytest.fixture
def sheet_config():
    return SheetConfig(spreadsheet_id="sheet-123", api_key="test-key")


@pytest.fixture
def fake_sheet():
    return FakeSheet()


@pytest.fixture
def store(sheet_config, fake_sheet):
    return EmployeeSheetStore(sheet_config, backend=fake_sheet)

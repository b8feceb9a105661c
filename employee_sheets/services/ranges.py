# employee-sheets/employee_sheets/services/ranges.py
"""A1-notation helpers for the fixed eight-column employee table."""
import re
from datetime import datetime, timezone

COLUMNS = (
    "Employee_ID",
    "Name",
    "Department",
    "Position",
    "Status",
    "Login_Time",
    "Break_Time",
    "Last_Activity",
)

_PLAIN_SHEET_NAME = re.compile(r"^[A-Za-z0-9_]+$")


def column_letter(index: int) -> str:
    """Converts a 0-based column index into its A1 letters (0 -> A, 26 -> AA)."""
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")
    letters = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


FIRST_COLUMN = column_letter(0)
LAST_COLUMN = column_letter(len(COLUMNS) - 1)
# Status .. Last_Activity are contiguous, so a status update is one span write
STATUS_COLUMN = column_letter(COLUMNS.index("Status"))


def quote_sheet_name(name: str) -> str:
    if _PLAIN_SHEET_NAME.match(name):
        return name
    return "'" + name.replace("'", "''") + "'"


def _check_row(row: int) -> None:
    if row < 1:
        raise ValueError(f"Row numbers start at 1, got {row}")


def span_range(sheet: str, first_column: str, last_column: str, row: int) -> str:
    _check_row(row)
    return f"{quote_sheet_name(sheet)}!{first_column}{row}:{last_column}{row}"


def row_range(sheet: str, row: int) -> str:
    return span_range(sheet, FIRST_COLUMN, LAST_COLUMN, row)


def header_range(sheet: str) -> str:
    return row_range(sheet, 1)


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-01-01T00:00:00.000Z"""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

# employee-sheets/employee_sheets/services/row_mapper.py
"""
Translation between the header-keyed sheet rows and Employee records.

Row order is significant: the position of a record in the raw read is the
only thing that ties it to a sheet row.
"""
import logging
import re
from typing import List, Optional, Sequence, Tuple

from employee_sheets.schemas.employee import DEFAULT_STATUS, Employee
from employee_sheets.services.ranges import COLUMNS, utc_timestamp

logger = logging.getLogger(__name__)

_SEPARATOR_RUN = re.compile(r"[^a-zA-Z0-9]+(.)")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize_header(label: str) -> str:
    """Maps a header label to its field key: 'Login_Time' -> 'loginTime'."""
    return _SEPARATOR_RUN.sub(lambda m: m.group(1).upper(), label.lower())


def parse_break_time(value: str) -> int:
    match = _LEADING_INT.match(value or "")
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def parse_row(headers: Sequence[str], row: Sequence[str]) -> Optional[Employee]:
    """Builds a record from one data row, or None when the row has no employee id."""
    fields = {}
    for index, header in enumerate(headers):
        value = row[index] if index < len(row) else ""
        fields[normalize_header(header)] = value or ""

    employee_id = fields.get("employeeId", "")
    if not employee_id:
        return None

    return Employee(
        id=employee_id,
        name=fields.get("name", ""),
        department=fields.get("department", ""),
        position=fields.get("position", ""),
        status=fields.get("status") or DEFAULT_STATUS,
        login_time=fields.get("loginTime") or None,
        break_time=parse_break_time(fields.get("breakTime", "")),
        last_activity=fields.get("lastActivity") or utc_timestamp(),
    )


def locate_rows(raw_rows: Sequence[Sequence[str]]) -> List[Tuple[int, Employee]]:
    """Parses a raw read and pairs each record with its 1-based sheet row number."""
    if not raw_rows:
        return []

    headers = raw_rows[0]
    located = []
    for row_number, row in enumerate(raw_rows[1:], start=2):
        record = parse_row(headers, row)
        if record is None:
            logger.debug("Skipping row %d: no employee id", row_number)
            continue
        located.append((row_number, record))
    return located


def parse_table(raw_rows: Sequence[Sequence[str]]) -> List[Employee]:
    return [record for _, record in locate_rows(raw_rows)]


def serialize_record(record: Employee) -> List[str]:
    return [
        record.id,
        record.name,
        record.department,
        record.position,
        record.status,
        record.login_time or "",
        str(record.break_time),
        record.last_activity,
    ]


def serialize_table(records: Sequence[Employee]) -> List[List[str]]:
    return [list(COLUMNS)] + [serialize_record(record) for record in records]

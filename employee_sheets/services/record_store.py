# employee-sheets/employee_sheets/services/record_store.py
"""
Employee records kept in a spreadsheet tab.

The sheet has no row keys. Every write against an existing record first
re-reads the whole table and resolves the record's current row number
(`locate_row`); row numbers are never cached between calls.

Hazards callers must live with:
  * create_record computes its target row from a read. Two concurrent
    creations can pick the same row and the later write wins.
  * bulk_replace writes rows 2..N+1 in input order without reading first and
    clobbers anything written there since the caller's last read.
  * A failure in the middle of bulk_replace leaves the rows that were already
    written in place. Nothing is rolled back.
"""
import asyncio
import logging
from typing import Any, List, Optional, Protocol, Sequence

from employee_sheets.core.config import SheetConfig
from employee_sheets.core.exceptions import RecordNotFound, SheetStoreError
from employee_sheets.schemas.employee import ConnectionStatus, DEFAULT_STATUS, Employee, EmployeeCreate
from employee_sheets.services import row_mapper
from employee_sheets.services.ranges import (
    COLUMNS, LAST_COLUMN, STATUS_COLUMN, header_range, quote_sheet_name, row_range, span_range, utc_timestamp,
)
from employee_sheets.services.sheets_client import SheetsValuesClient

logger = logging.getLogger(__name__)


class RangeBackend(Protocol):
    async def read_range(self, range_spec: str) -> List[List[str]]:
        raise NotImplementedError

    async def write_range(self, range_spec: str, rows: Sequence[Sequence[str]]) -> Any:
        raise NotImplementedError

    async def clear_range(self, range_spec: str) -> Any:
        raise NotImplementedError


class EmployeeSheetStore:
    def __init__(self, config: SheetConfig, backend: Optional[RangeBackend] = None):
        self.config = config
        self._backend = backend or SheetsValuesClient(config)

    @property
    def sheet(self) -> str:
        return self.config.sheet_name

    # --- Reads ---

    async def fetch_table(self) -> List[List[str]]:
        """Raw read of the whole tab, header row included. [] for an empty sheet."""
        return await self._backend.read_range(quote_sheet_name(self.sheet))

    async def list_records(self) -> List[Employee]:
        try:
            return row_mapper.parse_table(await self.fetch_table())
        except SheetStoreError as e:
            logger.error("Error fetching employees: %s", e)
            raise

    async def get_record(self, employee_id: str) -> Optional[Employee]:
        for record in await self.list_records():
            if record.id == employee_id:
                return record
        return None

    async def _locate(self, employee_id: str) -> tuple[int, Employee]:
        for row_number, record in row_mapper.locate_rows(await self.fetch_table()):
            if record.id == employee_id:
                return row_number, record
        raise RecordNotFound(employee_id)

    async def locate_row(self, employee_id: str) -> int:
        """Resolves the sheet row currently holding `employee_id` from a fresh read."""
        row_number, _ = await self._locate(employee_id)
        return row_number

    # --- Writes ---

    async def create_record(self, draft: EmployeeCreate) -> Employee:
        try:
            rows = await self.fetch_table()
            next_row = len(rows) + 1 if rows else 2

            record = Employee(
                id=draft.id,
                name=draft.name,
                department=draft.department,
                position=draft.position,
                status=DEFAULT_STATUS,
                login_time=None,
                break_time=0,
                last_activity=utc_timestamp(),
            )
            await self._backend.write_range(row_range(self.sheet, next_row), [row_mapper.serialize_record(record)])
        except SheetStoreError as e:
            logger.error("Error adding employee: %s", e)
            raise

        logger.info("Added employee %s at row %d", record.id, next_row)
        return record

    async def update_status(
        self,
        employee_id: str,
        status: str,
        login_time: Optional[str] = None,
        break_time: int = 0,
    ) -> Employee:
        """
        Writes status, login time, break time and a fresh last-activity stamp.

        The four cells (E:H) go out as one range write, so a single call never
        leaves the row half-updated.
        """
        try:
            row_number, record = await self._locate(employee_id)
            updated = Employee(**{
                **record.model_dump(),
                "status": status,
                "login_time": login_time or None,
                "break_time": break_time,
                "last_activity": utc_timestamp(),
            })
            values = row_mapper.serialize_record(updated)[COLUMNS.index("Status"):]
            await self._backend.write_range(
                span_range(self.sheet, STATUS_COLUMN, LAST_COLUMN, row_number), [values]
            )
        except SheetStoreError as e:
            logger.error("Error updating employee status: %s", e)
            raise

        return updated

    async def remove_record(self, employee_id: str) -> int:
        """Blanks the record's row. The row itself stays, so later rows keep their numbers."""
        try:
            row_number = await self.locate_row(employee_id)
            await self._backend.clear_range(row_range(self.sheet, row_number))
        except SheetStoreError as e:
            logger.error("Error removing employee: %s", e)
            raise

        logger.info("Cleared row %d (employee %s)", row_number, employee_id)
        return row_number

    async def bulk_replace(self, records: Sequence[Employee]) -> int:
        """Writes records[i] to row i + 2, all writes in flight at once."""
        writes = [
            self._backend.write_range(row_range(self.sheet, index + 2), [row_mapper.serialize_record(record)])
            for index, record in enumerate(records)
        ]
        try:
            await asyncio.gather(*writes)
        except SheetStoreError as e:
            logger.error("Error bulk updating employees: %s", e)
            raise
        return len(writes)

    async def initialize_if_empty(self) -> bool:
        try:
            rows = await self.fetch_table()
            if rows:
                return False
            await self._backend.write_range(header_range(self.sheet), [list(COLUMNS)])
        except SheetStoreError as e:
            logger.error("Error initializing sheet: %s", e)
            raise

        logger.info("Sheet initialized with headers")
        return True

    async def check_connectivity(self) -> ConnectionStatus:
        try:
            await self.fetch_table()
        except Exception as e:
            logger.warning("Connection check failed: %s", e)
            return ConnectionStatus(ok=False, detail=f"Connection failed: {e}")
        return ConnectionStatus(ok=True, detail="Connection successful")

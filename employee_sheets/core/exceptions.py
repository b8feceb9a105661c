# employee-sheets/employee_sheets/core/exceptions.py
class SheetStoreError(Exception):
    """Base exception for the employee sheet store."""


class TransportError(SheetStoreError):
    """Raised when a call to the spreadsheet backend does not succeed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RecordNotFound(SheetStoreError):
    """Raised when no row in the current scan carries the requested employee id."""

    def __init__(self, employee_id: str):
        super().__init__(f"Employee '{employee_id}' not found")
        self.employee_id = employee_id

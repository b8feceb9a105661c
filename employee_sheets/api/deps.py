# employee-sheets/employee_sheets/api/deps.py
from fastapi import HTTPException, Security, status
from fastapi.security.api_key import APIKeyHeader

from employee_sheets.core.config import settings
from employee_sheets.services.record_store import EmployeeSheetStore

# --- Security Dependency ---
api_key_header_scheme = APIKeyHeader(name="X-API-Key")


def get_api_key(key: str = Security(api_key_header_scheme)):
    """Checks if the provided API key matches the one in our settings."""
    if settings.SERVICE_API_KEY and key == settings.SERVICE_API_KEY:
        return key
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Invalid or missing API key"
    )


# --- Store Dependency ---
def get_store() -> EmployeeSheetStore:
    return EmployeeSheetStore(settings.sheet_config())

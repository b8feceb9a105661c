# employee-sheets/employee_sheets/main.py
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from employee_sheets.api.deps import get_store
from employee_sheets.api.v1.api import api_router
from employee_sheets.core.config import settings
from employee_sheets.core.exceptions import TransportError
from employee_sheets.schemas.employee import ConnectionStatus
from employee_sheets.services.record_store import EmployeeSheetStore

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="Employee Sheets API")

# Include the main router for all routes prefixed with /api/v1
app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(TransportError)
async def transport_error_handler(request: Request, exc: TransportError):
    return JSONResponse(status_code=502, content={"detail": str(exc), "upstream_status": exc.status_code})


@app.get("/health", response_model=ConnectionStatus)
async def health(store: EmployeeSheetStore = Depends(get_store)):
    return await store.check_connectivity()

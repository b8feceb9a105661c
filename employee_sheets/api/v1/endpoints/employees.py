# employee-sheets/employee_sheets/api/v1/endpoints/employees.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from employee_sheets.api.deps import get_api_key, get_store
from employee_sheets.core.exceptions import RecordNotFound
from employee_sheets.schemas.employee import Employee, EmployeeCreate, StatusUpdate
from employee_sheets.services.record_store import EmployeeSheetStore

router = APIRouter(dependencies=[Depends(get_api_key)])


@router.get("/employees", response_model=List[Employee])
async def list_employees(store: EmployeeSheetStore = Depends(get_store)):
    return await store.list_records()


@router.get("/employees/{employee_id}", response_model=Employee)
async def read_employee(employee_id: str, store: EmployeeSheetStore = Depends(get_store)):
    record = await store.get_record(employee_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Employee ID '{employee_id}' not found")
    return record


@router.post("/employees", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(draft: EmployeeCreate, store: EmployeeSheetStore = Depends(get_store)):
    """
    Appends an employee below the last row.
    Concurrent calls may land on the same row; the last write wins.
    """
    return await store.create_record(draft)


@router.put("/employees")
async def replace_employees(records: List[Employee], store: EmployeeSheetStore = Depends(get_store)):
    """Overwrites rows 2..N+1 with the given records, in order. No read first."""
    written = await store.bulk_replace(records)
    return {"status": "ok", "rows_written": written}


@router.put("/employees/{employee_id}/status", response_model=Employee)
async def update_employee_status(
    employee_id: str,
    update: StatusUpdate,
    store: EmployeeSheetStore = Depends(get_store)
):
    try:
        return await store.update_status(employee_id, update.status, update.login_time, update.break_time)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_employee(employee_id: str, store: EmployeeSheetStore = Depends(get_store)):
    try:
        await store.remove_record(employee_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return


@router.post("/sheet/initialize")
async def initialize_sheet(store: EmployeeSheetStore = Depends(get_store)):
    return {"initialized": await store.initialize_if_empty()}

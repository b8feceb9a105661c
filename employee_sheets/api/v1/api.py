# employee-sheets/employee_sheets/api/v1/api.py
from fastapi import APIRouter
from employee_sheets.api.v1.endpoints import employees

api_router = APIRouter()

api_router.include_router(employees.router, tags=["Employees"])

# employee-sheets/employee_sheets/schemas/employee.py
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from employee_sheets.services.ranges import utc_timestamp

DEFAULT_STATUS = "logged-out"


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class EmployeeCreate(CamelModel):
    id: str = Field(min_length=1)
    name: str = ""
    department: str = ""
    position: str = ""


class Employee(EmployeeCreate):
    status: str = DEFAULT_STATUS
    login_time: str | None = None
    break_time: int = Field(default=0, ge=0)
    last_activity: str = Field(default_factory=utc_timestamp)


class StatusUpdate(CamelModel):
    status: str
    login_time: str | None = None
    break_time: int = Field(default=0, ge=0)


class ConnectionStatus(BaseModel):
    ok: bool
    detail: str

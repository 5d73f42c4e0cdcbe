from fastapi import APIRouter, Depends, Request

from employee_portal.api.deps import get_employee_service, parse_employee_pk, read_employee_input
from employee_portal.core.responses import error_resp, success_resp
from employee_portal.services.employee_service import EmployeeService
from employee_portal.services.errors import DuplicateKey, EmployeeError, NotFound, ValidationFailed

router = APIRouter(tags=["employees"])

NOT_FOUND_MESSAGE = "Employee not found"
DUPLICATE_MESSAGES = {
    "employee_id": "Employee ID already exists",
    "email": "Email already exists",
    "username": "Username already exists",
}


@router.post("/add-employee")
async def create_employee(
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
):
    try:
        data = await read_employee_input(request)
        new_pk = await service.create_employee(data)
    except ValidationFailed as exc:
        return error_resp(exc.message, status_code=400)
    except DuplicateKey as exc:
        return error_resp(DUPLICATE_MESSAGES[exc.field], status_code=400)
    except EmployeeError as exc:
        return error_resp(f"Database error: {exc}", status_code=500)

    return success_resp(message="Employee added successfully", employeeId=new_pk)


@router.get("/api/employees")
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    try:
        items = await service.list_employees()
    except EmployeeError:
        return error_resp("Database error", status_code=500)

    return success_resp(employees=[e.to_dict() for e in items])


@router.get("/api/employees/{employee_pk}")
async def get_employee(employee_pk: str, service: EmployeeService = Depends(get_employee_service)):
    pk = parse_employee_pk(employee_pk)
    if pk is None:
        return error_resp(NOT_FOUND_MESSAGE, status_code=404)

    try:
        emp = await service.get_employee(pk)
    except NotFound:
        return error_resp(NOT_FOUND_MESSAGE, status_code=404)
    except EmployeeError:
        return error_resp("Database error", status_code=500)

    return success_resp(employee=emp.to_dict(include_password=False))


@router.put("/api/employees/{employee_pk}")
async def update_employee(
    employee_pk: str,
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
):
    pk = parse_employee_pk(employee_pk)
    if pk is None:
        return error_resp(NOT_FOUND_MESSAGE, status_code=404)

    try:
        data = await read_employee_input(request)
        await service.update_employee(pk, data)
    except ValidationFailed as exc:
        return error_resp(exc.message, status_code=400)
    except NotFound:
        return error_resp(NOT_FOUND_MESSAGE, status_code=404)
    except DuplicateKey as exc:
        return error_resp(DUPLICATE_MESSAGES[exc.field], status_code=400)
    except EmployeeError as exc:
        return error_resp(f"Database error: {exc}", status_code=500)

    return success_resp(message="Employee updated successfully")


@router.delete("/api/employees/{employee_pk}")
async def delete_employee(employee_pk: str, service: EmployeeService = Depends(get_employee_service)):
    pk = parse_employee_pk(employee_pk)
    if pk is None:
        return error_resp(NOT_FOUND_MESSAGE, status_code=404)

    try:
        await service.delete_employee(pk)
    except NotFound:
        return error_resp(NOT_FOUND_MESSAGE, status_code=404)
    except EmployeeError:
        return error_resp("Database error", status_code=500)

    return success_resp(message="Employee deleted successfully")

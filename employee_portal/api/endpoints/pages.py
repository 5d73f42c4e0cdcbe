from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates

from employee_portal.api.deps import get_employee_service, parse_employee_pk
from employee_portal.models.employee import EMPLOYMENT_TYPES, GENDERS, PERMISSIONS
from employee_portal.services.employee_service import EmployeeService
from employee_portal.services.errors import EmployeeError, NotFound

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

CHOICES = {"genders": GENDERS, "employment_types": EMPLOYMENT_TYPES, "permissions": PERMISSIONS}


@router.get("/")
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html")


@router.get("/addemployee")
async def add_employee_page(request: Request):
    return templates.TemplateResponse(request, "add_employee.html", dict(CHOICES))


@router.get("/employees")
async def employees_page(request: Request, service: EmployeeService = Depends(get_employee_service)):
    try:
        items = await service.list_employees()
    except EmployeeError:
        return PlainTextResponse("Database error", status_code=500)

    return templates.TemplateResponse(request, "employees.html", {"items": items})


@router.get("/edit-employee/{employee_pk}")
async def edit_employee_page(
    request: Request,
    employee_pk: str,
    service: EmployeeService = Depends(get_employee_service),
):
    pk = parse_employee_pk(employee_pk)
    if pk is None:
        return PlainTextResponse("Employee not found", status_code=404)

    try:
        emp = await service.get_employee(pk)
    except NotFound:
        return PlainTextResponse("Employee not found", status_code=404)
    except EmployeeError:
        return PlainTextResponse("Database error", status_code=500)

    return templates.TemplateResponse(
        request,
        "edit_employee.html",
        {"employee": emp, **CHOICES},
    )

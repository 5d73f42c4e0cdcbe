from json import JSONDecodeError

from fastapi import Request

from employee_portal.schemas.employee import EmployeeInput
from employee_portal.services.employee_service import EmployeeService
from employee_portal.services.errors import ValidationFailed


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


async def read_employee_input(request: Request) -> EmployeeInput:
    """Accept the same fields from a JSON body or an HTML form post."""
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except (JSONDecodeError, UnicodeDecodeError):
            raise ValidationFailed("Request body is not valid JSON")
        if not isinstance(body, dict):
            raise ValidationFailed("Request body must be a JSON object")
        return EmployeeInput.model_validate(body)

    form = await request.form()
    return EmployeeInput.model_validate(dict(form))


# largest value an INT primary key column can hold
MAX_EMPLOYEE_PK = 2**31 - 1


def parse_employee_pk(raw: str) -> int | None:
    # ids that are not plain ASCII digits, or too large for the column, match no row
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    pk = int(raw)
    return pk if pk <= MAX_EMPLOYEE_PK else None

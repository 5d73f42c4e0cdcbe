from fastapi import APIRouter

from employee_portal.api.endpoints import employees, pages


router = APIRouter()
router.include_router(pages.router)
router.include_router(employees.router)

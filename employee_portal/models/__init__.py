from employee_portal.models.employee import Employee  # noqa: F401

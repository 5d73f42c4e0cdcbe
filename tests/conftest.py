import pytest
from fastapi.testclient import TestClient

from employee_portal.db.session import build_engine
from employee_portal.main import create_app
from employee_portal.services.employee_service import EmployeeService
from employee_portal.services.employee_store import EmployeeStore


def employee_payload(**overrides):
    payload = {
        "employeeId": "E1",
        "firstName": "A",
        "lastName": "B",
        "email": "a@b.com",
        "department": "Eng",
        "position": "Dev",
        "employmentType": "full-time",
        "startDate": "2024-01-01",
        "username": "ab1",
        "password": "x",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload():
    return employee_payload


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}"


@pytest.fixture
def client(database_url):
    app = create_app(database_url)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def service(database_url):
    store = EmployeeStore(build_engine(database_url))
    await store.ensure_schema()
    yield EmployeeService(store)
    await store.dispose()

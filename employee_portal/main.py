import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from employee_portal.api.router import router
from employee_portal.core.config import settings
from employee_portal.db.session import build_engine
from employee_portal.services.employee_service import EmployeeService
from employee_portal.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logging.basicConfig(level=settings.LOG_LEVEL)
        url = database_url or settings.DATABASE_URL
        # one engine (and pool) for the whole process, handed to the service
        store = EmployeeStore(build_engine(url))
        await store.ensure_schema()
        app.state.employee_service = EmployeeService(store)
        yield
        await store.dispose()

    app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)
    app.include_router(router)
    return app


# module-level app for `uvicorn employee_portal.main:app`; nothing is
# configured or connected until the lifespan starts
app = create_app()


def main() -> None:
    logger.info("Server running at http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

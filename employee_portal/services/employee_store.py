import logging
from typing import Any, Optional

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from employee_portal.db.base import Base
from employee_portal.db.session import build_sessionmaker
from employee_portal.models.employee import Employee
from employee_portal.services.errors import (
    ConstraintViolation,
    DuplicateKey,
    EmployeeError,
    NotFound,
    StoreError,
)

logger = logging.getLogger(__name__)

# checked in this order when a write collides
UNIQUE_COLUMNS = ("employee_id", "email", "username")


class EmployeeStore:
    """
    Persistence for employee rows.

    Owns the engine (and therefore the connection pool); every public call
    opens its own session and issues a single statement.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._sessions = build_sessionmaker(engine)

    async def ensure_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("employees table ready")

    async def dispose(self) -> None:
        await self.engine.dispose()

    async def insert(self, values: dict[str, Any]) -> int:
        async with self._sessions() as db:
            row = Employee(**values)
            db.add(row)
            try:
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                logger.error("employee insert error: %s", exc.orig)
                failure = await self._integrity_failure(db, values, exc)
                raise failure from exc
            except SQLAlchemyError as exc:
                await db.rollback()
                logger.error("employee insert error: %s", exc)
                raise StoreError(str(exc)) from exc
            return row.id

    async def fetch_all(self) -> list[Employee]:
        async with self._sessions() as db:
            try:
                res = await db.execute(
                    select(Employee).order_by(Employee.created_at.desc(), Employee.id.desc())
                )
            except SQLAlchemyError as exc:
                logger.error("employee select error: %s", exc)
                raise StoreError(str(exc)) from exc
            return list(res.scalars().all())

    async def fetch_by_id(self, employee_pk: int) -> Employee:
        async with self._sessions() as db:
            try:
                res = await db.execute(select(Employee).where(Employee.id == employee_pk))
            except SQLAlchemyError as exc:
                logger.error("employee select error: %s", exc)
                raise StoreError(str(exc)) from exc
            row = res.scalar_one_or_none()
            if row is None:
                raise NotFound(employee_pk)
            return row

    async def update(self, employee_pk: int, values: dict[str, Any]) -> None:
        stmt = (
            update(Employee)
            .where(Employee.id == employee_pk)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with self._sessions() as db:
            try:
                affected = (await db.execute(stmt)).rowcount
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                logger.error("employee update error: %s", exc.orig)
                failure = await self._integrity_failure(db, values, exc, exclude_pk=employee_pk)
                raise failure from exc
            except SQLAlchemyError as exc:
                await db.rollback()
                logger.error("employee update error: %s", exc)
                raise StoreError(str(exc)) from exc

        if affected == 0:
            raise NotFound(employee_pk)

    async def delete_by_id(self, employee_pk: int) -> None:
        async with self._sessions() as db:
            try:
                affected = (await db.execute(delete(Employee).where(Employee.id == employee_pk))).rowcount
                await db.commit()
            except SQLAlchemyError as exc:
                await db.rollback()
                logger.error("employee delete error: %s", exc)
                raise StoreError(str(exc)) from exc

        if affected == 0:
            raise NotFound(employee_pk)

    async def _integrity_failure(
        self,
        db: AsyncSession,
        values: dict[str, Any],
        exc: IntegrityError,
        exclude_pk: Optional[int] = None,
    ) -> EmployeeError:
        """
        Work out which unique column a failed write collided on.

        Looks for another row already holding one of the submitted unique
        values instead of reading the driver's error text. When no such row
        exists the failure was some other constraint (NOT NULL, CHECK...).
        """
        candidates = [(name, values[name]) for name in UNIQUE_COLUMNS if values.get(name) is not None]
        if not candidates:
            return ConstraintViolation(str(exc.orig))

        q = select(*(getattr(Employee, name) for name, _ in candidates)).where(
            or_(*(getattr(Employee, name) == value for name, value in candidates))
        )
        if exclude_pk is not None:
            q = q.where(Employee.id != exclude_pk)

        try:
            rows = (await db.execute(q)).all()
        except SQLAlchemyError as probe_exc:
            return StoreError(str(probe_exc))

        for index, (name, value) in enumerate(candidates):
            if any(row[index] == value for row in rows):
                return DuplicateKey(name)

        return ConstraintViolation(str(exc.orig))

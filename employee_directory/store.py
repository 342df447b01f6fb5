# employee_directory/store.py
"""
Record store for the `employees` table.

One store per engine; routes get it through `get_store`, which also makes sure
the table exists before the request touches it.
"""
import re
from typing import Iterable
from fastapi import Request
from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from employee_directory.core.logger import get_logger
from employee_directory.db import Base
from employee_directory.errors import DuplicateKey, StorageError, StorageUnavailable, ValidationError
from employee_directory.models import Employee
from employee_directory.schemas import DeleteResult, EmployeeIn, EmployeeOut

logger = get_logger(__name__)

UNIQUE_VIOLATION_RE = re.compile(r"unique|duplicate", re.IGNORECASE)


def _is_unique_violation(exc: IntegrityError) -> bool:
    return bool(UNIQUE_VIOLATION_RE.search(str(exc.orig if exc.orig is not None else exc)))


def _inserted_id(result) -> int | None:
    """Primary key reported by the driver for the INSERT, if any."""
    try:
        pk = result.inserted_primary_key
    except SQLAlchemyError:
        return None
    if not pk or pk[0] is None:
        return None
    return int(pk[0])


class EmployeeStore:
    def __init__(self, engine: Engine | None):
        self.engine = engine
        self._sessions = (
            sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
            if engine is not None
            else None
        )

    @property
    def dialect(self) -> str | None:
        return self.engine.dialect.name if self.engine is not None else None

    def _session(self) -> Session:
        if self._sessions is None:
            raise StorageUnavailable("Database is not configured")
        return self._sessions()

    def ensure_schema(self) -> None:
        """Create the employees table if it is missing. Idempotent."""
        if self.engine is None:
            raise StorageUnavailable("Database is not configured")
        try:
            Base.metadata.create_all(self.engine, checkfirst=True)
        except SQLAlchemyError as exc:
            raise StorageUnavailable("Database is unavailable", exc) from exc

    def create(self, data: EmployeeIn) -> EmployeeOut:
        """
        Insert one employee and return the persisted row.

        Uniqueness of `nirc` is left to the UNIQUE constraint; a violation
        raises DuplicateKey. If the driver does not report the new id the row
        is read back by its nirc.
        """
        stmt = insert(Employee.__table__).values(
            nirc=data.nirc,
            full_name=data.full_name,
            position=data.position,
            email=data.email,
        )
        try:
            with self._session() as db, db.begin():
                result = db.execute(stmt)
                new_id = _inserted_id(result)
                row = db.get(Employee, new_id) if new_id is not None else None
                if row is None:
                    logger.warning("insert_id_missing", extra={"nirc": data.nirc})
                    row = db.scalars(select(Employee).where(Employee.nirc == data.nirc)).one_or_none()
                if row is None:
                    raise StorageError("Inserted employee could not be retrieved")
                employee = EmployeeOut.model_validate(row)
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                logger.info("duplicate_nirc", extra={"nirc": data.nirc})
                raise DuplicateKey(data.nirc) from exc
            raise StorageError("Database insert failed", exc) from exc
        except SQLAlchemyError as exc:
            raise StorageError("Database insert failed", exc) from exc

        logger.info("employee_created", extra={"employee_id": employee.id, "nirc": employee.nirc})
        return employee

    def list_all(self) -> list[EmployeeOut]:
        """All employees, most recent first."""
        stmt = select(Employee).order_by(Employee.created_at.desc(), Employee.id.desc())
        try:
            with self._session() as db:
                return [EmployeeOut.model_validate(row) for row in db.scalars(stmt)]
        except SQLAlchemyError as exc:
            raise StorageError("Database query failed", exc) from exc

    def delete_many(self, ids: Iterable[int]) -> DeleteResult:
        """
        Delete every requested employee or none of them.

        Existence check and DELETE share one transaction. If any id is
        missing nothing is removed and the result names the missing ids.
        """
        wanted = sorted(set(ids))
        if not wanted:
            raise ValidationError(["ids must be a non-empty array of employee IDs"])

        try:
            with self._session() as db, db.begin():
                found = set(
                    db.scalars(
                        select(Employee.id).where(Employee.id.in_(wanted)).with_for_update()
                    )
                )
                missing = [i for i in wanted if i not in found]
                if missing:
                    logger.info("delete_aborted", extra={"requested": wanted, "missing": missing})
                    return DeleteResult(
                        success=False,
                        deleted_count=0,
                        errors=[f"Employees not found: {', '.join(str(i) for i in missing)}"],
                        missing_ids=missing,
                    )
                result = db.execute(
                    delete(Employee)
                    .where(Employee.id.in_(wanted))
                    .execution_options(synchronize_session=False)
                )
                deleted = result.rowcount
        except SQLAlchemyError as exc:
            raise StorageError("Database delete failed", exc) from exc

        logger.info("employees_deleted", extra={"requested": wanted, "deleted": deleted})
        return DeleteResult(success=True, deleted_count=deleted)


# FastAPI dependency; the table is ensured on every request
def get_store(request: Request) -> EmployeeStore:
    store: EmployeeStore = request.app.state.store
    store.ensure_schema()
    return store

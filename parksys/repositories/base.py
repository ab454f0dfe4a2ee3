"""Generic CRUD repository over a request-scoped SQLAlchemy session."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from parksys.core.errors import ConflictError, NotFoundError, ValidationFailedError
from parksys.models.base import Base, utcnow
from parksys.models.park import Park

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)

# Columns no caller may write directly.
PROTECTED_COLUMNS = frozenset({"id", "created_at", "updated_at"})


class BaseRepository(Generic[ModelT]):
    """
    Persistence for one entity: get, list, create, update, delete.

    Holds no business rules. Concrete repositories set ``model`` and ``label``
    (used in not-found messages). The session is owned by the caller.
    """

    model: ClassVar[type[Base]]
    label: ClassVar[str] = "Record"

    def __init__(self, session: Session) -> None:
        self.session = session

    # ---------- READ ----------

    def get(self, id_: int) -> ModelT | None:
        return self.session.get(self.model, id_)

    def get_or_404(self, id_: int) -> ModelT:
        entity = self.get(id_)
        if entity is None:
            raise NotFoundError(f"{self.label} {id_} not found")
        return entity

    def list(self, offset: int = 0, limit: int = 100) -> list[ModelT]:
        return (
            self.session.query(self.model)
            .order_by(self.model.id)
            .offset(offset)
            .limit(limit)
            .all()
        )

    # ---------- CREATE ----------

    def create(self, **fields: Any) -> ModelT:
        self._check_columns(fields)
        entity = self.model(**fields)
        self.session.add(entity)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError(f"{self.label} conflicts with existing data") from e
        self.session.refresh(entity)
        return entity

    # ---------- UPDATE ----------

    def update_fields(self, id_: int, **values: Any) -> ModelT:
        """
        Set only the named columns (plus updated_at) on exactly one row.

        Runs a single ``UPDATE ... WHERE id = :id`` with bound parameters. If no
        row matches, the transaction is rolled back and NotFoundError is raised.
        Returns the row as re-read after commit.
        """
        if not values:
            raise ValidationFailedError("No fields to update")
        self._check_columns(values)
        if "updated_at" in self.model.__table__.columns:
            values["updated_at"] = utcnow()

        stmt = (
            update(self.model)
            .where(self.model.id == id_)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.session.execute(stmt)
            if result.rowcount != 1:
                self.session.rollback()
                raise NotFoundError(f"{self.label} {id_} not found")
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError(f"{self.label} conflicts with existing data") from e

        logger.info(
            "Updated %s %s",
            self.model.__tablename__,
            id_,
            extra={"fields": sorted(k for k in values if k != "updated_at")},
        )
        return self.session.get(self.model, id_, populate_existing=True)

    # ---------- DELETE ----------

    def delete(self, id_: int) -> None:
        entity = self.get_or_404(id_)
        self.session.delete(entity)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError(f"{self.label} {id_} is still referenced") from e

    def _check_columns(self, fields: dict[str, Any]) -> None:
        columns = self.model.__table__.columns
        writable = set(columns.keys()) - PROTECTED_COLUMNS
        unknown = sorted(set(fields) - writable)
        if unknown:
            raise ValidationFailedError(f"Unknown or read-only field(s): {', '.join(unknown)}")
        nulls = sorted(
            name for name, value in fields.items() if value is None and not columns[name].nullable
        )
        if nulls:
            raise ValidationFailedError(f"Field(s) cannot be null: {', '.join(nulls)}")

    # ---------- REFERENCES ----------

    def _require_row(self, model: type[Base], id_: int | None, label: str) -> None:
        """NotFoundError unless ``id_`` is None or names an existing ``model`` row."""
        if id_ is not None and self.session.get(model, id_) is None:
            raise NotFoundError(f"{label} {id_} not found")

    def _require_park(self, park_id: int | None) -> None:
        if park_id is None:
            return
        park = self.session.get(Park, park_id)
        if park is None or park.is_deleted:
            raise NotFoundError(f"Park {park_id} not found")

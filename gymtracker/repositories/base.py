# gymtracker/repositories/base.py
from __future__ import annotations
from typing import Any, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gymtracker.errors import PersistenceError

T = TypeVar("T")  # SQLAlchemy model type

class Store:
    """Thin persistence collaborator over a SQLAlchemy 2.0 session.

    Every storage failure surfaces as PersistenceError; callers decide
    whether to propagate or swallow it.
    """
    def __init__(self, db: Session):
        self.db = db

    def insert(self, entity: T) -> T:
        self.db.add(entity)
        return entity

    def save(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(str(e)) from e

    def fetch(self, model: type[T], *sort_by: Any, where: Any = None) -> list[T]:
        stmt = select(model)
        if where is not None:
            stmt = stmt.where(where)
        if sort_by:
            stmt = stmt.order_by(*sort_by)
        try:
            return list(self.db.execute(stmt).unique().scalars().all())
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e

    def get(self, model: type[T], entity_id: int) -> Optional[T]:
        try:
            return self.db.get(model, entity_id)
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e

class BaseRepository(Store):
    """Store bound to a single model."""
    model: type

    def find(self, entity_id: int):
        return self.get(self.model, entity_id)

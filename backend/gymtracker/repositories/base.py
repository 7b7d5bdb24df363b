# gymtracker/repositories/base.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Generic, Iterator, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

log = logging.getLogger(__name__)

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def get_owned(self, entity_id: str, user_id: str) -> Optional[T]:
        """Row with this id belonging to `user_id`; None for missing or foreign rows alike."""
        stmt = select(self.model).where(self.model.id == entity_id, self.model.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    @contextmanager
    def unit_of_work(self) -> Iterator[Session]:
        """
        Everything staged inside the block is committed together.
        Any store error rolls the whole block back before it propagates.
        """
        try:
            yield self.db
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.warning("rolled back %s write: %s", self.model.__name__, e.__class__.__name__)
            raise

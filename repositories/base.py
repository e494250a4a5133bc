"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common data access operations.

    Writes only flush; committing is left to ``transaction()`` so that
    several writes can share one unit of work.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """
        Run the enclosed writes as a single unit of work.

        Commits when the block exits normally, rolls back everything written
        inside the block when it raises.
        """
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def add(self, entity: ModelType) -> ModelType:
        """Stage a new entity and flush it so database defaults are populated"""
        self.db.add(entity)
        self.db.flush()
        return entity

    def remove(self, entity: ModelType) -> None:
        """Delete an entity (ORM cascades apply)"""
        self.db.delete(entity)
        self.db.flush()

# warehouse_inventory/repositories/base.py
from typing import Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from warehouse_inventory.exceptions import ConstraintViolationError
from warehouse_inventory.logging_setup import get_logger

logger = get_logger('warehouse_inventory.repositories')

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """Generic persistence operations for one mapped entity.

    Repositories never commit. Writes are flushed so that identity keys
    are assigned and constraint violations surface at the call site; the
    caller owns the transaction (see db.session_scope).
    """

    model: Type[T] = None

    def __init__(self, session: Session):
        """Initialize the repository.

        Args:
            session: Database session
        """
        self.session = session

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _write(self, action: str, operation):
        """Apply one write inside a savepoint and flush it.

        A database rejection undoes only this write. Earlier pending or flushed
        work in the caller's transaction is kept.
        """
        try:
            with self.session.begin_nested():
                operation()
                self.session.flush()
        except IntegrityError as e:
            logger.warning(f"{self.entity_name} {action} rejected: {e.orig}")
            raise ConstraintViolationError(
                f"{self.entity_name} {action} violates a database constraint",
                details={'entity': self.entity_name, 'error': str(e.orig)}
            ) from e

    def save(self, entity: T) -> T:
        """Insert or update an entity.

        Args:
            entity: Entity to persist

        Returns:
            The same entity, with its id assigned

        Raises:
            ConstraintViolationError: if a uniqueness, not-null or foreign key rule is broken
        """
        self._write('save', lambda: self.session.add(entity))
        logger.debug(f"Saved {entity!r}")
        return entity

    def save_all(self, entities: Iterable[T]) -> List[T]:
        """Insert or update several entities in one flush."""
        entities = list(entities)
        self._write('save', lambda: self.session.add_all(entities))
        logger.debug(f"Saved {len(entities)} {self.entity_name} rows")
        return entities

    def get(self, entity_id: int) -> Optional[T]:
        """Get an entity by ID.

        Returns:
            Entity or None if not found
        """
        return self.session.get(self.model, entity_id)

    def find_all(self) -> List[T]:
        return self.session.query(self.model).all()

    def exists_by_id(self, entity_id: int) -> bool:
        return self.session.query(
            self.session.query(self.model).filter(self.model.id == entity_id).exists()
        ).scalar()

    def count(self) -> int:
        return self.session.query(func.count(self.model.id)).scalar()

    def delete(self, entity: T) -> None:
        """Delete an entity. Owned children go with it."""
        logger.debug(f"Deleting {entity!r}")
        self._write('delete', lambda: self.session.delete(entity))

    def delete_by_id(self, entity_id: int) -> bool:
        """Delete an entity by ID.

        Returns:
            True if a row was deleted, False if nothing matched
        """
        entity = self.get(entity_id)
        if entity is None:
            return False

        self.delete(entity)
        return True

"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Repositories only flush; committing is the caller's responsibility.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def create(self, obj: T) -> T:
        """
        Create a new record in the database.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance (with its primary key assigned)
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    def delete(self, obj: T) -> None:
        """
        Delete a record from the database.

        Args:
            obj: Model instance to delete
        """
        self.db.delete(obj)
        self.db.flush()

    def delete_by_id(self, id: int) -> bool:
        """
        Delete a record by its ID.

        Args:
            id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        obj = self.get_by_id(id)
        if obj:
            self.delete(obj)
            return True
        return False

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()

    def exists(self, id: int) -> bool:
        """
        Check if a record exists by ID.

        Args:
            id: Primary key value

        Returns:
            True if exists, False otherwise
        """
        return self.db.query(self.model).filter(self.model.id == id).count() > 0

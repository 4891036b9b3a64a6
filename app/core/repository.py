"""Base repository pattern implementation.

Repositories are the storage-client seam of the application: services talk
to the database only through them, and tests swap the session underneath.
"""

from typing import Any, Generic, TypeVar, cast
from uuid import UUID

from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """Generic repository with common CRUD operations.

    Example:
        ```python
        class CourseRepository(BaseRepository[Course]):
            def __init__(self, db: Session):
                super().__init__(db, Course)
        ```
    """

    def __init__(self, db: Session, model: type[ModelType]):
        """Initialize repository with database session and model class.

        Args:
            db: SQLAlchemy session.
            model: The model class this repository operates on.
        """
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: UUID) -> ModelType | None:
        """Get a single entity by ID.

        Args:
            entity_id: The UUID of the entity.

        Returns:
            The entity if found, None otherwise.
        """
        result = self.db.get(self.model, entity_id)
        return cast(ModelType | None, result)

    def find_one_by(self, **filters: Any) -> ModelType | None:
        """Get the first entity whose columns equal the given values."""
        result = self.db.query(self.model).filter_by(**filters).first()
        return cast(ModelType | None, result)

    def list_newest_first(self) -> list[ModelType]:
        """Get all entities ordered by ``created_at`` descending."""
        result = (
            self.db.query(self.model)
            .order_by(self.model.created_at.desc())  # type: ignore[attr-defined]
            .all()
        )
        return cast(list[ModelType], result)

    def count(self) -> int:
        """Count total number of entities."""
        result: int = self.db.query(self.model).count()
        return result

    def create(self, **kwargs: object) -> ModelType:
        """Create a new entity.

        Args:
            **kwargs: Entity attributes.

        Returns:
            The created entity, refreshed from the database.
        """
        instance = self.model(**kwargs)
        self.db.add(instance)
        self.db.commit()
        self.db.refresh(instance)
        return instance

    def update(self, instance: ModelType, **kwargs: object) -> ModelType:
        """Set the given attributes on an existing entity and persist them.

        Unknown attribute names are ignored.
        """
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        self.db.commit()
        self.db.refresh(instance)
        return instance

    def delete(self, instance: ModelType) -> None:
        """Delete an entity."""
        self.db.delete(instance)
        self.db.commit()

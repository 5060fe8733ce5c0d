from typing import Any, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from carrier_intake.db.base import BaseModel

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common persistence operations.

    This class implements the repository pattern with async database operations,
    providing a foundation for domain-specific repositories to extend.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new entity.

        Args:
            **kwargs: Field values for the new entity

        Returns:
            The created entity with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        self.db.add(instance)
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def get_by_id(self, id: UUID) -> Optional[ModelType]:
        """
        Retrieve an entity by its ID.

        Args:
            id: The UUID of the entity

        Returns:
            The entity if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        order_by: Optional[Any] = None
    ) -> List[ModelType]:
        """
        Retrieve entities with pagination.

        Args:
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return
            order_by: Optional ordering clause

        Returns:
            List of entities
        """
        stmt = select(self.model)

        if order_by is not None:
            stmt = stmt.order_by(order_by)

        stmt = stmt.offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(self, *criteria: Any) -> int:
        """
        Count stored entities.

        Args:
            *criteria: Optional WHERE clauses restricting the count

        Returns:
            Number of matching entities
        """
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(stmt)
        return result.scalar_one()

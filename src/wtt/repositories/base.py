"""Base repository with common CRM lookups."""

from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.wtt.models import ForeignObject

ModelType = TypeVar("ModelType", bound=ForeignObject)


class BaseRepository(Generic[ModelType]):
    """Base repository providing segment-scoped data access.

    Repositories handle data access only. Transaction control (commit)
    is done by CrmGateway.transaction().
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession, segment: str):
        self.session = session
        self.segment = segment

    def _select(self, include_disabled: bool = False) -> Any:
        query = select(self.model).where(self.model.segment == self.segment)
        if not include_disabled:
            query = query.where(self.model.disabled == False)  # noqa: E712
        return query

    async def get_by_id(self, id: str) -> ModelType | None:
        """Get a record by id, whether active or disabled."""
        result = await self.session.execute(
            self._select(include_disabled=True).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_active(self, id: str | None) -> ModelType | None:
        """Get a record by id; disabled records are treated as missing."""
        if not id:
            return None
        result = await self.session.execute(self._select().where(self.model.id == id))
        return result.scalar_one_or_none()

    async def find(
        self,
        *criteria: Any,
        order_by: Any = None,
        include_disabled: bool = False,
    ) -> list[ModelType]:
        """List records matching all criteria, ordered by `order_by` then id."""
        query = self._select(include_disabled).where(*criteria)
        if order_by is not None:
            query = query.order_by(order_by)
        query = query.order_by(self.model.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

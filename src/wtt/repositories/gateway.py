"""CRM repository gateway - lookup, query, create and transactions.

The gateway is the only boundary the service layer talks to. It scopes
every repository to the configured segment and owns transaction control.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from src.wtt.core.config import GatewayConfig
from src.wtt.core.exceptions import InternalError, WttServiceError
from src.wtt.core.logging import get_logger
from src.wtt.models import (
    Account,
    AccountAssignment,
    Activity,
    ActivityCreator,
    ActivityLink,
    ActivityTracker,
    ForeignObject,
    Resource,
    ResourceAssignment,
)
from src.wtt.models.base import new_uid, utc_now
from src.wtt.repositories.account import AccountAssignmentRepository, AccountRepository
from src.wtt.repositories.activity import (
    ActivityCreatorRepository,
    ActivityLinkRepository,
    ActivityRepository,
    ActivityTrackerRepository,
)
from src.wtt.repositories.base import BaseRepository
from src.wtt.repositories.resource import ResourceAssignmentRepository, ResourceRepository

logger = get_logger(__name__)

M = TypeVar("M", bound=ForeignObject)
R = TypeVar("R")


class CrmGateway:
    """Unit of work over the CRM object graph."""

    def __init__(self, session: AsyncSession, config: GatewayConfig):
        self.session = session
        self.config = config

        segment = config.segment_path
        self.accounts = AccountRepository(session, segment)
        self.account_assignments = AccountAssignmentRepository(session, segment)
        self.trackers = ActivityTrackerRepository(session, segment)
        self.creators = ActivityCreatorRepository(session, segment)
        self.activities = ActivityRepository(session, segment)
        self.links = ActivityLinkRepository(session, segment)
        self.resources = ResourceRepository(session, segment)
        self.resource_assignments = ResourceAssignmentRepository(session, segment)

        self._repositories: dict[type[ForeignObject], BaseRepository[Any]] = {
            Account: self.accounts,
            AccountAssignment: self.account_assignments,
            ActivityTracker: self.trackers,
            ActivityCreator: self.creators,
            Activity: self.activities,
            ActivityLink: self.links,
            Resource: self.resources,
            ResourceAssignment: self.resource_assignments,
        }

    def repository(self, kind: type[M]) -> BaseRepository[M]:
        try:
            return self._repositories[kind]
        except KeyError:
            raise ValueError(f"No repository for {kind.__name__}") from None

    async def find_by_id(self, kind: type[M], id: str) -> M | None:
        """Look up an object of `kind` by id (active or disabled)."""
        return await self.repository(kind).get_by_id(id)

    async def query(
        self,
        kind: type[M],
        *criteria: Any,
        order_by: Any = None,
        include_disabled: bool = False,
    ) -> list[M]:
        """List active objects of `kind` matching all criteria."""
        return await self.repository(kind).find(
            *criteria, order_by=order_by, include_disabled=include_disabled
        )

    async def create(
        self, kind: type[M], *, id: str | None = None, **fields: Any
    ) -> M:
        """Create an object in the configured segment.

        Must run inside transaction(); the object is flushed so that
        dependent objects created afterwards can reference it.
        """
        now = utc_now()
        entity = kind(
            id=id or new_uid(),
            segment=self.config.segment_path,
            created_at=now,
            created_by=self.config.principal,
            modified_at=now,
            modified_by=self.config.principal,
            **fields,
        )
        self.session.add(entity)
        await self.session.flush()
        return entity

    def touch(self, entity: ForeignObject) -> None:
        """Stamp modification audit fields."""
        entity.modified_at = utc_now()
        entity.modified_by = self.config.principal

    def update(self, entity: ForeignObject, **fields: Any) -> None:
        """Apply field changes; must run inside transaction()."""
        for name, value in fields.items():
            setattr(entity, name, value)
        self.touch(entity)

    def disable(self, entity: ForeignObject) -> None:
        """Soft-delete an object; must run inside transaction()."""
        entity.disabled = True
        self.touch(entity)

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[None]:
        """Commit on success, roll back on any failure.

        Service errors raised by the body propagate unchanged. Any other
        failure (including the commit itself) surfaces as InternalError.
        """
        try:
            yield
            await self.session.commit()
        except WttServiceError:
            await self._rollback()
            raise
        except Exception as e:
            logger.exception("Gateway transaction failed", error=str(e))
            await self._rollback()
            raise InternalError(str(e) or type(e).__name__) from e

    async def run_transaction(self, body: Callable[[], Awaitable[R]]) -> R:
        """Run `body` inside transaction() and return its result."""
        async with self.transaction():
            return await body()

    async def _rollback(self) -> None:
        # A failing rollback must never mask the original error
        try:
            await self.session.rollback()
        except Exception as e:
            logger.warning("Rollback failed", error=str(e))

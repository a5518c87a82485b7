"""Repositories for resources and resource assignments."""

from src.wtt.models import Resource, ResourceAssignment
from src.wtt.repositories.base import BaseRepository


class ResourceRepository(BaseRepository[Resource]):
    """Repository for resources."""

    model = Resource


class ResourceAssignmentRepository(BaseRepository[ResourceAssignment]):
    """Repository for resources assigned to activities."""

    model = ResourceAssignment

    async def list_by_activity(self, activity_id: str) -> list[ResourceAssignment]:
        """List active assignments of an activity in creation order."""
        return await self.find(
            ResourceAssignment.activity_id == activity_id,
            order_by=ResourceAssignment.created_at,
        )

    async def get_on_activity(
        self, activity_id: str, id: str, include_disabled: bool = False
    ) -> ResourceAssignment | None:
        """Get an assignment by id, only if it belongs to the activity."""
        assignments = await self.find(
            ResourceAssignment.activity_id == activity_id,
            ResourceAssignment.id == id,
            include_disabled=include_disabled,
        )
        return assignments[0] if assignments else None

    async def list_for_resource(
        self, activity_id: str, resource_id: str
    ) -> list[ResourceAssignment]:
        """List active assignments of one resource on an activity."""
        return await self.find(
            ResourceAssignment.activity_id == activity_id,
            ResourceAssignment.resource_id == resource_id,
            order_by=ResourceAssignment.created_at,
        )

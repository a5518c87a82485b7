"""Repositories for activity trackers, creators, activities and links."""

from sqlalchemy import exists
from sqlalchemy.orm import aliased
from sqlmodel import select

from src.wtt.models import (
    Activity,
    ActivityClass,
    ActivityCreator,
    ActivityLink,
    ActivityLinkType,
    ActivityTracker,
    TrackerKind,
)
from src.wtt.repositories.base import BaseRepository


class ActivityTrackerRepository(BaseRepository[ActivityTracker]):
    """Repository for activity trackers."""

    model = ActivityTracker

    async def list_customer_project_groups(self) -> list[ActivityTracker]:
        """List active customer project groups in name order."""
        return await self.find(
            ActivityTracker.tracker_kind == TrackerKind.CUSTOMER_PROJECT_GROUP.value,
            order_by=ActivityTracker.name,
        )

    async def get_customer_project_group(self, id: str) -> ActivityTracker | None:
        """Get an active customer project group by id."""
        tracker = await self.get_active(id)
        if tracker is None or not tracker.is_customer_project_group:
            return None
        return tracker


class ActivityCreatorRepository(BaseRepository[ActivityCreator]):
    """Repository for activity creators."""

    model = ActivityCreator

    async def get_for_class(
        self, tracker_id: str, activity_class: ActivityClass
    ) -> ActivityCreator | None:
        """Get the tracker's creator for the given activity class."""
        creators = await self.find(
            ActivityCreator.tracker_id == tracker_id,
            ActivityCreator.activity_class == activity_class.value,
            order_by=ActivityCreator.created_at,
        )
        return creators[0] if creators else None


def activity_sort_key(activity: Activity) -> tuple[str, str]:
    """Sibling ordering independent of database collation; id breaks ties."""
    return (activity.name.casefold(), activity.id)


class ActivityRepository(BaseRepository[Activity]):
    """Repository for activities (projects and sub-projects).

    Lists come back in activity_sort_key order.
    """

    model = Activity

    def _is_child_link(self):
        # Links to a disabled parent are ignored; such orphans list as top-level
        parent = aliased(Activity)
        return exists().where(
            ActivityLink.activity_id == Activity.id,
            ActivityLink.activity_link_type == ActivityLinkType.IS_CHILD_OF.value,
            ActivityLink.disabled == False,  # noqa: E712
            ActivityLink.link_to_id == parent.id,
            parent.disabled == False,  # noqa: E712
        )

    async def list_by_tracker(self, tracker_id: str) -> list[Activity]:
        """List all active activities of a tracker, at any depth."""
        activities = await self.find(Activity.tracker_id == tracker_id)
        return sorted(activities, key=activity_sort_key)

    async def list_top_level(self, tracker_id: str) -> list[Activity]:
        """List active activities of a tracker without an active parent."""
        activities = await self.find(Activity.tracker_id == tracker_id, ~self._is_child_link())
        return sorted(activities, key=activity_sort_key)

    async def list_children(self, parent_id: str) -> list[Activity]:
        """List active activities owning an IS_CHILD_OF link to `parent_id`."""
        query = select(Activity).where(
            Activity.segment == self.segment,
            Activity.disabled == False,  # noqa: E712
            Activity.id.in_(  # type: ignore[union-attr]
                select(ActivityLink.activity_id).where(
                    ActivityLink.link_to_id == parent_id,
                    ActivityLink.activity_link_type == ActivityLinkType.IS_CHILD_OF.value,
                    ActivityLink.disabled == False,  # noqa: E712
                )
            ),
        )
        result = await self.session.execute(query)
        return sorted(result.scalars().all(), key=activity_sort_key)


class ActivityLinkRepository(BaseRepository[ActivityLink]):
    """Repository for typed links between activities."""

    model = ActivityLink

    async def is_child_of(self, child_id: str, parent_id: str) -> bool:
        """Check whether `child_id` owns an active IS_CHILD_OF link to `parent_id`."""
        links = await self.find(
            ActivityLink.activity_id == child_id,
            ActivityLink.link_to_id == parent_id,
            ActivityLink.activity_link_type == ActivityLinkType.IS_CHILD_OF.value,
        )
        return bool(links)

"""Activity models - trackers, creators, activities and their links."""

from datetime import datetime
from typing import ClassVar

from sqlmodel import Field

from src.wtt.models.base import ForeignObject
from src.wtt.models.enums import ActivityClass, ActivityPriority, TrackerKind


class ActivityTracker(ForeignObject, table=True):
    """Activity group; customer project groups back companies."""

    __tablename__ = "activity_trackers"

    xri_package: ClassVar[str] = "org.opencrx.kernel.activity1"
    xri_collection: ClassVar[str] = "activityTracker"

    name: str = Field(max_length=200, index=True)
    description: str | None = Field(default=None, max_length=1000)
    tracker_kind: str = Field(default=TrackerKind.GENERIC.value, max_length=50, index=True)

    @property
    def is_customer_project_group(self) -> bool:
        return self.tracker_kind == TrackerKind.CUSTOMER_PROJECT_GROUP.value


class ActivityCreator(ForeignObject, table=True):
    """Template creating activities of one class inside a tracker."""

    __tablename__ = "activity_creators"

    xri_package: ClassVar[str] = "org.opencrx.kernel.activity1"
    xri_collection: ClassVar[str] = "activityCreator"

    tracker_id: str = Field(foreign_key="activity_trackers.id", index=True, max_length=64)
    name: str = Field(max_length=200)
    activity_class: int = Field(default=ActivityClass.INCIDENT.value)


class Activity(ForeignObject, table=True):
    """Activity; customer projects and their sub-projects."""

    __tablename__ = "activities"

    xri_package: ClassVar[str] = "org.opencrx.kernel.activity1"
    xri_collection: ClassVar[str] = "activity"

    tracker_id: str = Field(foreign_key="activity_trackers.id", index=True, max_length=64)
    creator_id: str | None = Field(
        default=None, foreign_key="activity_creators.id", max_length=64
    )
    name: str = Field(max_length=200, index=True)
    description: str | None = Field(default=None, max_length=1000)
    detailed_description: str | None = Field(default=None)
    activity_class: int = Field(default=ActivityClass.INCIDENT.value)
    priority: int = Field(default=ActivityPriority.NA.value)
    scheduled_start: datetime | None = Field(default=None)
    scheduled_end: datetime | None = Field(default=None)


class ActivityLink(ForeignObject, table=True):
    """Typed link owned by one activity and pointing at another.

    A sub-project owns an IS_CHILD_OF link whose target is its parent.
    """

    __tablename__ = "activity_links"

    xri_package: ClassVar[str] = "org.opencrx.kernel.activity1"
    xri_collection: ClassVar[str] = "activityLinkTo"

    activity_id: str = Field(foreign_key="activities.id", index=True, max_length=64)
    link_to_id: str = Field(foreign_key="activities.id", index=True, max_length=64)
    activity_link_type: int = Field(index=True)
    name: str | None = Field(default=None, max_length=200)

"""Resource models - people assignable to activities."""

from typing import ClassVar

from sqlmodel import Field

from src.wtt.models.base import ForeignObject
from src.wtt.models.enums import ResourceRole


class Resource(ForeignObject, table=True):
    """Resource (person/contact) owned by the activity segment."""

    __tablename__ = "resources"

    xri_package: ClassVar[str] = "org.opencrx.kernel.activity1"
    xri_collection: ClassVar[str] = "resource"

    name: str = Field(max_length=200, index=True)
    contact_id: str | None = Field(default=None, max_length=64)


class ResourceAssignment(ForeignObject, table=True):
    """Resource assigned to an activity.

    resource_id is an unowned reference; it carries no foreign key so an
    assignment outlives (and never removes) the resource it names.
    """

    __tablename__ = "resource_assignments"

    xri_package: ClassVar[str] = "org.opencrx.kernel.activity1"
    xri_collection: ClassVar[str] = "assignedResource"

    activity_id: str = Field(foreign_key="activities.id", index=True, max_length=64)
    resource_id: str | None = Field(default=None, index=True, max_length=64)
    name: str = Field(default="", max_length=200)
    resource_role: int = Field(default=ResourceRole.MEMBER.value)

from datetime import UTC, datetime
from typing import ClassVar
from uuid import uuid4

from sqlmodel import Field, SQLModel

from src.wtt.models.enums import EntityState

XRI_PREFIX = "xri://@openmdx*"


def utc_now() -> datetime:
    """Return current UTC time as naive datetime (for TIMESTAMP columns).

    Database columns use TIMESTAMP WITHOUT TIME ZONE, so we strip tzinfo.
    All times are stored in UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)


def new_uid() -> str:
    """Generate an opaque object id."""
    return uuid4().hex


def last_segment(path: str) -> str:
    """Return the last segment of an identity path."""
    return path.rstrip("/").rsplit("/", 1)[-1]


class ForeignObject(SQLModel):
    """Columns shared by every object of the CRM kernel.

    Subclasses declare the kernel package and the collection name under
    which the object is addressed inside its segment.
    """

    xri_package: ClassVar[str]
    xri_collection: ClassVar[str]

    id: str = Field(default_factory=new_uid, primary_key=True, max_length=64)
    segment: str = Field(max_length=200, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    created_by: str | None = Field(default=None, max_length=100)
    modified_at: datetime = Field(default_factory=utc_now)
    modified_by: str | None = Field(default=None, max_length=100)
    disabled: bool = Field(default=False, index=True)

    @property
    def xri(self) -> str:
        """Full identity path of this object."""
        return f"{XRI_PREFIX}{self.xri_package}/{self.segment}/{self.xri_collection}/{self.id}"

    @property
    def state(self) -> EntityState:
        return EntityState.DISABLED if self.disabled else EntityState.ACTIVE

    @property
    def is_active(self) -> bool:
        return not self.disabled

"""Account models - organizations of the CRM account segment."""

from typing import ClassVar

from sqlmodel import Field

from src.wtt.models.base import ForeignObject
from src.wtt.models.enums import AccountRole


class Account(ForeignObject, table=True):
    """Legal entity (customer organization) in the account segment."""

    __tablename__ = "accounts"

    xri_package: ClassVar[str] = "org.opencrx.kernel.account1"
    xri_collection: ClassVar[str] = "account"

    name: str = Field(max_length=200, index=True)
    description: str | None = Field(default=None, max_length=1000)


class AccountAssignment(ForeignObject, table=True):
    """Account assigned to an activity tracker in a given role."""

    __tablename__ = "account_assignments"

    xri_package: ClassVar[str] = "org.opencrx.kernel.activity1"
    xri_collection: ClassVar[str] = "assignedAccount"

    tracker_id: str = Field(foreign_key="activity_trackers.id", index=True, max_length=64)
    account_id: str = Field(foreign_key="accounts.id", index=True, max_length=64)
    account_role: int = Field(default=AccountRole.CUSTOMER.value)

"""Model exports.

Re-exports all CRM models.
Import from here: `from src.wtt.models import Activity, ActivityTracker`
"""

# Enums
from src.wtt.models.enums import (
    AccountRole,
    ActivityClass,
    ActivityLinkType,
    ActivityPriority,
    EntityState,
    ResourceRole,
    TrackerKind,
)

# Account segment
from src.wtt.models.account import Account, AccountAssignment

# Activity segment
from src.wtt.models.activity import Activity, ActivityCreator, ActivityLink, ActivityTracker
from src.wtt.models.base import ForeignObject
from src.wtt.models.resource import Resource, ResourceAssignment

__all__ = [
    # Enums
    "AccountRole",
    "ActivityClass",
    "ActivityLinkType",
    "ActivityPriority",
    "EntityState",
    "ResourceRole",
    "TrackerKind",
    # Base
    "ForeignObject",
    # Account segment
    "Account",
    "AccountAssignment",
    # Activity segment
    "Activity",
    "ActivityCreator",
    "ActivityLink",
    "ActivityTracker",
    "Resource",
    "ResourceAssignment",
]

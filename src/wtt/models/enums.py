"""Shared enums for models.

Integer codes follow the CRM kernel's own code tables.
"""

from enum import Enum, IntEnum


class EntityState(str, Enum):
    """Lifecycle state of a foreign object. DISABLED is terminal."""

    ACTIVE = "active"
    DISABLED = "disabled"


class TrackerKind(str, Enum):
    """Kind of activity tracker."""

    CUSTOMER_PROJECT_GROUP = "customer_project_group"
    GENERIC = "generic"


class ActivityClass(IntEnum):
    """Activity class handled by an activity creator."""

    EMAIL = 0
    INCIDENT = 2
    MEETING = 4
    TASK = 8


class ActivityLinkType(IntEnum):
    """Typed link between two activities (link owner -> link target)."""

    RELATES_TO = 1
    IS_DUPLICATE_OF = 3
    IS_CHILD_OF = 99


class ActivityPriority(IntEnum):
    NA = 0
    LOW = 1
    NORMAL = 2
    HIGH = 3


class AccountRole(IntEnum):
    """Role of an account assigned to an activity group."""

    CUSTOMER = 100
    VENDOR = 200


class ResourceRole(IntEnum):
    """Role of a resource assigned to an activity."""

    MEMBER = 1
    MANAGER = 2

"""Repository layer - CRM data access and the repository gateway."""

from src.wtt.repositories.account import AccountAssignmentRepository, AccountRepository
from src.wtt.repositories.activity import (
    ActivityCreatorRepository,
    ActivityLinkRepository,
    ActivityRepository,
    ActivityTrackerRepository,
)
from src.wtt.repositories.base import BaseRepository
from src.wtt.repositories.gateway import CrmGateway
from src.wtt.repositories.resource import ResourceAssignmentRepository, ResourceRepository

__all__ = [
    # Base
    "BaseRepository",
    # Gateway
    "CrmGateway",
    # Account segment
    "AccountAssignmentRepository",
    "AccountRepository",
    # Activity segment
    "ActivityCreatorRepository",
    "ActivityLinkRepository",
    "ActivityRepository",
    "ActivityTrackerRepository",
    "ResourceAssignmentRepository",
    "ResourceRepository",
]

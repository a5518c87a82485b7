"""Active-entity lookups shared by the services.

Disabled objects are reported exactly like missing ones.
"""

from src.wtt.core.exceptions import NotFoundError
from src.wtt.models import Activity, ActivityTracker
from src.wtt.repositories import CrmGateway


async def require_company(gateway: CrmGateway, company_id: str) -> ActivityTracker:
    tracker = await gateway.trackers.get_customer_project_group(company_id)
    if tracker is None:
        raise NotFoundError("company", company_id)
    return tracker


async def require_project(
    gateway: CrmGateway,
    tracker: ActivityTracker,
    project_id: str,
    entity: str = "project",
) -> Activity:
    """Get an active activity that belongs to the company's tracker."""
    activity = await gateway.activities.get_active(project_id)
    if activity is None or activity.tracker_id != tracker.id:
        raise NotFoundError(entity, project_id)
    return activity


async def require_subproject(
    gateway: CrmGateway,
    tracker: ActivityTracker,
    project_id: str,
    subproject_id: str,
) -> Activity:
    """Get an active sub-project directly linked to the given parent project."""
    parent = await require_project(gateway, tracker, project_id)
    subproject = await require_project(gateway, tracker, subproject_id, entity="sub-project")
    if not await gateway.links.is_child_of(subproject.id, parent.id):
        raise NotFoundError("sub-project", subproject_id)
    return subproject

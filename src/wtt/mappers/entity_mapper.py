"""Translation between CRM objects and service data models.

All functions are pure: they read the given objects and build new ones.
Audit metadata is passed through read-only; the reverse direction only
covers the writable fields (title, description, resource reference).
"""

from typing import Any

from src.wtt.models import Account, Activity, ActivityTracker, ForeignObject, ResourceAssignment
from src.wtt.models.base import last_segment
from src.wtt.schemas import Company, Project, ResourceRef


def external_id(obj: ForeignObject) -> str:
    """Externally visible id: last segment of the object's identity path."""
    return last_segment(obj.xri)


def _audit_fields(obj: ForeignObject) -> dict[str, Any]:
    return {
        "created_at": obj.created_at,
        "created_by": obj.created_by,
        "modified_at": obj.modified_at,
        "modified_by": obj.modified_by,
    }


def map_to_company(tracker: ActivityTracker, organization: Account | None = None) -> Company:
    """Map a customer project group (and its customer account) to a Company."""
    return Company(
        id=external_id(tracker),
        title=tracker.name,
        description=tracker.description,
        org_id=external_id(organization) if organization is not None else None,
        **_audit_fields(tracker),
    )


def map_to_project(activity: Activity, projects: list[Project] | None = None) -> Project:
    """Map an activity to a Project; children are attached by the caller."""
    return Project(
        id=external_id(activity),
        title=activity.name,
        description=activity.description,
        projects=projects or [],
        **_audit_fields(activity),
    )


def map_to_resource_ref(assignment: ResourceAssignment) -> ResourceRef:
    return ResourceRef(
        id=external_id(assignment),
        resource_id=assignment.resource_id,
        resource_name=assignment.name,
        **_audit_fields(assignment),
    )


def company_to_fields(company: Company) -> dict[str, Any]:
    """Writable tracker fields taken from a Company."""
    return {"name": company.title, "description": company.description}


def project_to_fields(project: Project) -> dict[str, Any]:
    """Writable activity fields taken from a Project."""
    return {"name": project.title, "description": project.description}


def resource_ref_to_fields(resource_ref: ResourceRef, default_name: str = "") -> dict[str, Any]:
    """Assignment fields taken from a ResourceRef."""
    return {
        "resource_id": resource_ref.resource_id,
        "name": resource_ref.resource_name or default_name,
    }

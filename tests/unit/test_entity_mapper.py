"""Tests for CRM object to service model mapping."""

from datetime import datetime

import pytest

from src.wtt.mappers import (
    company_to_fields,
    external_id,
    map_to_company,
    map_to_project,
    map_to_resource_ref,
    project_to_fields,
    resource_ref_to_fields,
)
from src.wtt.models import (
    Account,
    Activity,
    ActivityTracker,
    EntityState,
    ResourceAssignment,
    TrackerKind,
)
from src.wtt.schemas import Company, Project, ResourceRef

pytestmark = pytest.mark.unit

SEGMENT = "provider/CRX/segment/Standard"
CREATED = datetime(2024, 1, 2, 3, 4, 5)
MODIFIED = datetime(2024, 2, 3, 4, 5, 6)


def _audit() -> dict:
    return {
        "segment": SEGMENT,
        "created_at": CREATED,
        "created_by": "alice",
        "modified_at": MODIFIED,
        "modified_by": "bob",
    }


class TestIdentity:
    """Test identity paths and external ids."""

    def test_xri_contains_package_segment_and_collection(self):
        tracker = ActivityTracker(id="t1", name="Acme", **_audit())

        assert tracker.xri == (
            "xri://@openmdx*org.opencrx.kernel.activity1/"
            "provider/CRX/segment/Standard/activityTracker/t1"
        )

    def test_external_id_is_last_path_segment(self):
        activity = Activity(id="a-42", tracker_id="t1", name="Phase 1", **_audit())

        assert external_id(activity) == "a-42"

    def test_state_follows_disabled_flag(self):
        tracker = ActivityTracker(id="t1", name="Acme", **_audit())
        assert tracker.state == EntityState.ACTIVE
        assert tracker.is_active

        tracker.disabled = True
        assert tracker.state == EntityState.DISABLED
        assert not tracker.is_active


class TestMapping:
    """Test the CRM to service direction."""

    def test_map_to_company(self):
        tracker = ActivityTracker(
            id="t1",
            name="Acme",
            description="Rockets",
            tracker_kind=TrackerKind.CUSTOMER_PROJECT_GROUP.value,
            **_audit(),
        )
        organization = Account(id="org-1", name="Acme Inc.", **_audit())

        company = map_to_company(tracker, organization)

        assert company.id == "t1"
        assert company.title == "Acme"
        assert company.description == "Rockets"
        assert company.org_id == "org-1"
        assert company.created_at == CREATED
        assert company.created_by == "alice"
        assert company.modified_at == MODIFIED
        assert company.modified_by == "bob"

    def test_map_to_company_without_organization(self):
        tracker = ActivityTracker(id="t1", name="Acme", **_audit())

        assert map_to_company(tracker).org_id is None

    def test_map_to_project_has_no_children_by_default(self):
        activity = Activity(id="a1", tracker_id="t1", name="Phase 1", **_audit())

        project = map_to_project(activity)

        assert project.id == "a1"
        assert project.title == "Phase 1"
        assert project.projects == []

    def test_map_to_project_with_children(self):
        activity = Activity(id="a1", tracker_id="t1", name="Phase 1", **_audit())
        child = Project(id="a2", title="Design")

        project = map_to_project(activity, [child])

        assert project.projects == [child]

    def test_map_to_resource_ref(self):
        assignment = ResourceAssignment(
            id="ra1", activity_id="a1", resource_id="r1", name="Jane", **_audit()
        )

        ref = map_to_resource_ref(assignment)

        assert ref.id == "ra1"
        assert ref.resource_id == "r1"
        assert ref.resource_name == "Jane"
        assert ref.modified_by == "bob"


class TestReverseMapping:
    """Test the service to CRM direction (writable fields only)."""

    def test_company_fields(self):
        company = Company(id="ignored", title="Acme", description="d", org_id="o")

        assert company_to_fields(company) == {"name": "Acme", "description": "d"}

    def test_project_fields(self):
        project = Project(title="Phase 1", projects=[Project(title="Design")])

        assert project_to_fields(project) == {"name": "Phase 1", "description": None}

    def test_resource_ref_fields_fall_back_to_default_name(self):
        ref = ResourceRef(resource_id="r1")

        assert resource_ref_to_fields(ref, default_name="Jane") == {
            "resource_id": "r1",
            "name": "Jane",
        }
        assert resource_ref_to_fields(ResourceRef(resource_id="r1", resource_name="J"))[
            "name"
        ] == "J"

"""Integration tests for materialized project trees."""

import pytest

from src.wtt.core.exceptions import InternalError
from src.wtt.models import ActivityLink, ActivityLinkType
from src.wtt.schemas import Company, Project, ResourceRef
from src.wtt.services import ProjectService

pytestmark = pytest.mark.integration


class TestListAllProjects:
    """Test tree and flat listings of a company's projects."""

    async def test_acme_scenario(self, companies, projects):
        acme = await companies.create_company(Company(title="Acme"))
        phase1 = await projects.create_project(acme.id, Project(title="Phase 1"))
        await projects.create_subproject(acme.id, phase1.id, Project(title="Design"))

        tree = await projects.list_all_projects(acme.id, as_tree=True)

        assert len(tree) == 1
        assert tree[0].title == "Phase 1"
        assert len(tree[0].projects) == 1
        assert tree[0].projects[0].title == "Design"
        assert tree[0].projects[0].projects == []

    async def test_deep_tree(self, projects, acme, phase1):
        design = await projects.create_subproject(acme.id, phase1.id, Project(title="Design"))
        await projects.create_subproject(acme.id, phase1.id, Project(title="Build"))
        await projects.create_subproject(acme.id, design.id, Project(title="Mockups"))
        await projects.create_project(acme.id, Project(title="Phase 2"))

        tree = await projects.list_all_projects(acme.id, as_tree=True)

        assert [p.title for p in tree] == ["Phase 1", "Phase 2"]
        assert [p.title for p in tree[0].projects] == ["Build", "Design"]
        assert [p.title for p in tree[0].projects[1].projects] == ["Mockups"]
        assert tree[1].projects == []

    async def test_flat_listing_returns_every_level(self, projects, acme, phase1):
        await projects.create_subproject(acme.id, phase1.id, Project(title="Design"))

        flat = await projects.list_all_projects(acme.id, as_tree=False)

        assert [p.title for p in flat] == ["Design", "Phase 1"]
        assert all(p.projects == [] for p in flat)

    async def test_materialization_is_idempotent(self, projects, acme, phase1):
        design = await projects.create_subproject(acme.id, phase1.id, Project(title="Design"))
        await projects.create_subproject(acme.id, design.id, Project(title="Mockups"))

        first = await projects.list_all_projects(acme.id, as_tree=True)
        second = await projects.list_all_projects(acme.id, as_tree=True)

        assert first == second

    async def test_tree_window_applies_to_top_level(self, projects, acme, phase1):
        await projects.create_subproject(acme.id, phase1.id, Project(title="Design"))
        await projects.create_project(acme.id, Project(title="Phase 2"))

        tree = await projects.list_all_projects(acme.id, as_tree=True, position=0, size=1)

        assert [p.title for p in tree] == ["Phase 1"]
        assert [p.title for p in tree[0].projects] == ["Design"]

    async def test_cycle_fails_fast(self, projects, gateway, acme, phase1):
        design = await projects.create_subproject(acme.id, phase1.id, Project(title="Design"))
        # Malformed graph: the parent is also linked below its own child
        async with gateway.transaction():
            await gateway.create(
                ActivityLink,
                activity_id=phase1.id,
                link_to_id=design.id,
                activity_link_type=ActivityLinkType.IS_CHILD_OF.value,
            )

        with pytest.raises(InternalError, match="cycle"):
            await projects.read_project(acme.id, phase1.id)

    async def test_depth_limit(self, gateway, acme, phase1):
        shallow = ProjectService(gateway, max_tree_depth=1)
        design = await shallow.create_subproject(acme.id, phase1.id, Project(title="Design"))

        assert [p.title for p in (await shallow.read_project(acme.id, phase1.id)).projects] == [
            "Design"
        ]

        await shallow.create_subproject(acme.id, design.id, Project(title="Mockups"))
        with pytest.raises(InternalError, match="maximum depth"):
            await shallow.read_project(acme.id, phase1.id)


class TestReadAsTree:
    """Test the compact id tree with resource refs."""

    async def test_tree_nodes_carry_resource_ref_ids(self, projects, resources, acme, phase1):
        design = await projects.create_subproject(acme.id, phase1.id, Project(title="Design"))
        ref = await resources.add_resource_ref(
            acme.id, design.id, ResourceRef(resource_id="r-1", resource_name="Jane")
        )

        tree = await projects.read_as_tree(acme.id)

        assert tree.id == acme.id
        assert [node.id for node in tree.projects] == [phase1.id]
        assert tree.projects[0].resources == []
        assert [node.id for node in tree.projects[0].projects] == [design.id]
        assert tree.projects[0].projects[0].resources == [ref.id]

    async def test_empty_company(self, projects, acme):
        tree = await projects.read_as_tree(acme.id)

        assert tree.id == acme.id
        assert tree.projects == []

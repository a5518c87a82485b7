"""Project service - projects, sub-projects and the project tree."""

from src.wtt.core.exceptions import (
    DuplicateError,
    InternalError,
    ValidationError,
    WttServiceError,
    client_id_rejected,
)
from src.wtt.core.logging import get_logger
from src.wtt.mappers import external_id, map_to_project, project_to_fields
from src.wtt.models import (
    Activity,
    ActivityClass,
    ActivityLink,
    ActivityLinkType,
    ActivityPriority,
    ActivityTracker,
)
from src.wtt.models.base import utc_now
from src.wtt.repositories import CrmGateway
from src.wtt.schemas import UNBOUNDED, Project, ProjectTreeNode, apply_window, filter_by_query
from src.wtt.services.lookups import require_company, require_project, require_subproject
from src.wtt.services.project_tree import build_project_tree

logger = get_logger(__name__)


class ProjectService:
    """Service for the project hierarchy of a company.

    Sub-projects are activities owning an IS_CHILD_OF link to their parent.
    Deleting cascades to all descendants on a best-effort basis.
    """

    def __init__(self, gateway: CrmGateway, max_tree_depth: int = 64):
        self.gateway = gateway
        self.max_tree_depth = max_tree_depth

    # --- projects ---

    async def list_projects(
        self,
        company_id: str,
        query: str | None = None,
        query_type: str | None = None,
        position: int = 0,
        size: int | None = UNBOUNDED,
    ) -> list[Project]:
        """List top-level projects of a company without their sub-projects.

        Raises:
            NotFoundError: If the company is missing or disabled
        """
        tracker = await require_company(self.gateway, company_id)
        activities = await self.gateway.activities.list_top_level(tracker.id)
        projects = filter_by_query(
            [map_to_project(a) for a in activities], lambda p: p.title, query, query_type
        )
        return apply_window(projects, position, size)

    async def list_all_projects(
        self,
        company_id: str,
        as_tree: bool = False,
        query: str | None = None,
        query_type: str | None = None,
        position: int = 0,
        size: int | None = UNBOUNDED,
    ) -> list[Project]:
        """List the projects of a company.

        With as_tree, the top-level projects are returned, each carrying its
        fully materialized sub-project tree. Without it, every project of the
        company is returned flat, at any depth, with no children populated.
        The window applies to the returned list (top-level nodes for trees).

        Raises:
            NotFoundError: If the company is missing or disabled
            InternalError: If the project links form a cycle
        """
        tracker = await require_company(self.gateway, company_id)
        if not as_tree:
            activities = await self.gateway.activities.list_by_tracker(tracker.id)
            projects = filter_by_query(
                [map_to_project(a) for a in activities], lambda p: p.title, query, query_type
            )
            return apply_window(projects, position, size)

        roots = await self.gateway.activities.list_top_level(tracker.id)
        roots = filter_by_query(roots, lambda a: a.name, query, query_type)
        return [
            await build_project_tree(self.gateway.activities, root, self.max_tree_depth)
            for root in apply_window(roots, position, size)
        ]

    async def count_projects(self, company_id: str) -> int:
        return len(await self.list_projects(company_id))

    async def create_project(self, company_id: str, project: Project) -> Project:
        """Create a top-level project.

        Raises:
            NotFoundError: If the company is missing or disabled
            DuplicateError: If a client-supplied id names an existing project
            ValidationError: If any other client id is supplied or the title is empty
            InternalError: If the company has no project creator or the
                transaction fails
        """
        tracker = await require_company(self.gateway, company_id)
        return await self._create(tracker, project, parent=None)

    async def read_project(self, company_id: str, project_id: str) -> Project:
        """Read a project with its sub-project tree populated.

        Raises:
            NotFoundError: If the company or project is missing or disabled
        """
        tracker = await require_company(self.gateway, company_id)
        activity = await require_project(self.gateway, tracker, project_id)
        project = await build_project_tree(self.gateway.activities, activity, self.max_tree_depth)
        logger.debug("Project read", project_id=project_id)
        return project

    async def update_project(self, company_id: str, project_id: str, project: Project) -> Project:
        """Replace title and description of a project.

        Raises:
            NotFoundError: If the company or project is missing or disabled
            ValidationError: If the new title is empty
            InternalError: If the gateway transaction fails
        """
        tracker = await require_company(self.gateway, company_id)
        activity = await require_project(self.gateway, tracker, project_id)
        await self._update(activity, project)
        return await self.read_project(company_id, project_id)

    async def delete_project(self, company_id: str, project_id: str) -> None:
        """Disable a project, then its descendants (best effort).

        Raises:
            NotFoundError: If the company or project is missing or disabled
            InternalError: If disabling the project itself fails
        """
        tracker = await require_company(self.gateway, company_id)
        activity = await require_project(self.gateway, tracker, project_id)
        await self._delete(activity)

    # --- sub-projects ---

    async def list_subprojects(
        self,
        company_id: str,
        project_id: str,
        query: str | None = None,
        query_type: str | None = None,
        position: int = 0,
        size: int | None = UNBOUNDED,
    ) -> list[Project]:
        """List the direct sub-projects of a project.

        Raises:
            NotFoundError: If the company or project is missing or disabled
        """
        tracker = await require_company(self.gateway, company_id)
        parent = await require_project(self.gateway, tracker, project_id)
        children = await self.gateway.activities.list_children(parent.id)
        projects = filter_by_query(
            [map_to_project(c) for c in children], lambda p: p.title, query, query_type
        )
        return apply_window(projects, position, size)

    async def count_subprojects(self, company_id: str, project_id: str) -> int:
        return len(await self.list_subprojects(company_id, project_id))

    async def create_subproject(
        self, company_id: str, project_id: str, project: Project
    ) -> Project:
        """Create a sub-project linked to its parent project.

        Raises:
            NotFoundError: If the company or parent project is missing or disabled
            DuplicateError: If a client-supplied id names an existing project
            ValidationError: If any other client id is supplied or the title is empty
            InternalError: If the company has no project creator or the
                transaction fails
        """
        tracker = await require_company(self.gateway, company_id)
        parent = await require_project(self.gateway, tracker, project_id)
        return await self._create(tracker, project, parent=parent)

    async def read_subproject(
        self, company_id: str, project_id: str, subproject_id: str
    ) -> Project:
        tracker = await require_company(self.gateway, company_id)
        activity = await require_subproject(self.gateway, tracker, project_id, subproject_id)
        return await build_project_tree(self.gateway.activities, activity, self.max_tree_depth)

    async def update_subproject(
        self, company_id: str, project_id: str, subproject_id: str, project: Project
    ) -> Project:
        tracker = await require_company(self.gateway, company_id)
        activity = await require_subproject(self.gateway, tracker, project_id, subproject_id)
        await self._update(activity, project)
        return await self.read_subproject(company_id, project_id, subproject_id)

    async def delete_subproject(
        self, company_id: str, project_id: str, subproject_id: str
    ) -> None:
        tracker = await require_company(self.gateway, company_id)
        activity = await require_subproject(self.gateway, tracker, project_id, subproject_id)
        await self._delete(activity)

    # --- tree view ---

    async def read_as_tree(self, company_id: str) -> ProjectTreeNode:
        """Compact tree of a company: project nodes with their resource ref ids.

        Raises:
            NotFoundError: If the company is missing or disabled
            InternalError: If the project links form a cycle
        """
        projects = await self.list_all_projects(company_id, as_tree=True)
        return ProjectTreeNode(
            id=company_id,
            projects=[await self._tree_node(project) for project in projects],
        )

    async def _tree_node(self, project: Project) -> ProjectTreeNode:
        project_id = project.id or ""
        assignments = await self.gateway.resource_assignments.list_by_activity(project_id)
        return ProjectTreeNode(
            id=project_id,
            projects=[await self._tree_node(child) for child in project.projects],
            resources=[external_id(assignment) for assignment in assignments],
        )

    # --- shared steps ---

    async def _create(
        self, tracker: ActivityTracker, project: Project, parent: Activity | None
    ) -> Project:
        if project.id is not None:
            if await self.gateway.activities.get_by_id(project.id) is not None:
                raise DuplicateError("project", project.id)
            raise client_id_rejected("project", project.id)
        if not project.title:
            raise ValidationError("project must have a valid title.")

        creator = await self.gateway.creators.get_for_class(tracker.id, ActivityClass.INCIDENT)
        if creator is None:
            raise InternalError(
                f"company <{tracker.id}> has no project creator.",
                details={"company_id": tracker.id},
            )

        now = utc_now()
        async with self.gateway.transaction():
            activity = await self.gateway.create(
                Activity,
                tracker_id=tracker.id,
                creator_id=creator.id,
                activity_class=creator.activity_class,
                priority=ActivityPriority.NA.value,
                scheduled_start=now,
                scheduled_end=now,
                **project_to_fields(project),
            )
            if parent is not None:
                await self.gateway.create(
                    ActivityLink,
                    activity_id=activity.id,
                    link_to_id=parent.id,
                    activity_link_type=ActivityLinkType.IS_CHILD_OF.value,
                    name=parent.name,
                )

        created = map_to_project(activity)
        logger.info(
            "Project created",
            company_id=tracker.id,
            project_id=created.id,
            parent_id=parent.id if parent is not None else None,
        )
        return created

    async def _update(self, activity: Activity, project: Project) -> None:
        if not project.title:
            raise ValidationError("project must have a valid title.")
        async with self.gateway.transaction():
            self.gateway.update(activity, **project_to_fields(project))
        logger.info("Project updated", project_id=activity.id)

    async def _delete(self, activity: Activity) -> None:
        project_id = activity.id
        async with self.gateway.transaction():
            self.gateway.disable(activity)
        logger.info("Project deleted", project_id=project_id)
        await self._cascade_disable(project_id)

    async def _cascade_disable(self, root_id: str) -> None:
        """Disable all descendants, one transaction per node.

        A failing node is logged and its subtree skipped; siblings continue.
        Disabled nodes drop out of list_children, so a cyclic link graph
        cannot loop; the visited set guards against a node listed under
        several parents.
        """
        visited = {root_id}
        stack = [root_id]
        while stack:
            parent_id = stack.pop()
            children = await self.gateway.activities.list_children(parent_id)
            # Ids only: a rollback expires every loaded object
            child_ids = [child.id for child in children]
            for child_id in child_ids:
                if child_id in visited:
                    continue
                visited.add(child_id)
                try:
                    child = await self.gateway.activities.get_active(child_id)
                    if child is None:
                        continue
                    async with self.gateway.transaction():
                        self.gateway.disable(child)
                except WttServiceError as e:
                    logger.warning(
                        "Cascade delete failed for sub-project",
                        root_id=root_id,
                        project_id=child_id,
                        error=e.message,
                    )
                    continue
                stack.append(child_id)

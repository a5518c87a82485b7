"""Resource assignment service - resource refs of a project."""

from src.wtt.core.exceptions import (
    DuplicateError,
    NotFoundError,
    ValidationError,
    client_id_rejected,
)
from src.wtt.core.logging import get_logger
from src.wtt.mappers import map_to_resource_ref, resource_ref_to_fields
from src.wtt.models import Activity, ResourceAssignment, ResourceRole
from src.wtt.repositories import CrmGateway
from src.wtt.schemas import UNBOUNDED, ResourceRef, apply_window, filter_by_query
from src.wtt.services.lookups import require_company, require_project

logger = get_logger(__name__)


class ResourceService:
    """Service attaching and detaching resources to projects.

    Removing a ref disables the assignment only; the resource it names
    belongs to another domain and is never touched.

    Args:
        gateway: CRM repository gateway
        validate_resource: Reject refs naming a missing or disabled resource
        enforce_unique: Reject a second active assignment of the same
            resource on one project
    """

    def __init__(
        self,
        gateway: CrmGateway,
        validate_resource: bool = False,
        enforce_unique: bool = False,
    ):
        self.gateway = gateway
        self.validate_resource = validate_resource
        self.enforce_unique = enforce_unique

    async def _project(self, company_id: str, project_id: str) -> Activity:
        tracker = await require_company(self.gateway, company_id)
        return await require_project(self.gateway, tracker, project_id)

    async def list_resource_refs(
        self,
        company_id: str,
        project_id: str,
        query: str | None = None,
        query_type: str | None = None,
        position: int = 0,
        size: int | None = UNBOUNDED,
    ) -> list[ResourceRef]:
        """List active resource refs of a project in assignment order.

        Raises:
            NotFoundError: If the company or project is missing or disabled
        """
        project = await self._project(company_id, project_id)
        assignments = await self.gateway.resource_assignments.list_by_activity(project.id)
        refs = filter_by_query(
            [map_to_resource_ref(a) for a in assignments],
            lambda r: r.resource_name,
            query,
            query_type,
        )
        return apply_window(refs, position, size)

    async def count_resources(self, company_id: str, project_id: str) -> int:
        return len(await self.list_resource_refs(company_id, project_id))

    async def add_resource_ref(
        self, company_id: str, project_id: str, resource_ref: ResourceRef
    ) -> ResourceRef:
        """Assign a resource to a project.

        Raises:
            NotFoundError: If the company or project is missing or disabled, or
                (when validating resources) the resource is missing or disabled
            DuplicateError: If a client-supplied id names an assignment of the
                project, or (when enforcing uniqueness) the resource is
                already assigned
            ValidationError: If any other client id is supplied or no
                resource id is given
            InternalError: If the gateway transaction fails
        """
        project = await self._project(company_id, project_id)
        if resource_ref.id is not None:
            existing = await self.gateway.resource_assignments.get_on_activity(
                project.id, resource_ref.id, include_disabled=True
            )
            if existing is not None:
                raise DuplicateError("resource ref", resource_ref.id)
            raise client_id_rejected("resource ref", resource_ref.id)
        if not resource_ref.resource_id:
            raise ValidationError("resource ref must contain a valid resourceId.")

        resource = await self.gateway.resources.get_active(resource_ref.resource_id)
        if resource is None:
            if self.validate_resource:
                raise NotFoundError("resource", resource_ref.resource_id)
            logger.warning(
                "Assigning unknown resource",
                project_id=project.id,
                resource_id=resource_ref.resource_id,
            )

        if self.enforce_unique:
            assigned = await self.gateway.resource_assignments.list_for_resource(
                project.id, resource_ref.resource_id
            )
            if assigned:
                raise DuplicateError("resource ref", assigned[0].id)

        async with self.gateway.transaction():
            assignment = await self.gateway.create(
                ResourceAssignment,
                activity_id=project.id,
                resource_role=ResourceRole.MEMBER.value,
                **resource_ref_to_fields(
                    resource_ref, default_name=resource.name if resource is not None else ""
                ),
            )

        created = map_to_resource_ref(assignment)
        logger.info(
            "Resource ref added",
            project_id=project.id,
            resource_ref_id=created.id,
            resource_id=created.resource_id,
        )
        return created

    async def remove_resource_ref(
        self, company_id: str, project_id: str, resource_ref_id: str
    ) -> None:
        """Disable one resource ref of a project.

        Raises:
            NotFoundError: If the company, project or ref is missing or disabled
            InternalError: If the gateway transaction fails
        """
        project = await self._project(company_id, project_id)
        assignment = await self.gateway.resource_assignments.get_on_activity(
            project.id, resource_ref_id
        )
        if assignment is None:
            raise NotFoundError("resource ref", resource_ref_id)

        async with self.gateway.transaction():
            self.gateway.disable(assignment)
        logger.info("Resource ref removed", project_id=project.id, resource_ref_id=resource_ref_id)

    async def remove_resource_refs_by_resource(
        self, company_id: str, project_id: str, resource_id: str
    ) -> int:
        """Disable every active assignment of a resource on a project.

        Returns:
            Number of disabled refs

        Raises:
            NotFoundError: If the company or project is missing or disabled,
                or the resource has no active assignment on the project
            InternalError: If the gateway transaction fails
        """
        project = await self._project(company_id, project_id)
        assignments = await self.gateway.resource_assignments.list_for_resource(
            project.id, resource_id
        )
        if not assignments:
            raise NotFoundError("resource", resource_id)

        async with self.gateway.transaction():
            for assignment in assignments:
                self.gateway.disable(assignment)
        logger.info(
            "Resource refs removed",
            project_id=project.id,
            resource_id=resource_id,
            count=len(assignments),
        )
        return len(assignments)

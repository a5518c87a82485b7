"""Company service - customer project groups and their lifecycle."""

from src.wtt.core.exceptions import DuplicateError, ValidationError, client_id_rejected
from src.wtt.core.logging import get_logger
from src.wtt.mappers import company_to_fields, map_to_company
from src.wtt.models import (
    Account,
    AccountAssignment,
    AccountRole,
    ActivityClass,
    ActivityCreator,
    ActivityTracker,
    TrackerKind,
)
from src.wtt.repositories import CrmGateway
from src.wtt.schemas import UNBOUNDED, Company, apply_window, company_sort_key, filter_by_query
from src.wtt.services.lookups import require_company
from src.wtt.services.project_tree import collect_descendant_ids

logger = get_logger(__name__)


class CompanyService:
    """Service for company CRUD on top of customer project groups."""

    def __init__(self, gateway: CrmGateway):
        self.gateway = gateway

    async def _map(self, tracker: ActivityTracker) -> Company:
        organization = await self.gateway.account_assignments.get_customer(tracker.id)
        return map_to_company(tracker, organization)

    async def _all_companies(
        self, query: str | None = None, query_type: str | None = None
    ) -> list[Company]:
        trackers = await self.gateway.trackers.list_customer_project_groups()
        companies = [await self._map(tracker) for tracker in trackers]
        companies = filter_by_query(companies, lambda c: c.title, query, query_type)
        return sorted(companies, key=company_sort_key)

    async def list_companies(
        self,
        query: str | None = None,
        query_type: str | None = None,
        position: int = 0,
        size: int | None = UNBOUNDED,
    ) -> list[Company]:
        """List active companies sorted by title, then window the sorted result.

        Args:
            query: Optional case-insensitive title filter
            query_type: Accepted for callers naming the queried attribute
            position: Zero-based offset into the sorted result
            size: Maximum number of companies, None for all

        Returns:
            At most `size` companies
        """
        companies = apply_window(await self._all_companies(query, query_type), position, size)
        logger.debug("Companies listed", count=len(companies), position=position, size=size)
        return companies

    async def count_companies(
        self, query: str | None = None, query_type: str | None = None
    ) -> int:
        """Count companies; always equals len(list_companies(size=None))."""
        return len(await self._all_companies(query, query_type))

    async def create_company(self, company: Company) -> Company:
        """Create a company together with its project creator.

        The customer organization named by org_id is linked; without an
        org_id, an organization with the company's title is reused or created.

        Raises:
            DuplicateError: If a client-supplied id names an existing company
            ValidationError: If any other client id is supplied, the title is
                empty, or org_id names no active organization
            InternalError: If the gateway transaction fails
        """
        if company.id is not None:
            if await self.gateway.trackers.get_customer_project_group(company.id) is not None:
                raise DuplicateError("company", company.id)
            raise client_id_rejected("company", company.id)
        if not company.title:
            raise ValidationError("company must contain a valid title.")

        organization: Account | None = None
        if company.org_id is not None:
            organization = await self.gateway.accounts.get_active(company.org_id)
            if organization is None:
                raise ValidationError(
                    f"company refers to unknown organization <{company.org_id}>.",
                    details={"org_id": company.org_id},
                )
        else:
            organization = await self.gateway.accounts.get_by_name(company.title)

        async with self.gateway.transaction():
            if organization is None:
                organization = await self.gateway.create(Account, name=company.title)
                logger.info("Customer organization created", org_id=organization.id)
            tracker = await self.gateway.create(
                ActivityTracker,
                tracker_kind=TrackerKind.CUSTOMER_PROJECT_GROUP.value,
                **company_to_fields(company),
            )
            await self.gateway.create(
                ActivityCreator,
                tracker_id=tracker.id,
                name=company.title,
                activity_class=ActivityClass.INCIDENT.value,
            )
            await self.gateway.create(
                AccountAssignment,
                tracker_id=tracker.id,
                account_id=organization.id,
                account_role=AccountRole.CUSTOMER.value,
            )

        created = map_to_company(tracker, organization)
        logger.info("Company created", company_id=created.id, org_id=created.org_id)
        return created

    async def read_company(self, company_id: str) -> Company:
        """Read an active company.

        Raises:
            NotFoundError: If the company is missing or disabled
        """
        tracker = await require_company(self.gateway, company_id)
        return await self._map(tracker)

    async def update_company(self, company_id: str, company: Company) -> Company:
        """Replace title and description of a company.

        Raises:
            NotFoundError: If the company is missing or disabled
            ValidationError: If the new title is empty
            InternalError: If the gateway transaction fails
        """
        tracker = await require_company(self.gateway, company_id)
        if not company.title:
            raise ValidationError("company must contain a valid title.")

        async with self.gateway.transaction():
            self.gateway.update(tracker, **company_to_fields(company))

        logger.info("Company updated", company_id=company_id)
        return await self.read_company(company_id)

    async def delete_company(self, company_id: str) -> None:
        """Disable a company and every project of its tree in one transaction.

        Raises:
            NotFoundError: If the company is missing or disabled
            InternalError: If the gateway transaction fails
        """
        tracker = await require_company(self.gateway, company_id)
        projects = await self.gateway.activities.list_by_tracker(tracker.id)
        project_ids = [project.id for project in projects]
        linked_ids = await collect_descendant_ids(self.gateway.activities, project_ids)
        linked = [await self.gateway.activities.get_active(id) for id in linked_ids]

        async with self.gateway.transaction():
            self.gateway.disable(tracker)
            for project in projects:
                self.gateway.disable(project)
            for project in linked:
                if project is not None:
                    self.gateway.disable(project)

        logger.info(
            "Company deleted",
            company_id=company_id,
            disabled_projects=len(project_ids) + len(linked_ids),
        )

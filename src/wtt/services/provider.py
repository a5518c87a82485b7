"""Service provider - the work-time-tracking services over one session."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine

from src.wtt.core.config import Settings, get_settings
from src.wtt.core.db import get_session
from src.wtt.core.logging import bind_gateway_context
from src.wtt.repositories import CrmGateway
from src.wtt.services.company_service import CompanyService
from src.wtt.services.project_service import ProjectService
from src.wtt.services.resource_service import ResourceService


class WttServiceProvider:
    """Companies, projects and resource refs sharing one gateway."""

    def __init__(self, gateway: CrmGateway, settings: Settings):
        self.gateway = gateway
        self.companies = CompanyService(gateway)
        self.projects = ProjectService(gateway, max_tree_depth=settings.max_tree_depth)
        self.resources = ResourceService(
            gateway,
            validate_resource=settings.validate_resource_on_assign,
            enforce_unique=settings.enforce_unique_assignment,
        )


@asynccontextmanager
async def open_service_provider(
    settings: Settings | None = None,
    engine: AsyncEngine | None = None,
) -> AsyncGenerator[WttServiceProvider]:
    """Open a request-scoped session and yield the service provider.

    Args:
        settings: Settings override; defaults to get_settings()
        engine: Engine override for testing
    """
    if settings is None:
        settings = get_settings()
    config = settings.gateway_config()
    async with get_session(engine) as session:
        bind_gateway_context(config.principal, config.segment_path)
        yield WttServiceProvider(CrmGateway(session, config), settings)

"""Integration test fixtures for the CRM store and the services.

Every test gets its own in-memory SQLite database (aiosqlite) holding the
CRM tables. Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from src.wtt.core.config import Settings
from src.wtt.core.db import create_tables
from src.wtt.core.logging import clear_request_context
from src.wtt.models import Account, Resource
from src.wtt.repositories import CrmGateway
from src.wtt.schemas import Company, Project
from src.wtt.services import (
    CompanyService,
    ProjectService,
    ResourceService,
    WttServiceProvider,
    open_service_provider,
)
from tests.factories import AccountFactory, ResourceFactory


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory test database with the CRM tables."""
    # StaticPool keeps the single in-memory connection alive for the whole test
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(test_engine)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def provider(engine: AsyncEngine, settings: Settings) -> AsyncGenerator[WttServiceProvider]:
    """Provide the services over one session, as a request would see them."""
    async with open_service_provider(settings, engine) as wtt:
        yield wtt
    clear_request_context()


@pytest.fixture
def gateway(provider: WttServiceProvider) -> CrmGateway:
    return provider.gateway


@pytest.fixture
def companies(provider: WttServiceProvider) -> CompanyService:
    return provider.companies


@pytest.fixture
def projects(provider: WttServiceProvider) -> ProjectService:
    return provider.projects


@pytest.fixture
def resources(provider: WttServiceProvider) -> ResourceService:
    return provider.resources


@pytest.fixture
async def acme(companies: CompanyService) -> Company:
    """Create the company most tests work in."""
    return await companies.create_company(Company(title="Acme", description="Rockets"))


@pytest.fixture
async def phase1(projects: ProjectService, acme: Company) -> Project:
    return await projects.create_project(acme.id, Project(title="Phase 1"))


@pytest.fixture
def add_resource(gateway: CrmGateway) -> Callable[..., Awaitable[Resource]]:
    """Persist a resource built by ResourceFactory.

    Resources belong to another domain; the services only reference them.
    """

    async def _add(**kwargs) -> Resource:
        resource = ResourceFactory.build(**kwargs)
        gateway.session.add(resource)
        await gateway.session.commit()
        return resource

    return _add


@pytest.fixture
def add_account(gateway: CrmGateway) -> Callable[..., Awaitable[Account]]:
    """Persist a customer organization built by AccountFactory."""

    async def _add(**kwargs) -> Account:
        account = AccountFactory.build(**kwargs)
        gateway.session.add(account)
        await gateway.session.commit()
        return account

    return _add

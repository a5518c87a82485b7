"""Service layer - hierarchy and resource assignment management."""

from src.wtt.services.company_service import CompanyService
from src.wtt.services.project_service import ProjectService
from src.wtt.services.provider import WttServiceProvider, open_service_provider
from src.wtt.services.resource_service import ResourceService

__all__ = [
    "CompanyService",
    "ProjectService",
    "ResourceService",
    "WttServiceProvider",
    "open_service_provider",
]

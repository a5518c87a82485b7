"""Service data models."""

from src.wtt.schemas.company import Company, company_sort_key
from src.wtt.schemas.pagination import UNBOUNDED, apply_window, filter_by_query
from src.wtt.schemas.project import Project, ProjectTreeNode
from src.wtt.schemas.resource import ResourceRef

__all__ = [
    "Company",
    "Project",
    "ProjectTreeNode",
    "ResourceRef",
    "UNBOUNDED",
    "apply_window",
    "company_sort_key",
    "filter_by_query",
]

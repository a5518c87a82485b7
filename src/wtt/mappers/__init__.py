"""Entity mapper - CRM objects to service data models and back."""

from src.wtt.mappers.entity_mapper import (
    company_to_fields,
    external_id,
    map_to_company,
    map_to_project,
    map_to_resource_ref,
    project_to_fields,
    resource_ref_to_fields,
)

__all__ = [
    "company_to_fields",
    "external_id",
    "map_to_company",
    "map_to_project",
    "map_to_resource_ref",
    "project_to_fields",
    "resource_ref_to_fields",
]

"""Resource reference schema."""

from datetime import datetime

from pydantic import BaseModel


class ResourceRef(BaseModel):
    """Assignment of an external resource to a project.

    resource_id references a resource owned by another domain;
    resource_name is a denormalized copy for display.
    """

    id: str | None = None
    resource_id: str | None = None
    resource_name: str | None = None
    created_at: datetime | None = None
    created_by: str | None = None
    modified_at: datetime | None = None
    modified_by: str | None = None

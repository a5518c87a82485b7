"""Company schema - customer owning a project hierarchy."""

from datetime import datetime

from pydantic import BaseModel


class Company(BaseModel):
    """Company as exposed by the service.

    id and the audit fields are assigned by the repository gateway;
    only title and description are writable.
    """

    id: str | None = None
    title: str | None = None
    description: str | None = None
    org_id: str | None = None
    created_at: datetime | None = None
    created_by: str | None = None
    modified_at: datetime | None = None
    modified_by: str | None = None


def company_sort_key(company: Company) -> tuple[str, str]:
    """Stable title-based ordering; id breaks ties."""
    return ((company.title or "").casefold(), company.id or "")

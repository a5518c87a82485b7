"""Project schemas - projects, sub-projects and tree nodes."""

from datetime import datetime

from pydantic import BaseModel, Field


class Project(BaseModel):
    """Project, optionally carrying its materialized sub-projects."""

    id: str | None = None
    title: str | None = None
    description: str | None = None
    projects: list["Project"] = Field(default_factory=list)
    created_at: datetime | None = None
    created_by: str | None = None
    modified_at: datetime | None = None
    modified_by: str | None = None


class ProjectTreeNode(BaseModel):
    """Compact tree view: node id, child nodes and assigned resource ref ids."""

    id: str
    projects: list["ProjectTreeNode"] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)

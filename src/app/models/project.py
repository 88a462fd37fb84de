"""Project, issue and report tables.

A project owns its issues and its single report. Both child tables reference
projects.id with ON DELETE CASCADE, so deleting a project row removes the
rest in the same statement.
"""

from datetime import datetime

from sqlalchemy import Index, Text
from sqlmodel import Field, SQLModel

from src.app.models.base import utc_now


class Project(SQLModel, table=True):
    """Contract project owned by one identity-provider user."""

    __tablename__ = "projects"
    __table_args__ = (Index("ix_projects_user_id_created_at", "user_id", "created_at"),)

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=255)
    project_name: str = Field(max_length=200)
    project_description: str = Field(default="", sa_type=Text)
    form_of_contract: str = Field(max_length=50)
    organization_role: str = Field(max_length=50)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Issue(SQLModel, table=True):
    """A contractual issue raised on a project."""

    __tablename__ = "issues"

    id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    description: str = Field(sa_type=Text)
    action_taken: str | None = Field(default=None, sa_type=Text)
    created_at: datetime = Field(default_factory=utc_now)


class Report(SQLModel, table=True):
    """Analysis report for a project (at most one per project)."""

    __tablename__ = "reports"

    id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", ondelete="CASCADE", unique=True)
    content: str = Field(sa_type=Text)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

"""Project schemas for API request/response."""

from datetime import UTC, datetime

from pydantic import Field, field_serializer, field_validator

from src.app.models.enums import FormOfContract, OrganizationRole
from src.app.schemas.common import CamelModel, MessageResponse


class ProjectDetails(CamelModel):
    """Contract details supplied by the user."""

    project_name: str = Field(min_length=1, max_length=200)
    project_description: str = Field(default="", max_length=5000)
    form_of_contract: FormOfContract
    organization_role: OrganizationRole

    @field_validator("project_name")
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v

    @field_validator("project_description")
    @classmethod
    def validate_project_description(cls, v: str) -> str:
        return v.strip()


class IssueInput(CamelModel):
    """Issue as submitted by the client."""

    description: str = Field(min_length=1, max_length=5000)
    action_taken: str | None = Field(default=None, max_length=5000)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Issue description cannot be empty or whitespace only")
        return v

    @field_validator("action_taken")
    @classmethod
    def validate_action_taken(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class IssueRead(CamelModel):
    """Stored issue."""

    id: int
    description: str
    action_taken: str | None


class ProjectSaveRequest(CamelModel):
    """Body of project create and update requests."""

    project_details: ProjectDetails
    issues: list[IssueInput] = Field(min_length=1)
    report: str | None = None

    @field_validator("report")
    @classmethod
    def validate_report(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


class ProjectRead(CamelModel):
    """Project row as listed to its owner."""

    id: int
    user_id: str
    project_name: str
    project_description: str
    form_of_contract: str
    organization_role: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        # Stored naive in UTC
        if value.tzinfo is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        return value.isoformat() + "Z"


class ProjectListResponse(CamelModel):
    projects: list[ProjectRead]


class ProjectDetailResponse(CamelModel):
    """A project with its issues and report content."""

    project_details: ProjectDetails
    issues: list[IssueRead]
    report: str | None


class ProjectCreatedResponse(MessageResponse):
    message: str = "Project created successfully"
    project_id: int

"""Request/response schemas for report and correspondence generation."""

from pydantic import Field, field_validator

from src.app.schemas.common import CamelModel
from src.app.schemas.project import IssueInput, ProjectDetails


class ReportRequest(CamelModel):
    project_details: ProjectDetails
    issues: list[IssueInput] = Field(min_length=1)


class ReportResponse(CamelModel):
    report: str


class DraftCommunicationRequest(CamelModel):
    project_details: ProjectDetails
    issues: list[IssueInput] = Field(min_length=1)
    report: str = Field(min_length=1)

    @field_validator("report")
    @classmethod
    def validate_report(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Report cannot be empty or whitespace only")
        return v


class DraftCommunicationResponse(CamelModel):
    draft_communication: str

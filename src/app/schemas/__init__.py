"""Pydantic schemas for API request/response."""

from src.app.schemas.common import CamelModel, MessageResponse
from src.app.schemas.generation import (
    DraftCommunicationRequest,
    DraftCommunicationResponse,
    ReportRequest,
    ReportResponse,
)
from src.app.schemas.project import (
    IssueInput,
    IssueRead,
    ProjectCreatedResponse,
    ProjectDetailResponse,
    ProjectDetails,
    ProjectListResponse,
    ProjectRead,
    ProjectSaveRequest,
)

__all__ = [
    # Common
    "CamelModel",
    "MessageResponse",
    # Projects
    "IssueInput",
    "IssueRead",
    "ProjectCreatedResponse",
    "ProjectDetailResponse",
    "ProjectDetails",
    "ProjectListResponse",
    "ProjectRead",
    "ProjectSaveRequest",
    # Generation
    "DraftCommunicationRequest",
    "DraftCommunicationResponse",
    "ReportRequest",
    "ReportResponse",
]

"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Auth
from src.app.api.dependencies.auth import (
    CurrentUser,
    IdentityProviderDep,
    get_current_user,
)

# Database
from src.app.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.app.api.dependencies.repositories import (
    IssueRepo,
    ProjectRepo,
    ReportRepo,
    get_issue_repository,
    get_project_repository,
    get_report_repository,
)

# Services
from src.app.api.dependencies.services import (
    AnalysisServiceDep,
    CommunicationServiceDep,
    LLMClientDep,
    ProjectServiceDep,
    get_analysis_service,
    get_communication_service,
    get_project_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentUser",
    "IdentityProviderDep",
    "get_current_user",
    # Repositories
    "IssueRepo",
    "ProjectRepo",
    "ReportRepo",
    "get_issue_repository",
    "get_project_repository",
    "get_report_repository",
    # Services
    "AnalysisServiceDep",
    "CommunicationServiceDep",
    "LLMClientDep",
    "ProjectServiceDep",
    "get_analysis_service",
    "get_communication_service",
    "get_project_service",
]

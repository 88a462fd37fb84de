"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.app.api.dependencies.db import DBSession
from src.app.api.dependencies.repositories import IssueRepo, ProjectRepo, ReportRepo
from src.app.core.config import get_settings
from src.app.core.llm import LLMClient, get_llm_client
from src.app.services.analysis_service import AnalysisService
from src.app.services.communication_service import CommunicationService
from src.app.services.project_service import ProjectService

LLMClientDep = Annotated[LLMClient, Depends(get_llm_client)]


def get_project_service(
    project_repo: ProjectRepo,
    issue_repo: IssueRepo,
    report_repo: ReportRepo,
    session: DBSession,
) -> ProjectService:
    """Get project service with its repositories sharing one session."""
    return ProjectService(project_repo, issue_repo, report_repo, session)


def get_analysis_service(llm: LLMClientDep) -> AnalysisService:
    """Get analysis report service."""
    return AnalysisService(llm, get_settings())


def get_communication_service(llm: LLMClientDep) -> CommunicationService:
    """Get draft communication service."""
    return CommunicationService(llm, get_settings())


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
AnalysisServiceDep = Annotated[AnalysisService, Depends(get_analysis_service)]
CommunicationServiceDep = Annotated[CommunicationService, Depends(get_communication_service)]

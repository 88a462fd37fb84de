"""Service layer - business logic."""

from src.app.services.analysis_service import AnalysisService
from src.app.services.communication_service import CommunicationService, find_role_conflicts
from src.app.services.project_service import ProjectBundle, ProjectService

__all__ = [
    "AnalysisService",
    "CommunicationService",
    "ProjectBundle",
    "ProjectService",
    "find_role_conflicts",
]

"""Repository layer - data access abstraction."""

from src.app.repositories.base import BaseRepository
from src.app.repositories.issue import IssueRepository
from src.app.repositories.project import ProjectRepository
from src.app.repositories.report import ReportRepository

__all__ = [
    "BaseRepository",
    "IssueRepository",
    "ProjectRepository",
    "ReportRepository",
]

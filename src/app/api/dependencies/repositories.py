"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.app.api.dependencies.db import DBSession
from src.app.repositories import IssueRepository, ProjectRepository, ReportRepository


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_issue_repository(session: DBSession) -> IssueRepository:
    return IssueRepository(session)


def get_report_repository(session: DBSession) -> ReportRepository:
    return ReportRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
IssueRepo = Annotated[IssueRepository, Depends(get_issue_repository)]
ReportRepo = Annotated[ReportRepository, Depends(get_report_repository)]

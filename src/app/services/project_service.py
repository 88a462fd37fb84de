"""Project persistence service - owner-scoped CRUD over projects, issues and reports."""

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.exceptions import NotFoundOrForbidden, ValidationError
from src.app.core.logging import get_logger
from src.app.models import Issue, Project, Report
from src.app.models.base import utc_now
from src.app.repositories import IssueRepository, ProjectRepository, ReportRepository
from src.app.schemas.project import IssueInput, ProjectDetails

logger = get_logger(__name__)


@dataclass
class ProjectBundle:
    """A project with everything it owns."""

    project: Project
    issues: list[Issue]
    report: Report | None

    @property
    def report_content(self) -> str | None:
        return self.report.content if self.report is not None else None


class ProjectService:
    """Project CRUD scoped to the calling user.

    Each mutation is one transaction: the session autobegins on the first
    statement and the service commits once at the end, rolling everything
    back on any failure. Concurrent writes to the same project are last
    write wins.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        issue_repo: IssueRepository,
        report_repo: ReportRepository,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.issue_repo = issue_repo
        self.report_repo = report_repo
        self.session = session

    async def list_projects(self, user_id: str) -> list[Project]:
        """List the user's projects in creation order."""
        projects = await self.project_repo.list_for_user(user_id)
        logger.info("Projects listed", count=len(projects))
        return projects

    async def get_project(self, user_id: str, project_id: int) -> ProjectBundle:
        """Get a project with its issues and report.

        Raises NotFoundOrForbidden if the project is missing or not the user's.
        """
        project = await self._get_owned(user_id, project_id)
        issues = await self.issue_repo.list_for_project(project_id)
        report = await self.report_repo.get_for_project(project_id)
        return ProjectBundle(project=project, issues=issues, report=report)

    async def create_project(
        self,
        user_id: str,
        details: ProjectDetails | None,
        issues: Sequence[IssueInput] | None,
        report: str | None = None,
    ) -> Project:
        """Create a project with its issues and optional report."""
        details, issues = self._require_payload(details, issues)

        project = Project(
            user_id=user_id,
            project_name=details.project_name,
            project_description=details.project_description,
            form_of_contract=details.form_of_contract.value,
            organization_role=details.organization_role.value,
        )

        try:
            self.project_repo.add(project)
            # Flush to get the generated id for the child rows
            await self.session.flush()
            self.issue_repo.add_many(self._build_issues(project.id, issues))  # type: ignore[arg-type]
            if report:
                self.report_repo.add(Report(project_id=project.id, content=report))  # type: ignore[arg-type]
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to create project", error=str(e))
            raise

        logger.info(
            "Project created",
            project_id=project.id,
            issue_count=len(issues),
            has_report=bool(report),
        )
        return project

    async def update_project(
        self,
        user_id: str,
        project_id: int,
        details: ProjectDetails | None,
        issues: Sequence[IssueInput] | None,
        report: str | None = None,
    ) -> Project:
        """Overwrite a project's details and replace its full issue set.

        Prior issues are deleted and the supplied ones inserted, so issue ids
        are not preserved. A supplied report replaces the stored one.
        """
        details, issues = self._require_payload(details, issues)

        try:
            project = await self._get_owned(user_id, project_id)

            project.project_name = details.project_name
            project.project_description = details.project_description
            project.form_of_contract = details.form_of_contract.value
            project.organization_role = details.organization_role.value
            # SQLModel has no onupdate hook, bump the timestamp explicitly
            project.updated_at = utc_now()

            removed = await self.issue_repo.delete_for_project(project_id)
            self.issue_repo.add_many(self._build_issues(project_id, issues))
            if report:
                await self.report_repo.upsert(project_id, report)

            await self.session.commit()
        except NotFoundOrForbidden:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to update project", project_id=project_id, error=str(e))
            raise

        logger.info(
            "Project updated",
            project_id=project_id,
            issues_removed=removed,
            issue_count=len(issues),
            report_saved=bool(report),
        )
        return project

    async def delete_project(self, user_id: str, project_id: int) -> None:
        """Delete a project; the database cascades to its issues and report."""
        try:
            project = await self._get_owned(user_id, project_id)
            await self.session.delete(project)
            await self.session.commit()
        except NotFoundOrForbidden:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to delete project", project_id=project_id, error=str(e))
            raise

        logger.info("Project deleted", project_id=project_id)

    async def _get_owned(self, user_id: str, project_id: int) -> Project:
        project = await self.project_repo.get_owned(project_id, user_id)
        if project is None:
            logger.info("Project not found or not owned", project_id=project_id)
            raise NotFoundOrForbidden()
        return project

    @staticmethod
    def _require_payload(
        details: ProjectDetails | None,
        issues: Sequence[IssueInput] | None,
    ) -> tuple[ProjectDetails, Sequence[IssueInput]]:
        if details is None or not issues:
            raise ValidationError("Missing required project data")
        return details, issues

    @staticmethod
    def _build_issues(project_id: int, issues: Sequence[IssueInput]) -> list[Issue]:
        return [
            Issue(
                project_id=project_id,
                description=issue.description,
                action_taken=issue.action_taken or None,
            )
            for issue in issues
        ]

"""Repository for Report entity."""

from sqlmodel import select

from src.app.models import Report
from src.app.models.base import utc_now
from src.app.repositories.base import BaseRepository


class ReportRepository(BaseRepository[Report]):
    """Repository for project reports (one per project)."""

    model = Report

    async def get_for_project(self, project_id: int) -> Report | None:
        """Get the report attached to a project, if any."""
        result = await self.session.execute(select(Report).where(Report.project_id == project_id))
        return result.scalar_one_or_none()

    async def upsert(self, project_id: int, content: str) -> Report:
        """Replace the project's report content, creating the row if missing.

        Concurrent first saves for the same project race here; the unique
        constraint on project_id makes the loser fail instead of leaving two rows.
        """
        report = await self.get_for_project(project_id)
        if report is None:
            report = Report(project_id=project_id, content=content)
            self.add(report)
        else:
            report.content = content
            report.updated_at = utc_now()
        return report

"""Repository for Issue entity."""

from collections.abc import Iterable

from sqlalchemy import delete
from sqlmodel import select

from src.app.models import Issue
from src.app.repositories.base import BaseRepository


class IssueRepository(BaseRepository[Issue]):
    """Repository for the issues attached to a project."""

    model = Issue

    async def list_for_project(self, project_id: int) -> list[Issue]:
        """List a project's issues in insertion order."""
        result = await self.session.execute(
            select(Issue)
            .where(Issue.project_id == project_id)
            .order_by(Issue.id)  # type: ignore[arg-type]
        )
        return list(result.scalars().all())

    def add_many(self, issues: Iterable[Issue]) -> None:
        """Add issues to session (no flush/commit)."""
        self.session.add_all(list(issues))

    async def delete_for_project(self, project_id: int) -> int:
        """Delete every issue of a project. Returns the number of rows removed."""
        result = await self.session.execute(
            delete(Issue).where(Issue.project_id == project_id)  # type: ignore[arg-type]
        )
        return result.rowcount or 0

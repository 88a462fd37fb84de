"""Repository for Project entity (owner-scoped)."""

from sqlmodel import select

from src.app.models import Project
from src.app.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for projects. Every read takes the owner's user id."""

    model = Project

    async def list_for_user(self, user_id: str) -> list[Project]:
        """List a user's projects, oldest first."""
        result = await self.session.execute(
            select(Project)
            .where(Project.user_id == user_id)
            .order_by(Project.created_at, Project.id)  # type: ignore[arg-type]
        )
        return list(result.scalars().all())

    async def get_owned(self, project_id: int, user_id: str) -> Project | None:
        """Get a project only if it belongs to user_id."""
        result = await self.session.execute(
            select(Project).where(Project.id == project_id, Project.user_id == user_id)
        )
        return result.scalar_one_or_none()

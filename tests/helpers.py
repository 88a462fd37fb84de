"""Test helper functions for common data creation patterns."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.exceptions import AuthenticationError
from src.app.core.identity import AuthenticatedUser
from src.app.models import Issue, Project, Report
from tests.factories import IssueFactory, ProjectFactory, ReportFactory


class FakeIdentityProvider:
    """Identity provider resolving a fixed token -> user id table."""

    def __init__(self, users: dict[str, str]):
        self.users = users
        self.calls: list[str] = []

    async def verify_token(self, token: str) -> AuthenticatedUser:
        self.calls.append(token)
        user_id = self.users.get(token)
        if user_id is None:
            raise AuthenticationError("Invalid or expired token")
        return AuthenticatedUser(id=user_id)

    async def aclose(self) -> None:
        pass


async def create_project_with_children(
    session: AsyncSession,
    issue_count: int = 2,
    report: str | None = None,
    **project_kwargs,
) -> tuple[Project, list[Issue], Report | None]:
    """Create a project with issues and an optional report, committed.

    Args:
        session: Database session
        issue_count: Number of issues to attach
        report: Report content, or None for no report
        **project_kwargs: Additional args passed to ProjectFactory

    Returns:
        Tuple of (project, issues, report)
    """
    project = ProjectFactory.build(**project_kwargs)
    session.add(project)
    await session.flush()

    issues = [IssueFactory.build(project_id=project.id) for _ in range(issue_count)]
    session.add_all(issues)

    report_row = None
    if report is not None:
        report_row = ReportFactory.build(project_id=project.id, content=report)
        session.add(report_row)

    await session.commit()
    return project, issues, report_row


def project_payload(
    name: str = "Bridge Works",
    form_of_contract: str = "NEC4",
    organization_role: str = "Contractor",
    issues: list[dict[str, Any]] | None = None,
    report: str | None = None,
    description: str = "Replacement of a rail overbridge",
) -> dict[str, Any]:
    """Build a camelCase project save/generation request body."""
    body: dict[str, Any] = {
        "projectDetails": {
            "projectName": name,
            "projectDescription": description,
            "formOfContract": form_of_contract,
            "organizationRole": organization_role,
        },
        "issues": issues
        if issues is not None
        else [
            {"description": "Late access to site", "actionTaken": "Notified PM"},
            {"description": "Unforeseen ground conditions", "actionTaken": ""},
        ],
    }
    if report is not None:
        body["report"] = report
    return body

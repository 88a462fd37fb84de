"""Draft correspondence generation."""

import re
from collections.abc import Sequence

from src.app.core.config import Settings
from src.app.core.exceptions import GenerationError, ValidationError
from src.app.core.llm import LLMClient
from src.app.core.logging import get_logger
from src.app.models.enums import OrganizationRole
from src.app.schemas.project import IssueInput, ProjectDetails
from src.app.services.prompts import build_draft_communication_prompt

logger = get_logger(__name__)

# Roles that issue instructions under the contract rather than receive them
EMPLOYER_SIDE_ROLES = frozenset({OrganizationRole.EMPLOYER, OrganizationRole.CLIENT})

EMPLOYER_SIDE_CONFLICTS = (
    re.compile(
        r"\b(seek(?:ing)?|take|taking|obtain(?:ing)?)\s+(independent\s+)?legal\s+advice\b",
        re.IGNORECASE,
    ),
    re.compile(r"\bconsult\s+(a|your)\s+(solicitor|lawyer)\b", re.IGNORECASE),
    re.compile(r"\bprepare\s+for\s+(a\s+)?(formal\s+)?dispute", re.IGNORECASE),
)


def find_role_conflicts(role: OrganizationRole, text: str) -> list[str]:
    """Return phrases in text that are out of character for role.

    A heuristic only: it catches the known failure mode of Employer/Client
    letters advising the other party to get lawyers involved.
    """
    if role not in EMPLOYER_SIDE_ROLES:
        return []
    return [
        match.group(0)
        for pattern in EMPLOYER_SIDE_CONFLICTS
        for match in pattern.finditer(text)
    ]


class CommunicationService:
    """Drafts a letter or email written from the user's organisation role."""

    def __init__(self, llm: LLMClient, settings: Settings):
        self.llm = llm
        self.model = settings.communication_model
        self.temperature = settings.llm_temperature

    async def generate_draft_communication(
        self,
        details: ProjectDetails | None,
        issues: Sequence[IssueInput] | None,
        report: str | None,
    ) -> str:
        """Generate the draft text from the project, its issues and the report."""
        if details is None or not issues or not report or not report.strip():
            raise ValidationError("Missing required details")

        prompt = build_draft_communication_prompt(details, issues, report)
        logger.info(
            "Generating draft communication",
            model=self.model,
            role=details.organization_role.value,
            issue_count=len(issues),
        )

        try:
            draft = await self.llm.complete(
                prompt=prompt,
                model=self.model,
                temperature=self.temperature,
            )
        except GenerationError as e:
            raise GenerationError("Failed to generate draft communication") from e

        conflicts = find_role_conflicts(details.organization_role, draft)
        if conflicts:
            logger.warning(
                "Draft communication conflicts with organisation role",
                role=details.organization_role.value,
                phrases=conflicts,
            )

        logger.info("Draft communication generated", length=len(draft))
        return draft

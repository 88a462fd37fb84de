"""Analysis report generation."""

from collections.abc import Sequence

from src.app.core.config import Settings
from src.app.core.exceptions import GenerationError, ValidationError
from src.app.core.llm import LLMClient
from src.app.core.logging import get_logger
from src.app.schemas.project import IssueInput, ProjectDetails
from src.app.services.prompts import REPORT_SYSTEM_PROMPT, build_report_prompt

logger = get_logger(__name__)


class AnalysisService:
    """Produces a contract analysis report for a project's issues."""

    def __init__(self, llm: LLMClient, settings: Settings):
        self.llm = llm
        self.model = settings.report_model
        self.temperature = settings.llm_temperature

    async def generate_report(
        self,
        details: ProjectDetails | None,
        issues: Sequence[IssueInput] | None,
    ) -> str:
        """Generate the report text; returned verbatim from the provider.

        Validation happens before the provider is contacted. Provider
        timeouts propagate as ProviderTimeoutError.
        """
        if details is None or not issues:
            raise ValidationError("Missing required project details or issues")

        prompt = build_report_prompt(details, issues)
        logger.info("Generating analysis report", model=self.model, issue_count=len(issues))

        try:
            report = await self.llm.complete_chat(
                system=REPORT_SYSTEM_PROMPT,
                prompt=prompt,
                model=self.model,
                temperature=self.temperature,
            )
        except GenerationError as e:
            raise GenerationError("Failed to generate report") from e

        logger.info("Analysis report generated", length=len(report))
        return report

"""Report and draft communication endpoints.

Stateless: nothing is persisted and no authentication is required. Both are
rate limited per client IP since every call reaches the LLM provider.
"""

from fastapi import APIRouter, Request

from src.app.api.dependencies import AnalysisServiceDep, CommunicationServiceDep
from src.app.core.rate_limit import generation_rate_limit, limiter
from src.app.schemas.generation import (
    DraftCommunicationRequest,
    DraftCommunicationResponse,
    ReportRequest,
    ReportResponse,
)

router = APIRouter(tags=["generation"])

GENERATION_ERRORS = {
    400: {"description": "Missing or invalid project details or issues"},
    429: {"description": "Rate limit exceeded"},
    500: {"description": "LLM provider failed or returned no content"},
    504: {"description": "LLM provider timed out"},
}


@router.post(
    "/generateReport",
    response_model=ReportResponse,
    summary="Generate analysis report",
    description=(
        "Generate a contract analysis report for the submitted project details and issues "
        "under the selected form of contract."
    ),
    responses=GENERATION_ERRORS,
)
@limiter.limit(generation_rate_limit)
async def generate_report(
    request: Request,
    payload: ReportRequest,
    service: AnalysisServiceDep,
) -> ReportResponse:
    """Generate an analysis report. Nothing is stored."""
    report = await service.generate_report(payload.project_details, payload.issues)
    return ReportResponse(report=report)


@router.post(
    "/generateDraftCommunication",
    response_model=DraftCommunicationResponse,
    summary="Generate draft communication",
    description=(
        "Draft a letter or email to the other contracting party, written from the "
        "user's organisation role and based on the project, its issues and a report."
    ),
    responses=GENERATION_ERRORS,
)
@limiter.limit(generation_rate_limit)
async def generate_draft_communication(
    request: Request,
    payload: DraftCommunicationRequest,
    service: CommunicationServiceDep,
) -> DraftCommunicationResponse:
    """Draft correspondence from the user's organisation role."""
    draft = await service.generate_draft_communication(
        payload.project_details, payload.issues, payload.report
    )
    return DraftCommunicationResponse(draft_communication=draft)

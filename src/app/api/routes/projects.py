"""Project endpoints - owner-scoped CRUD over projects, issues and reports.

Every route authenticates first; a project that is missing and one owned by
another user produce the same 404.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.app.api.dependencies import CurrentUser, ProjectServiceDep
from src.app.core.exceptions import ValidationError
from src.app.schemas.common import MessageResponse
from src.app.schemas.project import (
    IssueRead,
    ProjectCreatedResponse,
    ProjectDetailResponse,
    ProjectDetails,
    ProjectListResponse,
    ProjectRead,
    ProjectSaveRequest,
)

router = APIRouter(tags=["projects"])

# projects.id is a 32-bit INTEGER column
MAX_PROJECT_ID = 2_147_483_647

ProjectIdQuery = Annotated[
    int | None,
    Query(alias="projectId", ge=1, le=MAX_PROJECT_ID, description="Project identifier"),
]

AUTH_ERRORS = {401: {"description": "Missing or invalid bearer token"}}
OWNED_ERRORS = {
    **AUTH_ERRORS,
    400: {"description": "Missing project ID or invalid body"},
    404: {"description": "Project not found or access denied"},
}


def _require_project_id(project_id: int | None) -> int:
    if project_id is None:
        raise ValidationError("Missing project ID")
    return project_id


@router.get(
    "/projects",
    response_model=ProjectListResponse,
    summary="List projects",
    description="List the caller's projects in creation order.",
    responses=AUTH_ERRORS,
)
async def list_projects(
    user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectListResponse:
    """List the caller's projects."""
    projects = await service.list_projects(user.id)
    return ProjectListResponse(projects=[ProjectRead.model_validate(p) for p in projects])


@router.post(
    "/projects",
    response_model=ProjectCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project with its issues and, optionally, a report.",
    responses={**AUTH_ERRORS, 400: {"description": "Missing or invalid project data"}},
)
async def create_project(
    user: CurrentUser,
    payload: ProjectSaveRequest,
    service: ProjectServiceDep,
) -> ProjectCreatedResponse:
    """Create a new project owned by the caller."""
    project = await service.create_project(
        user.id, payload.project_details, payload.issues, payload.report
    )
    return ProjectCreatedResponse(project_id=project.id)  # type: ignore[arg-type]


@router.put(
    "/projects",
    response_model=MessageResponse,
    summary="Update project",
    description=(
        "Overwrite the project's details and replace its issue list. "
        "A supplied report replaces the stored one; an omitted report leaves it untouched."
    ),
    responses=OWNED_ERRORS,
)
async def update_project(
    user: CurrentUser,
    payload: ProjectSaveRequest,
    service: ProjectServiceDep,
    project_id: ProjectIdQuery = None,
) -> MessageResponse:
    """Update a project owned by the caller."""
    await service.update_project(
        user.id,
        _require_project_id(project_id),
        payload.project_details,
        payload.issues,
        payload.report,
    )
    return MessageResponse(message="Project updated successfully")


@router.delete(
    "/projects",
    response_model=MessageResponse,
    summary="Delete project",
    description="Delete the project together with its issues and report.",
    responses=OWNED_ERRORS,
)
async def delete_project(
    user: CurrentUser,
    service: ProjectServiceDep,
    project_id: ProjectIdQuery = None,
) -> MessageResponse:
    """Delete a project owned by the caller."""
    await service.delete_project(user.id, _require_project_id(project_id))
    return MessageResponse(message="Project deleted successfully")


@router.get(
    "/project",
    response_model=ProjectDetailResponse,
    summary="Get project",
    description="Get one project with its issues and report content.",
    responses=OWNED_ERRORS,
)
async def get_project(
    user: CurrentUser,
    service: ProjectServiceDep,
    project_id: ProjectIdQuery = None,
) -> ProjectDetailResponse:
    """Get a project owned by the caller."""
    bundle = await service.get_project(user.id, _require_project_id(project_id))
    return ProjectDetailResponse(
        project_details=ProjectDetails.model_validate(bundle.project),
        issues=[IssueRead.model_validate(issue) for issue in bundle.issues],
        report=bundle.report_content,
    )

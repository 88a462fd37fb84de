"""Model exports.

Import from here: `from src.app.models import Project, Issue, Report`
"""

from src.app.models.enums import FormOfContract, OrganizationRole
from src.app.models.project import Issue, Project, Report

__all__ = [
    # Enums
    "FormOfContract",
    "OrganizationRole",
    # Tables
    "Issue",
    "Project",
    "Report",
]

"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, IssueFactory, ...
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.project import IssueFactory, ProjectFactory, ReportFactory

__all__ = [
    # Base
    "BaseFactory",
    "utc_now",
    # Project
    "ProjectFactory",
    "IssueFactory",
    "ReportFactory",
]

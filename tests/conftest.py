"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")
# In-memory SQLite unless a database is supplied
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_SSL_MODE", "disable")
# Never reach real providers from tests
os.environ.pop("OPENAI_API_KEY", None)
os.environ.pop("IDENTITY_JWT_SECRET", None)

# ruff: noqa: E402 - Imports must be after env var setup
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.core.config import get_settings
from src.app.core.llm import LLMClient
from src.app.models.enums import FormOfContract, OrganizationRole
from src.app.schemas.project import IssueInput, ProjectDetails
from tests.helpers import FakeIdentityProvider

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()

ALICE_TOKEN = "token-alice"
BOB_TOKEN = "token-bob"


# --- Identity Fixtures ---


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    """Two known users: alice and bob."""
    return FakeIdentityProvider({ALICE_TOKEN: "user-alice", BOB_TOKEN: "user-bob"})


@pytest.fixture
def alice_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ALICE_TOKEN}"}


@pytest.fixture
def bob_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {BOB_TOKEN}"}


# --- LLM Fixtures ---


@pytest.fixture
def fake_llm() -> MagicMock:
    """LLM client double; both call styles return canned text."""
    llm = MagicMock(spec=LLMClient)
    llm.complete_chat = AsyncMock(return_value="Clause 61 requires notification.")
    llm.complete = AsyncMock(return_value="Dear Sirs,\n\nWe write regarding...")
    llm.aclose = AsyncMock()
    return llm


# --- Payload Fixtures ---


@pytest.fixture
def project_details() -> ProjectDetails:
    return ProjectDetails(
        project_name="Bridge Works",
        project_description="Replacement of a rail overbridge",
        form_of_contract=FormOfContract.NEC4,
        organization_role=OrganizationRole.CONTRACTOR,
    )


@pytest.fixture
def issues() -> list[IssueInput]:
    return [
        IssueInput(description="Late access to site", action_taken="Notified PM"),
        IssueInput(description="Unforeseen ground conditions"),
    ]

"""Tests for project listing serialization."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from src.app.schemas.project import ProjectRead

pytestmark = pytest.mark.unit


def project_row(**overrides) -> dict:
    values = {
        "id": 1,
        "user_id": "user-alice",
        "project_name": "Bridge works",
        "project_description": "",
        "form_of_contract": "NEC4",
        "organization_role": "Contractor",
        "created_at": datetime(2026, 10, 19, 12, 0, 0),
        "updated_at": datetime(2026, 10, 19, 12, 30, 0),
    }
    values.update(overrides)
    return values


def test_naive_timestamps_are_emitted_as_utc():
    body = ProjectRead.model_validate(project_row()).model_dump(mode="json", by_alias=True)

    assert body["createdAt"] == "2026-10-19T12:00:00Z"
    assert body["updatedAt"] == "2026-10-19T12:30:00Z"


def test_aware_timestamps_are_converted_to_utc():
    offset = timezone(timedelta(hours=1))
    row = project_row(
        created_at=datetime(2026, 10, 19, 13, 0, 0, tzinfo=offset),
        updated_at=datetime(2026, 10, 19, 12, 0, 0, tzinfo=UTC),
    )

    body = ProjectRead.model_validate(row).model_dump(mode="json", by_alias=True)

    assert body["createdAt"] == "2026-10-19T12:00:00Z"
    assert body["updatedAt"] == "2026-10-19T12:00:00Z"

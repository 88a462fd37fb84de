from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current UTC time as a naive datetime.

    Timestamp columns are TIMESTAMP WITHOUT TIME ZONE and hold UTC by
    convention, so tzinfo is dropped before the value reaches the database.
    """
    return datetime.now(UTC).replace(tzinfo=None)

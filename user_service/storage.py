from __future__ import annotations

from .schemas import MockUser, UserStatus


CREATED_AT = "2024-01-01T00:00:00Z"

MOCK_USERS: tuple[MockUser, ...] = (
    MockUser(
        id="123e4567-e89b-12d3-a456-426614174000",
        email="health.check@loyalty.com",
        first_name="Health",
        last_name="Check",
        status=UserStatus.ACTIVE,
        created_at=CREATED_AT,
    ),
    MockUser(
        id="123e4567-e89b-12d3-a456-426614174001",
        email="demo@loyalty.com",
        first_name="Demo",
        last_name="User",
        status=UserStatus.ACTIVE,
        created_at=CREATED_AT,
    ),
)


def list_users() -> list[MockUser]:
    """Return the fixed user records. Nothing is ever created or removed."""
    return list(MOCK_USERS)

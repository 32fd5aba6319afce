"""Scorelist and user tables."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import JSON, Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ScorelistRow(SQLModel, table=True):
    __tablename__ = "scorelists"

    id: str = Field(primary_key=True)
    owner: Optional[str] = Field(default=None, index=True)
    score: float = Field(index=True)
    score_is_integer: bool = Field(default=False)

    attributes_jsonb: dict[str, Any] = Field(
        default_factory=dict, sa_column=Column(JSONDocument),
    )

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)


class UserRow(SQLModel, table=True):
    """Read-only here: tokens are issued elsewhere and only looked up."""

    __tablename__ = "users"

    id: str = Field(primary_key=True)
    email: str = Field(index=True, unique=True)
    token: Optional[str] = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=utc_now)

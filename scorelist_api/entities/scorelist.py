from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

RESERVED_FIELDS = frozenset({"id", "owner", "score", "created_at", "updated_at", "placement"})


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Caller:
    id: str | None  # resolved from the bearer credential


@dataclass
class Scorelist:
    id: str
    owner: str | None
    score: int | float
    attributes: dict[str, Any] = field(default_factory=dict)  # free-form caller fields (title, text, ...)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @staticmethod
    def generate_id() -> str:
        return uuid.uuid4().hex

    @staticmethod
    def create(owner: str | None, payload: dict[str, Any]) -> "Scorelist":
        return Scorelist(
            id=Scorelist.generate_id(),
            owner=owner,
            score=payload["score"],
            attributes=split_attributes(payload),
        )

    def to_document(self) -> dict[str, Any]:
        return {
            **self.attributes,
            "id": self.id,
            "owner": self.owner,
            "score": self.score,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class LeaderboardEntry:
    scorelist: Scorelist
    placement: int  # 1-based, never persisted

    @property
    def score(self) -> int | float:
        return self.scorelist.score

    def to_document(self) -> dict[str, Any]:
        document = self.scorelist.to_document()
        document["placement"] = self.placement
        return document


def split_attributes(payload: dict[str, Any]) -> dict[str, Any]:
    """Return the free-form part of a payload, without reserved keys."""
    return {key: value for key, value in payload.items() if key not in RESERVED_FIELDS}

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, field_validator

Score = Union[int, float]


def reject_bool(value: Any) -> Any:
    # JSON true/false would otherwise coerce to 1/0.
    if isinstance(value, bool):
        raise ValueError("score must be a number")
    return value


class ScorelistCreate(BaseModel):
    """Fields of a new scorelist. Anything beyond `score` is kept as-is."""

    score: Score

    model_config = ConfigDict(extra="allow")

    @field_validator("score", mode="before")
    @classmethod
    def score_is_number(cls, value: Any) -> Any:
        return reject_bool(value)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class ScorelistCreateEnvelope(BaseModel):
    scorelist: ScorelistCreate


class ScorelistPatch(BaseModel):
    """Validated partial update. Only fields present in the request are dumped."""

    # Not Optional: an explicit null is rejected, an absent score is left alone.
    score: Score = None

    model_config = ConfigDict(extra="allow")

    @field_validator("score", mode="before")
    @classmethod
    def score_is_number(cls, value: Any) -> Any:
        return reject_bool(value)

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ScorelistUpdateEnvelope(BaseModel):
    # Sanitized by the service before it is validated as a ScorelistPatch.
    scorelist: dict[str, Any]


class ScorelistEnvelope(BaseModel):
    scorelist: dict[str, Any]


class ScorelistsEnvelope(BaseModel):
    scorelists: list[dict[str, Any]]

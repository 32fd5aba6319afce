from scorelist_api.schemas.payload_contracts import (
    ScorelistCreate,
    ScorelistCreateEnvelope,
    ScorelistEnvelope,
    ScorelistPatch,
    ScorelistsEnvelope,
    ScorelistUpdateEnvelope,
)

__all__ = [
    "ScorelistCreate",
    "ScorelistCreateEnvelope",
    "ScorelistPatch",
    "ScorelistUpdateEnvelope",
    "ScorelistEnvelope",
    "ScorelistsEnvelope",
]

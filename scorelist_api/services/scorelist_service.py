"""Scorelist service: leaderboard view plus owner-guarded CRUD over a repository."""
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from scorelist_api.entities.scorelist import (
    Caller, LeaderboardEntry, Scorelist, split_attributes,
)
from scorelist_api.schemas import ScorelistPatch
from scorelist_api.services.errors import Failure, ScorelistError, invalid, not_found
from scorelist_api.services.guards import ensure_exists, ensure_owner
from scorelist_api.services.interfaces.scorelist_repository import ScorelistRepository
from scorelist_api.services.ranking import DEFAULT_LEADERBOARD_SIZE, rank_top_n
from scorelist_api.services.sanitize import sanitize_update


def _check(failure: Failure | None) -> None:
    if failure is not None:
        raise ScorelistError(failure)


class ScorelistService:
    def __init__(
        self,
        scorelist_repository: ScorelistRepository,
        leaderboard_size: int = DEFAULT_LEADERBOARD_SIZE,
        sort_before_truncate: bool = False,
    ):
        self.scorelist_repository = scorelist_repository
        self.leaderboard_size = leaderboard_size
        self.sort_before_truncate = sort_before_truncate

        self.logger = logging.getLogger(__name__)

    def leaderboard(self) -> list[LeaderboardEntry]:
        records = self.scorelist_repository.fetch_all()
        entries = rank_top_n(records, self.leaderboard_size, self.sort_before_truncate)
        self.logger.debug("leaderboard built from %d records, %d ranked", len(records), len(entries))
        return entries

    def fetch(self, scorelist_id: str) -> Scorelist:
        record = self.scorelist_repository.fetch(scorelist_id)
        _check(ensure_exists(record))
        return record

    def create(self, caller: Caller, payload: dict[str, Any]) -> Scorelist:
        # owner always comes from the credential, whatever the body says
        scorelist = Scorelist.create(caller.id, payload)
        created = self.scorelist_repository.create(scorelist)
        self.logger.info("scorelist %s created by %s", created.id, caller.id)
        return created

    def update(self, caller: Caller, scorelist_id: str, payload: dict[str, Any]) -> Scorelist:
        changes = sanitize_update(payload)

        record = self.scorelist_repository.fetch(scorelist_id)
        _check(ensure_exists(record))
        _check(ensure_owner(caller, record))

        changes = self._validate_changes(changes)

        updated = self.scorelist_repository.update(scorelist_id, changes)
        if updated is None:
            # deleted between the ownership check and the write
            self.logger.warning("scorelist %s vanished before update", scorelist_id)
            raise ScorelistError(not_found())

        self.logger.info("scorelist %s updated by %s (%s)", scorelist_id, caller.id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def delete(self, caller: Caller, scorelist_id: str) -> None:
        record = self.scorelist_repository.fetch(scorelist_id)
        _check(ensure_exists(record))
        _check(ensure_owner(caller, record))

        if not self.scorelist_repository.delete(scorelist_id):
            self.logger.warning("scorelist %s vanished before delete", scorelist_id)
            raise ScorelistError(not_found())

        self.logger.info("scorelist %s deleted by %s", scorelist_id, caller.id)

    @staticmethod
    def _validate_changes(changes: dict[str, Any]) -> dict[str, Any]:
        try:
            patch = ScorelistPatch.model_validate(changes)
        except ValidationError as exc:
            raise ScorelistError(invalid(_first_error(exc))) from exc

        validated = patch.to_changes()
        result = split_attributes(validated)
        if "score" in validated:
            result["score"] = validated["score"]
        return result


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg')}" if location else str(error.get("msg"))

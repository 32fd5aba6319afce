from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict

from scorelist_api.entities.scorelist import Scorelist, utc_now
from scorelist_api.services.interfaces.scorelist_repository import ScorelistRepository


def _copy(record: Scorelist) -> Scorelist:
    return replace(record, attributes=dict(record.attributes))


class InMemoryScorelistRepository(ScorelistRepository):
    def __init__(self):
        # dicts keep insertion order, which is the store-return order
        self._storage: Dict[str, Scorelist] = {}

    def fetch_all(self) -> list[Scorelist]:
        return [_copy(record) for record in self._storage.values()]

    def fetch(self, scorelist_id: str) -> Scorelist | None:
        record = self._storage.get(scorelist_id)
        return _copy(record) if record else None

    def create(self, scorelist: Scorelist) -> Scorelist:
        self._storage[scorelist.id] = scorelist
        return scorelist

    def update(self, scorelist_id: str, changes: dict[str, Any]) -> Scorelist | None:
        existing = self._storage.get(scorelist_id)
        if existing is None:
            return None

        attributes = dict(existing.attributes)
        attributes.update({key: value for key, value in changes.items() if key != "score"})

        updated = replace(
            existing,
            score=changes.get("score", existing.score),
            attributes=attributes,
            updated_at=utc_now(),
        )
        self._storage[scorelist_id] = updated
        return updated

    def delete(self, scorelist_id: str) -> bool:
        return self._storage.pop(scorelist_id, None) is not None

    def clear(self):
        """Clear all scorelists (only for testing)."""
        self._storage.clear()

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from scorelist_api.entities.scorelist import Scorelist


class ScorelistRepository(ABC):
    @abstractmethod
    def fetch_all(self) -> list[Scorelist]:
        """Every record, in store-return (insertion) order."""
        raise NotImplementedError

    @abstractmethod
    def fetch(self, scorelist_id: str) -> Scorelist | None:
        raise NotImplementedError

    @abstractmethod
    def create(self, scorelist: Scorelist) -> Scorelist:
        raise NotImplementedError

    @abstractmethod
    def update(self, scorelist_id: str, changes: dict[str, Any]) -> Scorelist | None:
        """Apply `changes` and return the stored record, or None if it no longer exists."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, scorelist_id: str) -> bool:
        """Return False when there was nothing to delete."""
        raise NotImplementedError

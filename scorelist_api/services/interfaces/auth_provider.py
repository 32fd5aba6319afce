from __future__ import annotations

from abc import ABC, abstractmethod

from scorelist_api.entities.scorelist import Caller


class AuthProvider(ABC):
    @abstractmethod
    def authenticate(self, token: str) -> Caller | None:
        """Resolve a bearer token to a caller, or None when the token is unknown."""
        raise NotImplementedError

"""Bearer-token authentication for the protected scorelist routes.

The token is read from ``Authorization: Bearer <token>`` and handed to an
``AuthProvider``, which resolves it to a caller:

- ``static``: token table from ``API_TOKENS`` (``token:user_id,...``)
- ``db``: lookup against the ``users`` table (tokens are issued elsewhere)

Listing scorelists is public; every other route resolves a caller first.
"""
from __future__ import annotations

import logging
from typing import Mapping

from scorelist_api.entities.scorelist import Caller
from scorelist_api.services.errors import ScorelistError, unauthorized
from scorelist_api.services.interfaces.auth_provider import AuthProvider

logger = logging.getLogger(__name__)


class StaticTokenAuthProvider(AuthProvider):
    def __init__(self, tokens: Mapping[str, str]):
        self._tokens = dict(tokens)

    def authenticate(self, token: str) -> Caller | None:
        user_id = self._tokens.get(token)
        return Caller(id=user_id) if user_id is not None else None


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


def resolve_caller(authorization: str | None, provider: AuthProvider) -> Caller:
    token = extract_bearer_token(authorization)
    if token is None:
        logger.info("rejected request without a bearer token")
        raise ScorelistError(unauthorized())

    caller = provider.authenticate(token)
    if caller is None:
        logger.warning("rejected request with an unknown bearer token")
        raise ScorelistError(unauthorized("The provided bearer token is not valid"))

    return caller

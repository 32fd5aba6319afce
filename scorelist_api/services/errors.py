from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID = "INVALID"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str


def not_found() -> Failure:
    return Failure(FailureKind.NOT_FOUND, "The provided ID doesn't match any documents")


def forbidden() -> Failure:
    return Failure(FailureKind.FORBIDDEN, "The provided token does not match the owner of this document")


def unauthorized(message: str = "A valid bearer token is required") -> Failure:
    return Failure(FailureKind.UNAUTHORIZED, message)


def invalid(message: str) -> Failure:
    return Failure(FailureKind.INVALID, message)


class ScorelistError(Exception):
    """Carries a `Failure` from the service to the transport layer."""

    def __init__(self, failure: Failure):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind

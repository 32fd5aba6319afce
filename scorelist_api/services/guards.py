"""Access checks run before any mutation. They return a failure, never raise."""
from __future__ import annotations

from scorelist_api.entities.scorelist import Caller, Scorelist
from scorelist_api.services.errors import Failure, forbidden, not_found


def ensure_exists(record: Scorelist | None) -> Failure | None:
    if record is None:
        return not_found()
    return None


def ensure_owner(caller: Caller, record: Scorelist) -> Failure | None:
    if record.owner != caller.id:
        return forbidden()
    return None

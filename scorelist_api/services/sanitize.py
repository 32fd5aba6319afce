from __future__ import annotations

from typing import Any


def sanitize_update(payload: dict[str, Any]) -> dict[str, Any]:
    """Drop `owner` and blank fields from an update payload.

    {"title": "", "text": "foo", "owner": "x"} -> {"text": "foo"}
    """
    return {
        key: value
        for key, value in payload.items()
        if key != "owner" and value != ""
    }

from __future__ import annotations

from dataclasses import dataclass, field
import os


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("true", "1", "yes")


def parse_tokens(raw: str) -> dict[str, str]:
    """Parse `token:user_id` pairs separated by commas into a token -> user id map."""
    tokens: dict[str, str] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        token, sep, user_id = pair.partition(":")
        if not sep or not token.strip() or not user_id.strip():
            raise ValueError(f"API_TOKENS entry must look like 'token:user_id', got {pair!r}")
        tokens[token.strip()] = user_id.strip()
    return tokens


@dataclass(frozen=True)
class RuntimeSettings:
    leaderboard_size: int = 10
    leaderboard_sort_before_truncate: bool = False
    auth_provider: str = "static"
    api_tokens: dict[str, str] = field(default_factory=dict)
    cors_allowed_origins: tuple[str, ...] = ("*",)
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    def __post_init__(self):
        if self.leaderboard_size < 1:
            raise ValueError(f"LEADERBOARD_SIZE must be positive, got {self.leaderboard_size}")
        if self.auth_provider not in ("static", "db"):
            raise ValueError(f"AUTH_PROVIDER must be 'static' or 'db', got {self.auth_provider!r}")

    @classmethod
    def from_env(cls) -> "RuntimeSettings":
        origins = os.getenv("CORS_ALLOWED_ORIGINS", "*")
        return cls(
            leaderboard_size=int(os.getenv("LEADERBOARD_SIZE", "10")),
            leaderboard_sort_before_truncate=_parse_bool(os.getenv("LEADERBOARD_SORT_BEFORE_TRUNCATE", "false")),
            auth_provider=os.getenv("AUTH_PROVIDER", "static").strip().lower(),
            api_tokens=parse_tokens(os.getenv("API_TOKENS", "")),
            cors_allowed_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from scorelist_api.config.runtime import RuntimeSettings, parse_tokens
from scorelist_api.db.session import database_url


class TestRuntimeSettings(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = RuntimeSettings.from_env()

        self.assertEqual(settings.leaderboard_size, 10)
        self.assertFalse(settings.leaderboard_sort_before_truncate)
        self.assertEqual(settings.auth_provider, "static")
        self.assertEqual(settings.api_tokens, {})
        self.assertEqual(settings.cors_allowed_origins, ("*",))

    def test_env_overrides(self):
        env = {
            "LEADERBOARD_SIZE": "5",
            "LEADERBOARD_SORT_BEFORE_TRUNCATE": "true",
            "AUTH_PROVIDER": "DB",
            "API_TOKENS": "tok-a:alice, tok-b:bob",
            "CORS_ALLOWED_ORIGINS": "http://localhost:3000,https://scores.example.com",
            "API_PORT": "9000",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = RuntimeSettings.from_env()

        self.assertEqual(settings.leaderboard_size, 5)
        self.assertTrue(settings.leaderboard_sort_before_truncate)
        self.assertEqual(settings.auth_provider, "db")
        self.assertEqual(settings.api_tokens, {"tok-a": "alice", "tok-b": "bob"})
        self.assertEqual(settings.cors_allowed_origins, ("http://localhost:3000", "https://scores.example.com"))
        self.assertEqual(settings.api_port, 9000)

    def test_invalid_leaderboard_size(self):
        with patch.dict(os.environ, {"LEADERBOARD_SIZE": "0"}, clear=True):
            with self.assertRaises(ValueError):
                RuntimeSettings.from_env()

    def test_invalid_auth_provider(self):
        with patch.dict(os.environ, {"AUTH_PROVIDER": "ldap"}, clear=True):
            with self.assertRaises(ValueError):
                RuntimeSettings.from_env()


class TestParseTokens(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(parse_tokens(""), {})

    def test_malformed_pair(self):
        with self.assertRaises(ValueError):
            parse_tokens("just-a-token")


class TestDatabaseUrl(unittest.TestCase):
    def test_explicit_database_url_wins(self):
        with patch.dict(os.environ, {"DATABASE_URL": "sqlite:///scores.db"}, clear=True):
            self.assertEqual(database_url(), "sqlite:///scores.db")

    def test_composed_from_postgres_parts(self):
        env = {
            "POSTGRES_USER": "u",
            "POSTGRES_PASSWORD": "p",
            "POSTGRES_HOST": "db",
            "POSTGRES_PORT": "5433",
            "POSTGRES_DB": "scores",
        }
        with patch.dict(os.environ, env, clear=True):
            self.assertEqual(database_url(), "postgresql+psycopg2://u:p@db:5433/scores")


if __name__ == "__main__":
    unittest.main()

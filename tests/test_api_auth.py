"""Tests for bearer-token authentication."""
from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from scorelist_api.memory.in_memory_scorelist_repository import InMemoryScorelistRepository
from scorelist_api.middleware.auth import (
    StaticTokenAuthProvider,
    extract_bearer_token,
    resolve_caller,
)
from scorelist_api.services.errors import FailureKind, ScorelistError
from scorelist_api.workers.api_worker import app, get_auth_provider, get_scorelist_repository


class TestExtractBearerToken(unittest.TestCase):
    def test_bearer_header(self):
        self.assertEqual(extract_bearer_token("Bearer secret123"), "secret123")

    def test_scheme_is_case_insensitive(self):
        self.assertEqual(extract_bearer_token("bearer secret123"), "secret123")

    def test_missing_or_empty(self):
        self.assertIsNone(extract_bearer_token(None))
        self.assertIsNone(extract_bearer_token(""))
        self.assertIsNone(extract_bearer_token("Bearer "))

    def test_other_scheme_rejected(self):
        self.assertIsNone(extract_bearer_token("Basic dXNlcjpwYXNz"))


class TestResolveCaller(unittest.TestCase):
    def setUp(self):
        self.provider = StaticTokenAuthProvider({"secret123": "alice"})

    def test_known_token(self):
        self.assertEqual(resolve_caller("Bearer secret123", self.provider).id, "alice")

    def test_missing_token_unauthorized(self):
        with self.assertRaises(ScorelistError) as ctx:
            resolve_caller(None, self.provider)
        self.assertEqual(ctx.exception.kind, FailureKind.UNAUTHORIZED)

    def test_wrong_token_unauthorized(self):
        with self.assertRaises(ScorelistError) as ctx:
            resolve_caller("Bearer wrong", self.provider)
        self.assertEqual(ctx.exception.kind, FailureKind.UNAUTHORIZED)


class TestProtectedRoutes(unittest.TestCase):
    """List is public; every other route needs a valid bearer token."""

    def setUp(self):
        self.repo = InMemoryScorelistRepository()
        app.dependency_overrides[get_scorelist_repository] = lambda: self.repo
        app.dependency_overrides[get_auth_provider] = lambda: StaticTokenAuthProvider({"secret123": "alice"})
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_list_open(self):
        self.assertEqual(self.client.get("/scorelists").status_code, 200)

    def test_healthz_open(self):
        self.assertEqual(self.client.get("/healthz").json(), {"status": "ok"})

    def test_protected_rejected_without_token(self):
        self.assertEqual(self.client.get("/scorelists/abc").status_code, 401)
        self.assertEqual(self.client.post("/scorelists", json={"scorelist": {"score": 1}}).status_code, 401)
        self.assertEqual(self.client.patch("/scorelists/abc", json={"scorelist": {}}).status_code, 401)
        self.assertEqual(self.client.delete("/scorelists/abc").status_code, 401)

    def test_rejection_advertises_bearer_scheme(self):
        resp = self.client.get("/scorelists/abc")
        self.assertEqual(resp.headers.get("www-authenticate"), "Bearer")
        self.assertIn("detail", resp.json())

    def test_wrong_token_rejected(self):
        resp = self.client.get("/scorelists/abc", headers={"Authorization": "Bearer wrong"})
        self.assertEqual(resp.status_code, 401)

    def test_valid_token_reaches_handler(self):
        resp = self.client.get("/scorelists/abc", headers={"Authorization": "Bearer secret123"})
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()

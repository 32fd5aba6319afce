from __future__ import annotations

import unittest

from scorelist_api.entities.scorelist import Caller, Scorelist
from scorelist_api.services.errors import FailureKind
from scorelist_api.services.guards import ensure_exists, ensure_owner
from scorelist_api.services.sanitize import sanitize_update


def _record(owner):
    return Scorelist(id="sc1", owner=owner, score=1)


class TestEnsureExists(unittest.TestCase):
    def test_missing_record_is_not_found(self):
        failure = ensure_exists(None)
        self.assertIsNotNone(failure)
        self.assertEqual(failure.kind, FailureKind.NOT_FOUND)

    def test_present_record_passes(self):
        self.assertIsNone(ensure_exists(_record("alice")))


class TestEnsureOwner(unittest.TestCase):
    def test_owner_passes(self):
        self.assertIsNone(ensure_owner(Caller("alice"), _record("alice")))

    def test_other_caller_is_forbidden(self):
        failure = ensure_owner(Caller("bob"), _record("alice"))
        self.assertEqual(failure.kind, FailureKind.FORBIDDEN)

    def test_falsy_caller_against_owned_record_is_forbidden(self):
        self.assertEqual(ensure_owner(Caller(None), _record("alice")).kind, FailureKind.FORBIDDEN)
        self.assertEqual(ensure_owner(Caller(""), _record("alice")).kind, FailureKind.FORBIDDEN)

    def test_falsy_caller_passes_only_when_owner_equally_falsy(self):
        self.assertIsNone(ensure_owner(Caller(None), _record(None)))
        self.assertIsNone(ensure_owner(Caller(""), _record("")))
        # different falsy values still differ
        self.assertEqual(ensure_owner(Caller(""), _record(None)).kind, FailureKind.FORBIDDEN)


class TestSanitizeUpdate(unittest.TestCase):
    def test_removes_owner(self):
        self.assertEqual(sanitize_update({"owner": "mallory", "score": 3}), {"score": 3})

    def test_removes_blank_fields(self):
        self.assertEqual(
            sanitize_update({"title": "", "text": "foo"}),
            {"text": "foo"},
        )

    def test_keeps_other_values_untouched(self):
        payload = {"score": 0, "title": " ", "tags": [], "note": None, "flag": False}
        self.assertEqual(sanitize_update(payload), payload)

    def test_does_not_mutate_input(self):
        payload = {"owner": "x", "title": ""}
        sanitize_update(payload)
        self.assertEqual(payload, {"owner": "x", "title": ""})


if __name__ == "__main__":
    unittest.main()

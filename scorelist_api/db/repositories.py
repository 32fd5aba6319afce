from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlmodel import Session, select

from scorelist_api.db.tables import ScorelistRow, UserRow
from scorelist_api.entities.scorelist import Caller, Scorelist
from scorelist_api.services.interfaces.auth_provider import AuthProvider
from scorelist_api.services.interfaces.scorelist_repository import ScorelistRepository


class DBScorelistRepository(ScorelistRepository):
    """
    SQLModel-backed implementation of ScorelistRepository.

    It maps the domain Scorelist <-> persistence ScorelistRow; free-form
    fields live in `attributes_jsonb`.
    """

    def __init__(self, session: Session):
        self._session = session

    def rollback(self) -> None:
        self._session.rollback()

    def fetch_all(self) -> list[Scorelist]:
        stmt = select(ScorelistRow).order_by(ScorelistRow.created_at.asc())
        rows = self._session.exec(stmt).all()
        return [self._row_to_domain(row) for row in rows]

    def fetch(self, scorelist_id: str) -> Scorelist | None:
        row = self._session.get(ScorelistRow, scorelist_id)
        return self._row_to_domain(row) if row else None

    def create(self, scorelist: Scorelist) -> Scorelist:
        row = self._domain_to_row(scorelist)
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return self._row_to_domain(row)

    def update(self, scorelist_id: str, changes: dict[str, Any]) -> Scorelist | None:
        existing = self._session.get(ScorelistRow, scorelist_id)
        if existing is None:
            return None

        if "score" in changes:
            existing.score = float(changes["score"])
            existing.score_is_integer = isinstance(changes["score"], int)

        attributes = {key: value for key, value in changes.items() if key != "score"}
        if attributes:
            # reassign so the JSON column is flagged dirty
            existing.attributes_jsonb = {**(existing.attributes_jsonb or {}), **attributes}

        existing.updated_at = datetime.now(timezone.utc)
        self._session.add(existing)
        self._session.commit()
        self._session.refresh(existing)
        return self._row_to_domain(existing)

    def delete(self, scorelist_id: str) -> bool:
        existing = self._session.get(ScorelistRow, scorelist_id)
        if existing is None:
            return False
        self._session.delete(existing)
        self._session.commit()
        return True

    @staticmethod
    def _row_to_domain(row: ScorelistRow) -> Scorelist:
        return Scorelist(
            id=row.id,
            owner=row.owner,
            score=int(row.score) if row.score_is_integer else row.score,
            attributes=dict(row.attributes_jsonb or {}),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @staticmethod
    def _domain_to_row(scorelist: Scorelist) -> ScorelistRow:
        return ScorelistRow(
            id=scorelist.id,
            owner=scorelist.owner,
            score=float(scorelist.score),
            score_is_integer=isinstance(scorelist.score, int),
            attributes_jsonb=dict(scorelist.attributes),
            created_at=scorelist.created_at,
            updated_at=scorelist.updated_at,
        )


class DBTokenAuthProvider(AuthProvider):
    """Resolves bearer tokens against the `users` table."""

    def __init__(self, session: Session):
        self._session = session

    def authenticate(self, token: str) -> Caller | None:
        if not token:
            return None
        stmt = select(UserRow).where(UserRow.token == token)
        row = self._session.exec(stmt).first()
        return Caller(id=row.id) if row else None

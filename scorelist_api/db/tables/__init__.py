from scorelist_api.db.tables.scorelists import ScorelistRow, UserRow

__all__ = [
    "ScorelistRow",
    "UserRow",
]

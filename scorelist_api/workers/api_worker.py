from __future__ import annotations

import logging
from typing import Annotated, Any, Generator

import uvicorn
from fastapi import Depends, FastAPI, Header, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session

from scorelist_api.config.runtime import RuntimeSettings
from scorelist_api.db import DBScorelistRepository, DBTokenAuthProvider, create_session
from scorelist_api.entities.scorelist import Caller
from scorelist_api.middleware.auth import StaticTokenAuthProvider, resolve_caller
from scorelist_api.schemas import (
    ScorelistCreateEnvelope,
    ScorelistEnvelope,
    ScorelistsEnvelope,
    ScorelistUpdateEnvelope,
)
from scorelist_api.services.errors import FailureKind, ScorelistError
from scorelist_api.services.interfaces.auth_provider import AuthProvider
from scorelist_api.services.interfaces.scorelist_repository import ScorelistRepository
from scorelist_api.services.scorelist_service import ScorelistService
from scorelist_api.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

SETTINGS = RuntimeSettings.from_env()

app = FastAPI(title="Scorelist API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_STATUS_BY_FAILURE: dict[FailureKind, int] = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    FailureKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    FailureKind.INVALID: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


@app.exception_handler(ScorelistError)
async def handle_scorelist_error(request: Request, exc: ScorelistError) -> JSONResponse:
    status_code = _STATUS_BY_FAILURE[exc.kind]
    headers = {"WWW-Authenticate": "Bearer"} if exc.kind is FailureKind.UNAUTHORIZED else None
    logger.debug("%s %s -> %d (%s)", request.method, request.url.path, status_code, exc.kind.value)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)}, headers=headers)


# ------------------------------------------------------------------------------
# Dependencies
# ------------------------------------------------------------------------------

def get_db_session() -> Generator[Session, Any, None]:
    with create_session() as session:
        yield session


def get_scorelist_repository(
    session_db: Annotated[Session, Depends(get_db_session)]
) -> ScorelistRepository:
    return DBScorelistRepository(session_db)


def get_auth_provider() -> Generator[AuthProvider, Any, None]:
    if SETTINGS.auth_provider == "db":
        with create_session() as session:
            yield DBTokenAuthProvider(session)
    else:
        yield StaticTokenAuthProvider(SETTINGS.api_tokens)


def require_caller(
    provider: Annotated[AuthProvider, Depends(get_auth_provider)],
    authorization: Annotated[str | None, Header()] = None,
) -> Caller:
    return resolve_caller(authorization, provider)


def get_scorelist_service(
    scorelist_repo: Annotated[ScorelistRepository, Depends(get_scorelist_repository)]
) -> ScorelistService:
    return ScorelistService(
        scorelist_repo,
        leaderboard_size=SETTINGS.leaderboard_size,
        sort_before_truncate=SETTINGS.leaderboard_sort_before_truncate,
    )


# ------------------------------------------------------------------------------
# Routes
# ------------------------------------------------------------------------------

@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/scorelists", response_model=ScorelistsEnvelope)
def list_scorelists(
    service: Annotated[ScorelistService, Depends(get_scorelist_service)],
):
    """Top of the leaderboard, each record annotated with its placement."""
    entries = service.leaderboard()
    return ScorelistsEnvelope(scorelists=[entry.to_document() for entry in entries])


@app.get("/scorelists/{scorelist_id}", response_model=ScorelistEnvelope)
def get_scorelist(
    scorelist_id: str,
    caller: Annotated[Caller, Depends(require_caller)],
    service: Annotated[ScorelistService, Depends(get_scorelist_service)],
):
    scorelist = service.fetch(scorelist_id)
    return ScorelistEnvelope(scorelist=scorelist.to_document())


@app.post("/scorelists", response_model=ScorelistEnvelope, status_code=status.HTTP_201_CREATED)
def create_scorelist(
    body: ScorelistCreateEnvelope,
    caller: Annotated[Caller, Depends(require_caller)],
    service: Annotated[ScorelistService, Depends(get_scorelist_service)],
):
    scorelist = service.create(caller, body.scorelist.to_payload())
    return ScorelistEnvelope(scorelist=scorelist.to_document())


@app.patch("/scorelists/{scorelist_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_scorelist(
    scorelist_id: str,
    body: ScorelistUpdateEnvelope,
    caller: Annotated[Caller, Depends(require_caller)],
    service: Annotated[ScorelistService, Depends(get_scorelist_service)],
) -> Response:
    service.update(caller, scorelist_id, body.scorelist)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.delete("/scorelists/{scorelist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_scorelist(
    scorelist_id: str,
    caller: Annotated[Caller, Depends(require_caller)],
    service: Annotated[ScorelistService, Depends(get_scorelist_service)],
) -> Response:
    service.delete(caller, scorelist_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


if __name__ == "__main__":
    setup_logging(SETTINGS.log_level)

    uvicorn.run(
        app,
        host=SETTINGS.api_host,
        port=SETTINGS.api_port,
    )

"""FastAPI Web application — fix ingest and status display for a live run."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from ghost_pacer import __version__
from ghost_pacer.ghost.dna import parse_dna
from ghost_pacer.ghost.simulator import build_segments
from ghost_pacer.web.schemas import (
    FixRequest,
    HealthResponse,
    PlanRequest,
    PlanResponse,
    SegmentRecord,
    SessionRequest,
    StatusResponse,
)
from ghost_pacer.web.service import NoActiveSessionError, SessionService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(title="Ghost Pacer", version=__version__)

_DEFAULT_DNA = os.environ.get("GHOST_PACER_DNA", "6:00, 1000")

service = SessionService()


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.post("/api/plan", response_model=PlanResponse)
def plan(req: PlanRequest) -> PlanResponse:
    """Parse a ghost plan and return its normalized segments."""
    try:
        segments = build_segments(parse_dna(req.dna or _DEFAULT_DNA))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return PlanResponse(
        segments=[
            SegmentRecord(
                pace=s.pace,
                distance_m=s.distance_m,
                start_time_s=s.start_time_s,
                start_distance_m=s.start_distance_m,
            )
            for s in segments
        ],
        total_distance_m=segments[-1].end_distance_m,
        total_time_s=segments[-1].end_time_s,
    )


@app.post("/api/session", response_model=StatusResponse)
def start_session(req: SessionRequest) -> StatusResponse:
    """Start a new run against the ghost described by ``req.dna``."""
    if not req.dna:
        req = req.model_copy(update={"dna": _DEFAULT_DNA})
    try:
        service.start(req)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return service.status()


@app.post("/api/session/fix", response_model=StatusResponse)
def add_fix(req: FixRequest) -> StatusResponse:
    """Push one GPS fix; returns the runner/ghost status and any cue to play."""
    try:
        return service.add_fix(req.latitude, req.longitude)
    except NoActiveSessionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@app.get("/api/session/status", response_model=StatusResponse)
def session_status() -> StatusResponse:
    try:
        return service.status()
    except NoActiveSessionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@app.delete("/api/session")
def stop_session() -> dict:
    service.stop()
    return {"stopped": True}

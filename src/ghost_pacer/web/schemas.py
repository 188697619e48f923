"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    version: str


class PlanRequest(BaseModel):
    dna: str = ""


class SegmentRecord(BaseModel):
    pace: float
    distance_m: float
    start_time_s: float
    start_distance_m: float


class PlanResponse(BaseModel):
    segments: list[SegmentRecord]
    total_distance_m: float
    total_time_s: float


class SessionRequest(BaseModel):
    dna: str = ""
    capacity: int = Field(default=5, ge=2)
    tolerance_m: float = Field(default=10.0, gt=0)
    audible_range_m: float = Field(default=50.0, gt=0)


class FixRequest(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class FixRecord(BaseModel):
    latitude: float
    longitude: float


class StatusRecord(BaseModel):
    split_pace: float | None
    """None when the runner is stationary over the window."""
    total_distance_m: float
    total_time_s: float
    quality: str | None = None


class StatusResponse(BaseModel):
    ready: bool
    fixes: int
    user: StatusRecord | None = None
    ghost: StatusRecord | None = None
    distance_diff_m: float | None = None
    cue: str | None = None
    volume: float | None = None
    ghost_finished: bool = False
    last_fix: FixRecord | None = None
    text: str = ""

"""Liveness probe.

Routes
------
GET /health    → {"status": "healthy", "time": "<RFC 3339>"}
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    time: str


@router.get("/health", response_model=HealthResponse)
def health() -> dict[str, str]:
    return {
        "status": "healthy",
        "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }

"""Admin endpoints for usage and error retrospectives."""

from __future__ import annotations

from fastapi import APIRouter, Request

from idverify.models.telemetry import RetrospectiveReport

router = APIRouter(tags=["admin"])


@router.get("/telemetry", response_model=RetrospectiveReport)
async def telemetry(request: Request) -> RetrospectiveReport:
    """Return errors, latency and feature usage recorded since startup."""
    return request.app.state.service.telemetry.generate_retrospective_data()

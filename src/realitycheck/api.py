"""HTTP boundary for the reality check engine.

Run with ``uvicorn --factory realitycheck.api:create_app``.
"""

from __future__ import annotations

import json

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from . import __version__
from .container import create_container
from .core import RealityCheckEvaluator
from .schemas import RealityCheckInput

router = APIRouter()
logger = structlog.get_logger(__name__)

MISSING_INPUT_ERROR = "Invalid input: profile and goal are required"


def _evaluator(request: Request) -> RealityCheckEvaluator:
    return request.app.state.evaluator


@router.get("/health")
async def health(request: Request):
    return {
        "status": "ok",
        "engine_version": __version__,
        "scenario_count": len(_evaluator(request).catalog),
    }


@router.get("/api/scenarios")
async def list_scenarios(request: Request):
    return [scenario.to_wire() for scenario in _evaluator(request).catalog]


@router.post("/api/evaluate")
async def evaluate(request: Request):
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None

    if not isinstance(body, dict) or not body.get("profile") or not body.get("goal"):
        return JSONResponse({"error": MISSING_INPUT_ERROR}, status_code=400)

    try:
        payload = RealityCheckInput.model_validate(body)
    except ValidationError as exc:
        return JSONResponse(
            {"error": "Invalid input", "details": json.loads(exc.json(include_url=False))},
            status_code=400,
        )

    try:
        result = _evaluator(request).evaluate(payload.profile, payload.goal)
    except Exception as exc:  # noqa: BLE001
        logger.exception("api.evaluation_failed", error=str(exc))
        return JSONResponse(
            {"error": "Failed to evaluate career goal", "details": str(exc)},
            status_code=500,
        )

    return JSONResponse(result.to_wire())


def create_app(evaluator: RealityCheckEvaluator | None = None) -> FastAPI:
    """Build the FastAPI app around an evaluator (the container's by default)."""
    app = FastAPI(
        title="Career Reality Check API",
        description="Rule-based assessment of how realistic a career goal is",
        version=__version__,
    )
    app.state.evaluator = evaluator or create_container().evaluator()
    app.include_router(router)
    return app

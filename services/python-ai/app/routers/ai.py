import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..core.config import Settings, get_settings
from ..core.errors import ServiceError
from ..orchestrator.goals import analyze_goal, detect_category
from ..orchestrator.openai_client import OpenAIChatClient
from ..schemas.goal import CategoryResult, GoalInput

logger = logging.getLogger(__name__)

router = APIRouter(tags=["goals"])


def get_http_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Outbound transport for the provider client; ``None`` means the network."""
    return None


def cors_headers(settings: Settings) -> Dict[str, str]:
    return {"Access-Control-Allow-Origin": settings.cors_allow_origin}


def preflight_headers(settings: Settings) -> Dict[str, str]:
    return {
        **cors_headers(settings),
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def parse_goal_input(body: Any) -> GoalInput:
    if not isinstance(body, dict) or not body.get("title"):
        raise HTTPException(status_code=400, detail="Title is required")
    try:
        return GoalInput.model_validate(body)
    except ValidationError as exc:
        errors = exc.errors()
        loc = errors[0]["loc"] if errors else ()
        field = str(loc[0]) if loc else "body"
        detail = "Title is required" if field == "title" else f"Invalid {field}"
        raise HTTPException(status_code=400, detail=detail) from exc


def _chat_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport]) -> OpenAIChatClient:
    return OpenAIChatClient(
        settings.require_openai_api_key(),
        base_url=settings.openai_base_url,
        timeout=settings.openai_timeout_seconds,
        transport=transport,
    )


@router.options("/analyze-goal")
@router.options("/detect-category")
async def preflight(settings: Settings = Depends(get_settings)) -> Response:
    return Response(status_code=200, headers=preflight_headers(settings))


@router.post("/analyze-goal")
async def analyze_goal_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_http_transport),
) -> JSONResponse:
    try:
        goal = parse_goal_input(await request.json())
        async with _chat_client(settings, transport) as client:
            result = await analyze_goal(goal, client, model=settings.openai_model)
    except (HTTPException, ServiceError):
        raise
    except Exception as exc:
        logger.exception("Goal analysis failed")
        raise ServiceError(str(exc) or exc.__class__.__name__) from exc
    return JSONResponse(result, headers=cors_headers(settings))


@router.post("/detect-category")
async def detect_category_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_http_transport),
) -> JSONResponse:
    try:
        body = await request.json()
    except ValueError as exc:
        logger.warning("Unreadable category request body: %s", exc)
        return JSONResponse(CategoryResult().model_dump(), headers=cors_headers(settings))
    goal = parse_goal_input(body)
    async with _chat_client(settings, transport) as client:
        result = await detect_category(goal, client, model=settings.openai_model)
    return JSONResponse(result.model_dump(), headers=cors_headers(settings))

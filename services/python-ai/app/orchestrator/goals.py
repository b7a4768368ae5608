import logging
from datetime import date
from typing import Optional

from ..schemas.goal import FALLBACK_CATEGORY, AnalysisResult, CategoryResult, GoalInput
from .openai_client import OpenAIChatClient
from .parsing import extract_json_object, normalize_category
from .prompts import build_analysis_prompt, build_category_prompt

logger = logging.getLogger(__name__)

ANALYSIS_TEMPERATURE = 0.7
ANALYSIS_MAX_TOKENS = 2500
CATEGORY_TEMPERATURE = 0.3
CATEGORY_MAX_TOKENS = 20


async def analyze_goal(goal: GoalInput, client: OpenAIChatClient, *, model: str, today: Optional[date] = None) -> AnalysisResult:
    year = (today or date.today()).year
    reply = await client.complete(
        build_analysis_prompt(goal, year),
        model=model,
        temperature=ANALYSIS_TEMPERATURE,
        max_tokens=ANALYSIS_MAX_TOKENS,
    )
    return extract_json_object(reply)


async def detect_category(goal: GoalInput, client: OpenAIChatClient, *, model: str) -> CategoryResult:
    """Classify a goal, falling back to ``other`` on any provider failure."""
    try:
        reply = await client.complete(
            build_category_prompt(goal),
            model=model,
            temperature=CATEGORY_TEMPERATURE,
            max_tokens=CATEGORY_MAX_TOKENS,
        )
        category = normalize_category(reply)
    except Exception as exc:
        logger.warning("Category detection failed, using %s: %s", FALLBACK_CATEGORY, exc)
        return CategoryResult(category=FALLBACK_CATEGORY)
    if category == FALLBACK_CATEGORY and reply.strip().lower() != FALLBACK_CATEGORY:
        logger.info("Unrecognized category reply %r", reply[:40])
    return CategoryResult(category=category)

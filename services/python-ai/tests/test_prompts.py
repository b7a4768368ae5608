import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.orchestrator.prompts import build_analysis_prompt, build_category_prompt  # noqa: E402
from app.schemas.goal import GOAL_CATEGORIES, GoalInput  # noqa: E402


def test_analysis_prompt_embeds_goal_and_year():
    prompt = build_analysis_prompt(GoalInput(title="Run a marathon", description="Finish under 4 hours"), 2027)
    assert 'Resolution: "Run a marathon"' in prompt
    assert 'Description: "Finish under 4 hours"' in prompt
    assert '"targetDate": "2027-12-31"' in prompt
    for key in ("quarterlyPlan", "risks", "trackingSystem", "minimumViableProgress", "identityStatement", "suggestedMilestones"):
        assert f'"{key}"' in prompt


def test_analysis_prompt_omits_missing_description():
    prompt = build_analysis_prompt(GoalInput(title="Read more"), 2026)
    assert "Description:" not in prompt


def test_category_prompt_lists_every_category():
    prompt = build_category_prompt(GoalInput(title="Learn Spanish", description=""))
    assert 'Resolution: "Learn Spanish"' in prompt
    assert "Description:" not in prompt
    for category in GOAL_CATEGORIES:
        assert f"- {category} (" in prompt

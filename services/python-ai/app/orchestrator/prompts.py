from ..schemas.goal import GoalInput


def _goal_lines(goal: GoalInput) -> str:
    lines = f'Resolution: "{goal.title}"\n'
    lines += f'Description: "{goal.description}"\n' if goal.description else "\n"
    return lines


def build_analysis_prompt(goal: GoalInput, year: int) -> str:
    return f"""You are a goal-setting coach. Analyze this New Year's resolution and help make it SMART (Specific, Measurable, Achievable, Relevant, Time-bound).

{_goal_lines(goal)}
Respond in JSON format with this exact structure:
{{
  "category": "one of: health, money_career, family_life_balance, learning, other",
  "isSmart": boolean (true if the goal is already SMART enough),
  "analysis": {{
    "specific": {{ "pass": boolean, "feedback": "brief feedback" }},
    "measurable": {{ "pass": boolean, "feedback": "brief feedback" }},
    "achievable": {{ "pass": boolean, "feedback": "brief feedback" }},
    "relevant": {{ "pass": boolean, "feedback": "brief feedback" }},
    "timeBound": {{ "pass": boolean, "feedback": "brief feedback" }}
  }},
  "improvedGoal": "A more specific, measurable version of the goal (or the same if already good)",
  "improvedDescription": "A brief description with clear success criteria",
  "identityStatement": "I am the kind of person who ... (one sentence the user can repeat)",
  "quarterlyPlan": [
    {{ "quarter": "Q1", "focus": "theme for the quarter", "target": "measurable target", "leadingIndicator": "weekly action to track", "laggingIndicator": "outcome that confirms progress" }},
    {{ "quarter": "Q2", "focus": "...", "target": "...", "leadingIndicator": "...", "laggingIndicator": "..." }},
    {{ "quarter": "Q3", "focus": "...", "target": "...", "leadingIndicator": "...", "laggingIndicator": "..." }},
    {{ "quarter": "Q4", "focus": "...", "target": "...", "leadingIndicator": "...", "laggingIndicator": "..." }}
  ],
  "risks": [
    {{ "risk": "likely obstacle", "mitigation": "concrete plan to handle it" }}
  ],
  "trackingSystem": {{ "method": "how progress is recorded", "frequency": "daily | weekly | monthly", "metric": "the number being tracked" }},
  "minimumViableProgress": {{ "description": "the smallest action that still counts on a bad week", "frequency": "how often" }},
  "categorySpecific": {{ "notes": "advice specific to the goal's category" }},
  "suggestedMilestones": [
    {{ "title": "milestone name", "targetPercent": 25, "targetDate": "{year}-03-31" }},
    {{ "title": "milestone name", "targetPercent": 50, "targetDate": "{year}-06-30" }},
    {{ "title": "milestone name", "targetPercent": 75, "targetDate": "{year}-09-30" }},
    {{ "title": "milestone name", "targetPercent": 100, "targetDate": "{year}-12-31" }}
  ]
}}

The quarterlyPlan must have exactly 4 entries, one per quarter of {year}. List 2-4 risks. Keep milestones practical and achievable within {year}. Only include 3-4 milestones."""


def build_category_prompt(goal: GoalInput) -> str:
    return f"""Categorize this New Year's resolution into exactly ONE of these categories:
- health (fitness, exercise, diet, sleep, mental health, wellness, weight loss, meditation, yoga, etc.)
- money_career (job, salary, savings, investing, business, promotion, side hustle, professional development, etc.)
- family_life_balance (relationships, family time, travel, hobbies, social life, work-life balance, relaxation, etc.)
- learning (education, reading, courses, new skills, languages, certifications, creative skills, etc.)
- other (anything that doesn't fit the above categories)

{_goal_lines(goal)}
Respond with ONLY the category name, nothing else. Just one word from: health, money_career, family_life_balance, learning, other"""


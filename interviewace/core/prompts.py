from typing import Mapping, Sequence

from interviewace.core.memory import build_context
from interviewace.core.models import Evaluation, Turn

LAST_QUESTION_INDEX = 5

START_PROMPT = """You are Zen AI, the InterviewAce interview assistant. You conduct professional {type} interviews for {role} positions at {difficulty} difficulty level.

TASK: Generate a personalized greeting and first interview question.

CRITICAL JSON FORMAT REQUIREMENTS:
- Your response MUST be ONLY valid JSON
- NO markdown formatting, NO backticks, NO extra text
- ONLY the JSON object with greeting and question
- Start greeting with exactly: "{name_prefix}"

INSTRUCTIONS:
- Create a warm, professional greeting that sets the candidate at ease
- Ask an appropriate first question for this role and interview type
- Match the difficulty level appropriately{focus}
- Respond ONLY in valid JSON format

REQUIRED JSON RESPONSE (NO OTHER TEXT):
{{
  "greeting": "{name_prefix}I'm Zen AI, your InterviewAce assistant. Welcome to your {type} interview for the {role} position. Let's begin!",
  "question": "Your first interview question here"
}}

Role: {role}
Interview Type: {type}
Difficulty: {difficulty}

Respond with ONLY the JSON object:"""

RESPOND_SUFFIX = """

FLOW CONTROL:
This was question {number} of the session. Extend the JSON object above with two more keys:
- "nextQuestion": the next interview question as a string (use the follow-up if you asked one), or null to end
- "endInterview": {end_hint}

CRITICAL: Respond ONLY with the JSON object - NO OTHER TEXT"""


def build_start_prompt(config: Mapping[str, str], user_name: str | None = None) -> str:
    name_prefix = f"Hello {user_name}! " if user_name else "Hello! "
    focus = ""
    if config.get("focus_area"):
        focus = f"\n- Focus the question on {config['focus_area']}"
    if config.get("company"):
        focus += f"\n- Tailor the tone to an interview at {config['company']}"

    return START_PROMPT.format(
        type=config["type"],
        role=config["role"],
        difficulty=config["difficulty"],
        name_prefix=name_prefix,
        focus=focus,
    )


def build_respond_prompt(
    question: str,
    answer: str,
    history: Sequence[Turn],
    evaluation: Evaluation,
    config: Mapping[str, str],
    question_index: int,
) -> str:
    context = build_context(question, answer, history, evaluation, config)
    if question_index >= LAST_QUESTION_INDEX:
        end_hint = "true, this was the final question"
    else:
        end_hint = "true only if the interview should end early, otherwise false"
    return context + RESPOND_SUFFIX.format(number=question_index + 1, end_hint=end_hint)

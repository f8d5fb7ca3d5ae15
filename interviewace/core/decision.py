import math
from typing import Any, List, Sequence

from interviewace.core.models import DecisionContext, DecisionResult, InterviewConfig, Progress, Source

FOLLOW_UP_THRESHOLDS = {
    "easy": 50,
    "medium": 60,
    "hard": 70,
}
DEFAULT_FOLLOW_UP_THRESHOLD = 60

LOW_PERFORMANCE_AVERAGE = 30
EXCELLENT_PERFORMANCE_AVERAGE = 95
TREND_DELTA = 10


def decide(context: DecisionContext) -> DecisionResult:
    question_index = context["question_index"]
    total_questions = context["total_questions"]
    average = context["average_score"]

    if question_index >= total_questions - 1:
        return _end("Maximum questions reached", 1.0)

    if average < LOW_PERFORMANCE_AVERAGE and question_index >= 2:
        return _end("Performance significantly below threshold", 0.8)

    if average >= EXCELLENT_PERFORMANCE_AVERAGE and question_index >= 3:
        return _end("Consistently excellent performance demonstrated", 0.9)

    if should_ask_follow_up(context):
        return {
            "should_continue": True,
            "should_end": False,
            "next_action": "follow_up",
            "reason": f"Current answer needs clarification (score: {context['current_score']})",
            "confidence": 0.7,
        }

    return {
        "should_continue": True,
        "should_end": False,
        "next_action": "next_question",
        "reason": "Continue with standard interview flow",
        "confidence": 0.9,
    }


def should_ask_follow_up(context: DecisionContext) -> bool:
    # no follow-ups in the last two slots
    if context["question_index"] >= context["total_questions"] - 2:
        return False

    difficulty = context["config"].get("difficulty", "")
    threshold = FOLLOW_UP_THRESHOLDS.get(difficulty, DEFAULT_FOLLOW_UP_THRESHOLD)
    return context["current_score"] < threshold


def calculate_progress(scores: Sequence[float]) -> Progress:
    if not scores:
        return {"average": 0, "trend": "stable", "consistency": 0}

    average = sum(scores) / len(scores)

    trend = "stable"
    if len(scores) >= 4:
        midpoint = len(scores) // 2
        first_half = sum(scores[:midpoint]) / midpoint
        second_half = sum(scores[midpoint:]) / (len(scores) - midpoint)
        difference = second_half - first_half
        if difference > TREND_DELTA:
            trend = "improving"
        elif difference < -TREND_DELTA:
            trend = "declining"

    variance = sum((score - average) ** 2 for score in scores) / len(scores)
    consistency = max(0, 100 - math.sqrt(variance)) / 100

    return {"average": average, "trend": trend, "consistency": consistency}


def build_decision_context(
    question_index: int,
    total_questions: int,
    current_score: float,
    session_scores: List[float],
    config: InterviewConfig,
    source: Source = "fallback",
    success: bool = True,
) -> DecisionContext:
    scores = list(session_scores)
    return {
        "question_index": question_index,
        "total_questions": total_questions,
        "current_score": current_score,
        "session_scores": scores,
        "average_score": sum(scores) / len(scores) if scores else current_score,
        "last_response": {"source": source, "success": success},
        "config": config,
    }


def validate_decision_context(context: Any) -> bool:
    if not isinstance(context, dict):
        return False
    numeric = ("question_index", "total_questions", "current_score", "average_score")
    return (
        all(_is_number(context.get(key)) for key in numeric)
        and isinstance(context.get("session_scores"), list)
        and isinstance(context.get("config"), dict)
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _end(reason: str, confidence: float) -> DecisionResult:
    return {
        "should_continue": False,
        "should_end": True,
        "next_action": "end_interview",
        "reason": reason,
        "confidence": confidence,
    }

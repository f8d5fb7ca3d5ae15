from typing import Dict, List, Mapping

from interviewace.core.models import Evaluation, ScoreBreakdown
from interviewace.evaluation.keywords import get_relevant_keywords
from interviewace.evaluation.normalize import (
    SUBSCORE_WEIGHTS,
    normalize_overall,
    normalize_subscore,
)
from interviewace.evaluation.preprocessor import word_count
from interviewace.evaluation.scorers import (
    clarity_score,
    confidence_score,
    relevance_score,
    structure_score,
    technical_score,
)

EVALUATOR_VERSION = "1.0.0"


def evaluate_answer(question: str, answer: str, context: Mapping[str, str]) -> Evaluation:
    keywords = get_relevant_keywords(context["role"], context["type"])

    raw = {
        "relevance": relevance_score(question, answer),
        "clarity": clarity_score(answer),
        "technical": technical_score(answer, keywords),
        "confidence": confidence_score(answer),
        "structure": structure_score(answer),
    }
    breakdown: ScoreBreakdown = {
        "technical": normalize_subscore(raw["technical"]),
        "clarity": normalize_subscore(raw["clarity"]),
        "confidence": normalize_subscore(raw["confidence"]),
        "relevance": normalize_subscore(raw["relevance"]),
        "structure": normalize_subscore(raw["structure"]),
    }

    return {
        "overall_score": normalize_overall(breakdown),
        "breakdown": breakdown,
        "strengths": _derive_strengths(raw),
        "improvements": _derive_improvements(raw),
        "feedback": _generate_feedback(raw, context["type"]),
        "metadata": {
            "word_count": word_count(answer),
            "evaluation_method": "algorithmic",
            "version": EVALUATOR_VERSION,
        },
    }


def _derive_strengths(scores: Dict[str, int]) -> List[str]:
    strengths = []
    if scores["relevance"] >= 75:
        strengths.append("Directly addressed the question with relevant information")
    if scores["clarity"] >= 75:
        strengths.append("Clear and well-structured explanation")
    if scores["technical"] >= 75:
        strengths.append("Strong technical knowledge and terminology usage")
    if scores["confidence"] >= 75:
        strengths.append("Confident delivery with concrete examples")
    if scores["structure"] >= 75:
        strengths.append("Logical flow and organized presentation")

    if not strengths:
        best = max(scores.values())
        if scores["relevance"] == best:
            strengths.append("Answer shows understanding of the question topic")
        elif scores["clarity"] == best:
            strengths.append("Response has good readability")
        elif scores["technical"] == best:
            strengths.append("Uses some relevant technical concepts")
        else:
            strengths.append("Shows effort in structuring the response")

    return strengths


def _derive_improvements(scores: Dict[str, int]) -> List[str]:
    improvements = []
    if scores["relevance"] < 60:
        improvements.append("Address the question more directly with specific examples")
    if scores["clarity"] < 60:
        improvements.append("Break down complex ideas into clearer sentences")
    if scores["technical"] < 60:
        improvements.append("Include more domain-specific terminology and concepts")
    if scores["confidence"] < 60:
        improvements.append("Use more assertive language with concrete action verbs")
    if scores["structure"] < 60:
        improvements.append("Organize your response with a clear beginning, middle, and end")

    if not improvements:
        worst = min(scores.values())
        if scores["relevance"] == worst:
            improvements.append("Ensure all points directly relate to the question")
        if scores["technical"] == worst and len(improvements) < 2:
            improvements.append("Incorporate more specific technical details")

    if len(improvements) == 1:
        improvements.append("Practice explaining concepts with real-world examples")

    return improvements[:3]


def _generate_feedback(scores: Dict[str, int], interview_type: str) -> str:
    overall = sum(scores[name] * weight for name, weight in SUBSCORE_WEIGHTS.items())

    if overall >= 80:
        feedback = "Excellent response! You demonstrated strong understanding and communication skills. "
    elif overall >= 65:
        feedback = "Good answer with solid fundamentals. "
    elif overall >= 50:
        feedback = "Decent response, but there's room for improvement. "
    else:
        feedback = "Your answer needs more development. "

    if scores["technical"] < 60 and interview_type == "technical":
        feedback += "Focus on including more technical details and specific technologies. "
    if scores["structure"] < 60 and interview_type == "behavioral":
        feedback += "Try using the STAR format (Situation, Task, Action, Result) for behavioral questions. "
    if scores["relevance"] < 60:
        feedback += "Make sure to directly address what the question is asking. "
    if scores["clarity"] < 60:
        feedback += "Work on making your explanations clearer and more concise. "

    return feedback.strip()

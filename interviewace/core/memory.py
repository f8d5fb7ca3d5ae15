from typing import Any, Dict, Mapping, Sequence

from interviewace.core.models import Evaluation, Turn

# 4 question/answer exchanges
HISTORY_WINDOW = 8


def format_history(history: Sequence[Turn], window: int = HISTORY_WINDOW) -> str:
    recent = list(history)[-window:] if window else []
    return "\n".join(
        f"{'Interviewer' if turn['role'] == 'assistant' else 'Candidate'}: {turn['content']}"
        for turn in recent
    )


def build_context(
    question: str,
    answer: str,
    history: Sequence[Turn],
    evaluation: Evaluation,
    config: Mapping[str, Any],
) -> str:
    breakdown = evaluation["breakdown"]
    previous_turns = format_history(history) or "No previous conversation"

    return f"""You are conducting a professional mock interview. Be constructive, specific, and encouraging.

INTERVIEW CONTEXT:
Role: {config['role']}
Interview Type: {config['type']}
Difficulty Level: {config['difficulty']}

CONVERSATION HISTORY:
{previous_turns}

CURRENT EXCHANGE:
Interviewer: {question}
Candidate: {answer}

ALGORITHMIC ANALYSIS:
Overall Score: {evaluation['overall_score']}/100
- Technical Depth: {breakdown['technical']}/10
- Clarity: {breakdown['clarity']}/10
- Confidence: {breakdown['confidence']}/10
- Relevance: {breakdown['relevance']}/10
- Structure: {breakdown['structure']}/10

Algorithmic Feedback: {evaluation['feedback']}

INSTRUCTIONS:
1. Provide constructive feedback highlighting strengths and specific improvement areas
2. If the answer lacks depth (score < 70), ask a relevant follow-up question
3. If the answer is sufficient (score >= 70), indicate readiness to move on
4. Keep feedback professional, encouraging, and actionable
5. Tailor follow-ups to the specific weak points identified

Respond in this EXACT JSON format:
{{
  "feedback": "Professional feedback incorporating algorithmic insights with specific suggestions",
  "followUp": "Relevant follow-up question or null if answer is sufficient"
}}"""


def build_session_summary(history: Sequence[Mapping[str, str]], scores: Sequence[float]) -> Dict[str, Any]:
    average = sum(scores) / len(scores) if scores else 0
    return {
        "total_exchanges": len(history) // 2,
        "average_score": round(average),
        "progression": list(scores),
        "conversation_length": len(history),
    }

from datetime import datetime
from typing import Any, Dict, List, Sequence

from interviewace.core.models import PersistedSession
from interviewace.evaluation.normalize import migrate_subscore, round_half_up

TREND_WINDOW = 10


def empty_overview() -> Dict[str, Any]:
    return {
        "total_sessions": 0,
        "average_score": 0,
        "avg_duration": 0,
        "skill_breakdown": {
            "technical": 0,
            "communication": 0,
            "confidence": 0,
            "clarity": 0,
        },
        "score_trend": [],
    }


def build_overview(sessions: Sequence[PersistedSession]) -> Dict[str, Any]:
    if not sessions:
        return empty_overview()

    scores = [s["overall_score"] for s in sessions if s.get("overall_score") is not None]
    average_score = round_half_up(sum(scores) / len(scores)) if scores else 0

    durations = [
        (_parse(s["ended_at"]) - _parse(s["started_at"])).total_seconds() / 60
        for s in sessions
        if s.get("started_at") and s.get("ended_at")
    ]
    avg_duration = round_half_up(sum(durations) / len(durations)) if durations else 0

    evaluations = [
        q["evaluation"]
        for s in sessions
        for q in s.get("questions", [])
        if q.get("evaluation")
    ]

    skill_breakdown = empty_overview()["skill_breakdown"]
    if evaluations:
        skill_breakdown = {
            "technical": _average([migrate_subscore(e.get("technical_depth") or e.get("technical") or 0) for e in evaluations]),
            "communication": _average([migrate_subscore(e.get("score") or 0) for e in evaluations]),
            "confidence": _average([migrate_subscore(e.get("confidence") or 0) for e in evaluations]),
            "clarity": _average([migrate_subscore(e.get("clarity") or 0) for e in evaluations]),
        }

    score_trend = [
        {"date": _short_date(s["started_at"]), "score": s["overall_score"]}
        for s in reversed(list(sessions)[:TREND_WINDOW])
        if s.get("overall_score") is not None
    ]

    return {
        "total_sessions": len(sessions),
        "average_score": average_score,
        "avg_duration": avg_duration,
        "skill_breakdown": skill_breakdown,
        "score_trend": score_trend,
    }


def _average(values: List[float]) -> int:
    return round_half_up(sum(values) / len(values))


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value)


def _short_date(value: str) -> str:
    parsed = _parse(value)
    return f"{parsed.strftime('%b')} {parsed.day}"

from interviewace.analytics.overview import TREND_WINDOW, build_overview, empty_overview


def _session(day, score, minutes=30, evaluations=()):
    return {
        "id": f"s{day}",
        "user_email": "ada@example.com",
        "started_at": f"2026-03-{day:02d}T10:00:00+00:00",
        "ended_at": f"2026-03-{day:02d}T10:{minutes:02d}:00+00:00",
        "config": {"role": "backend", "type": "technical", "difficulty": "easy"},
        "questions": [{"text": "Q", "answer": "A", "kind": "main", "evaluation": e} for e in evaluations],
        "overall_score": score,
        "created_at": f"2026-03-{day:02d}T10:00:00+00:00",
    }


def test_empty_overview():
    assert build_overview([]) == empty_overview()


def test_overview_metrics():
    sessions = [
        _session(2, 80, 20, [{"score": 8, "clarity": 70, "confidence": 6, "technical_depth": 9}]),
        _session(1, 61, 41, [{"score": 60, "clarity": 5, "confidence": 4}]),
    ]
    overview = build_overview(sessions)

    assert overview["total_sessions"] == 2
    assert overview["average_score"] == 71
    assert overview["avg_duration"] == 31
    assert overview["skill_breakdown"] == {"technical": 5, "communication": 7, "confidence": 5, "clarity": 6}
    assert overview["score_trend"] == [{"date": "Mar 1", "score": 61}, {"date": "Mar 2", "score": 80}]


def test_trend_window_is_oldest_first():
    sessions = [_session(day, 50 + day) for day in range(15, 0, -1)]
    trend = build_overview(sessions)["score_trend"]
    assert len(trend) == TREND_WINDOW
    assert trend[0]["date"] == "Mar 6"
    assert trend[-1]["date"] == "Mar 15"


def test_sessions_without_score_are_excluded_from_average():
    overview = build_overview([_session(1, None), _session(2, 90)])
    assert overview["average_score"] == 90
    assert overview["score_trend"] == [{"date": "Mar 2", "score": 90}]

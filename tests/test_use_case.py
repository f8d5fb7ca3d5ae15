from datetime import datetime, timezone

import pytest

from interviewace.core.use_case import InterviewUseCase
from interviewace.storages.session_storage import SessionStorage


@pytest.fixture
def use_case(fallback_engine):
    return InterviewUseCase(fallback_engine, SessionStorage())


def _questions():
    return [
        {"text": "Q1", "answer": "A1", "kind": "main", "evaluation": {"score": 8, "clarity": 7, "confidence": 6}},
        {"text": "Follow up", "answer": "A2", "kind": "follow_up", "evaluation": {"score": 2}},
        {"text": "Q2", "answer": "A3", "kind": "main", "evaluation": {"score": 60, "clarity": 50}},
    ]


@pytest.mark.asyncio
async def test_start_interview(use_case, frontend_config):
    result = await use_case.start_interview(frontend_config, "Ada")

    assert result["success"] is True
    assert result["session_id"].startswith("session_")
    assert result["source"] == "fallback"
    assert result["config"] == frontend_config
    assert len(result["question_plan"]) == 6


@pytest.mark.asyncio
async def test_start_interview_invalid_config(use_case):
    result = await use_case.start_interview({"role": "frontend"})
    assert result == {"success": False, "error": "Interview configuration requires a non-empty 'type'"}


@pytest.mark.asyncio
async def test_respond_includes_decision_and_progress(use_case, frontend_config, strong_answer):
    result = await use_case.respond("What is React?", strong_answer, [], frontend_config, 1, ["fe-easy-1"], [70])

    assert result["success"] is True
    assert set(result["evaluation"]) == {"score", "breakdown", "feedback"}
    assert result["decision"]["next_action"] in ("next_question", "follow_up", "end_interview")
    assert result["progress"]["average"] == (70 + result["evaluation"]["score"]) / 2
    assert result["done"] is False


@pytest.mark.asyncio
async def test_respond_invalid_input_returns_failure(use_case, frontend_config):
    result = await use_case.respond("What is React?", "", [], frontend_config, 0)
    assert result == {"success": False, "error": "A non-empty answer is required"}


def test_transition(use_case):
    result = use_case.transition("listening", "answer_submitted", {"question_index": 1, "total_questions": 6})
    assert result == {
        "success": True,
        "state": "evaluating",
        "changed": True,
        "input_disabled": True,
        "should_speak": False,
        "message": "Analyzing your answer...",
    }

    unchanged = use_case.transition("idle", "tts_finished", {})
    assert unchanged["changed"] is False
    assert unchanged["state"] == "idle"


def test_transition_rejects_unknown_names(use_case):
    assert use_case.transition("paused", "tts_finished", {})["success"] is False
    assert use_case.transition("idle", "jump", {})["success"] is False


def test_complete_interview_derives_score_from_main_questions(use_case, frontend_config):
    result = use_case.complete_interview(
        "ada@example.com",
        datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc),
        datetime(2026, 3, 1, 10, 30, tzinfo=timezone.utc),
        frontend_config,
        _questions(),
    )
    assert result["success"] is True

    session = use_case.get_session("ada@example.com", result["session_id"])
    assert [q["text"] for q in session["questions"]] == ["Q1", "Q2"]
    assert session["overall_score"] == 70
    assert session["started_at"] == "2026-03-01T10:00:00+00:00"


def test_complete_interview_keeps_explicit_score(use_case, frontend_config):
    now = datetime(2026, 3, 1, 10, 0)
    result = use_case.complete_interview("ada@example.com", now, now, frontend_config, [], overall_score=42)
    assert use_case.get_session("ada@example.com", result["session_id"])["overall_score"] == 42


def test_complete_interview_invalid_payload(use_case, frontend_config):
    now = datetime.now(timezone.utc)
    assert use_case.complete_interview("ada@example.com", None, now, frontend_config, []) == {
        "success": False,
        "error": "Invalid payload",
    }
    assert use_case.complete_interview("ada@example.com", now, now, frontend_config, None)["success"] is False


def test_sessions_are_scoped_to_user(use_case, frontend_config):
    now = datetime.now(timezone.utc)
    result = use_case.complete_interview("ada@example.com", now, now, frontend_config, [])

    assert use_case.get_session("bob@example.com", result["session_id"]) is None
    assert use_case.list_sessions("bob@example.com") == []
    assert len(use_case.list_sessions("ada@example.com")) == 1


@pytest.mark.asyncio
async def test_subscore_scale_session_scores_are_normalized(use_case, frontend_config, strong_answer):
    result = await use_case.respond("What is React?", strong_answer, [], frontend_config, 2, ["fe-easy-1"], [8, 9])
    score = result["evaluation"]["score"]

    assert result["progress"]["average"] == pytest.approx((80 + 90 + score) / 3)
    assert result["decision"]["reason"] != "Performance significantly below threshold"
    assert result["decision"]["should_end"] is False


@pytest.mark.asyncio
async def test_non_numeric_session_scores_are_rejected(use_case, frontend_config, strong_answer):
    result = await use_case.respond("What is React?", strong_answer, [], frontend_config, 1, [], ["high"])
    assert result == {"success": False, "error": "session_scores must be a list of numbers"}


@pytest.mark.asyncio
async def test_start_interview_begins_a_fresh_event_log(use_case, frontend_config, strong_answer):
    for index in range(5):
        await use_case.respond("What is React?", strong_answer, [], frontend_config, index)
    logger = use_case.engine.logger
    assert any(event["component"] == "Decision" for event in logger.get_log_data()["events"])

    await use_case.start_interview(frontend_config, "Ada")

    events = logger.get_log_data()["events"]
    assert [event["component"] for event in events] == ["Fallback"]
    assert logger.get_log_data()["metrics"]["fallbacks"] == 1


@pytest.mark.asyncio
async def test_start_interview_returns_initial_state_context(use_case, frontend_config):
    result = await use_case.start_interview({**frontend_config, "question_count": 4})

    assert result["state_context"]["question_index"] == 0
    assert result["state_context"]["total_questions"] == 4
    assert result["state_context"]["session_id"] == result["session_id"]


def test_untagged_questions_are_not_persisted(use_case, frontend_config):
    now = datetime.now(timezone.utc)
    questions = [
        {"text": "Q1", "answer": "A1", "kind": "main", "evaluation": {"score": 9}},
        {"text": "Untagged", "answer": "A2", "evaluation": {"score": 1}},
        {"text": "Null kind", "answer": "A3", "kind": None},
    ]
    result = use_case.complete_interview("ada@example.com", now, now, frontend_config, questions)

    session = use_case.get_session("ada@example.com", result["session_id"])
    assert [q["text"] for q in session["questions"]] == ["Q1"]
    assert session["overall_score"] == 90

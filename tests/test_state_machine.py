import pytest

from interviewace.core.state_machine import (
    EVENTS,
    STATES,
    create_state_context,
    get_state_message,
    is_input_disabled,
    should_speak,
    transition,
)


@pytest.mark.parametrize(
    "state,event,expected",
    [
        ("idle", "session_started", "speaking"),
        ("speaking", "tts_finished", "listening"),
        ("listening", "answer_submitted", "evaluating"),
    ],
)
def test_happy_path_edges(state, event, expected):
    assert transition(state, event, {"question_index": 0, "total_questions": 6}) == expected


def test_evaluation_complete_returns_to_speaking_while_questions_remain():
    assert transition("evaluating", "evaluation_complete", {"question_index": 2, "total_questions": 6}) == "speaking"


def test_evaluation_complete_finishes_at_last_question():
    assert transition("evaluating", "evaluation_complete", {"question_index": 6, "total_questions": 6}) == "finished"


@pytest.mark.parametrize("state", ["idle", "speaking", "listening", "evaluating"])
def test_interview_ended_finishes_from_any_active_state(state):
    assert transition(state, "interview_ended", {}) == "finished"


def test_invalid_pair_keeps_state():
    assert transition("idle", "answer_submitted", {}) == "idle"
    assert transition("speaking", "evaluation_complete", {}) == "speaking"


def test_finished_is_terminal():
    for event in ("session_started", "tts_finished", "answer_submitted", "evaluation_complete", "interview_ended"):
        assert transition("finished", event, {"question_index": 0, "total_questions": 6}) == "finished"


def test_state_flags():
    assert is_input_disabled("speaking")
    assert is_input_disabled("evaluating")
    assert is_input_disabled("finished")
    assert not is_input_disabled("listening")
    assert not is_input_disabled("idle")
    assert should_speak("speaking")
    assert not should_speak("listening")


def test_state_messages():
    assert get_state_message("listening") == "Your turn to respond"
    assert get_state_message("finished") == "Interview complete"
    assert get_state_message("bogus") == "Unknown state"


def test_create_state_context():
    context = create_state_context(4)
    assert context["question_index"] == 0
    assert context["total_questions"] == 4
    assert context["session_id"].startswith("session_")


def test_every_pair_outside_the_edge_table_is_a_no_op():
    valid = {
        ("idle", "session_started"),
        ("speaking", "tts_finished"),
        ("listening", "answer_submitted"),
        ("evaluating", "evaluation_complete"),
    }
    context = {"question_index": 5, "total_questions": 5}
    for state in STATES:
        for event in EVENTS:
            if (state, event) in valid or (event == "interview_ended" and state != "finished"):
                continue
            assert transition(state, event, context) == state


def test_last_answer_of_a_five_question_session_finishes():
    assert transition("evaluating", "evaluation_complete", {"question_index": 5, "total_questions": 5}) == "finished"
    assert transition("evaluating", "evaluation_complete", {"question_index": 2, "total_questions": 5}) == "speaking"

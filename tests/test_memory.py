from interviewace.core.memory import HISTORY_WINDOW, build_context, build_session_summary, format_history
from interviewace.core.prompts import build_respond_prompt, build_start_prompt
from interviewace.evaluation import evaluate_answer


def _history(pairs):
    history = []
    for i in range(pairs):
        history.append({"role": "assistant", "content": f"Question {i}"})
        history.append({"role": "user", "content": f"Answer {i}"})
    return history


def test_format_history_keeps_last_window():
    text = format_history(_history(6))
    lines = text.splitlines()
    assert len(lines) == HISTORY_WINDOW
    assert lines[0] == "Interviewer: Question 2"
    assert lines[-1] == "Candidate: Answer 5"


def test_build_context_sections(frontend_config):
    evaluation = evaluate_answer("What is React?", "React is a component library.", frontend_config)
    context = build_context("What is React?", "React is a component library.", [], evaluation, frontend_config)

    assert "INTERVIEW CONTEXT:" in context
    assert "Role: frontend" in context
    assert "No previous conversation" in context
    assert "Interviewer: What is React?" in context
    assert "Candidate: React is a component library." in context
    assert f"Overall Score: {evaluation['overall_score']}/100" in context
    assert '"followUp"' in context


def test_build_context_includes_history(frontend_config):
    evaluation = evaluate_answer("Q", "A short answer.", frontend_config)
    context = build_context("Q", "A short answer.", _history(1), evaluation, frontend_config)
    assert "Interviewer: Question 0\nCandidate: Answer 0" in context
    assert "No previous conversation" not in context


def test_session_summary():
    summary = build_session_summary(_history(3), [60, 70, 80])
    assert summary == {
        "total_exchanges": 3,
        "average_score": 70,
        "progression": [60, 70, 80],
        "conversation_length": 6,
    }


def test_start_prompt_personalisation():
    config = {"role": "backend", "type": "technical", "difficulty": "hard", "focus_area": "databases", "company": "Acme"}
    prompt = build_start_prompt(config, "Ada")
    assert 'Start greeting with exactly: "Hello Ada! "' in prompt
    assert "Focus the question on databases" in prompt
    assert "interview at Acme" in prompt

    anonymous = build_start_prompt({"role": "backend", "type": "technical", "difficulty": "hard"})
    assert '"Hello! ' in anonymous
    assert "Focus the question" not in anonymous


def test_respond_prompt_flags_final_question(frontend_config):
    evaluation = evaluate_answer("Q", "Some answer here.", frontend_config)
    early = build_respond_prompt("Q", "Some answer here.", [], evaluation, frontend_config, 1)
    final = build_respond_prompt("Q", "Some answer here.", [], evaluation, frontend_config, 5)

    assert "question 2 of the session" in early
    assert '"nextQuestion"' in early
    assert "otherwise false" in early
    assert "this was the final question" in final

from interviewace.questions import MAX_QUESTIONS, QUESTION_BANK, get_greeting, get_next_question, select_questions
from interviewace.questions.bank import normalize_role, normalize_type
from interviewace.questions.selector import EMERGENCY_QUESTION


def test_bank_ids_are_unique():
    ids = [q["id"] for q in QUESTION_BANK]
    assert len(ids) == len(set(ids))


def test_next_question_exact_match_is_first_in_bank_order(frontend_config):
    question = get_next_question({**frontend_config, "used_questions": []})
    assert question["id"] == "fe-easy-1"
    assert question["is_greeting"] is False
    assert question["metadata"] == {"category": "technical", "role": "frontend", "difficulty": "easy"}


def test_used_questions_accept_ids_and_texts(frontend_config):
    first = get_next_question({**frontend_config, "used_questions": ["fe-easy-1"]})
    assert first["id"] == "fe-easy-2"

    second = get_next_question({**frontend_config, "used_questions": ["fe-easy-1", first["text"]]})
    assert second["id"] == "fe-easy-3"


def test_relaxes_to_same_difficulty(frontend_config):
    used = ["fe-easy-1", "fe-easy-2", "fe-easy-3"]
    question = get_next_question({**frontend_config, "used_questions": used})
    assert question["metadata"]["difficulty"] == "easy"
    assert question["id"] == "be-easy-1"


def test_emergency_question_when_bank_exhausted(frontend_config):
    used = [q["id"] for q in QUESTION_BANK]
    assert get_next_question({**frontend_config, "used_questions": used}) == EMERGENCY_QUESTION


def test_next_question_is_repeatable(behavioral_config):
    request = {**behavioral_config, "used_questions": ["beh-1"]}
    assert get_next_question(request) == get_next_question(request)
    assert get_next_question(request)["id"] == "beh-2"


def test_greeting_is_stable_and_personalised(frontend_config):
    greeting = get_greeting(frontend_config, "Ada")
    assert greeting["is_greeting"] is True
    assert "Ada" in greeting["text"]
    assert greeting["text"].endswith("Let's start with our first question.")
    assert get_greeting(frontend_config, "Ada") == greeting


def test_greeting_for_unknown_type_uses_technical_templates():
    greeting = get_greeting({"role": "backend", "type": "pairing", "difficulty": "hard"})
    assert "technical" in greeting["text"] or "backend" in greeting["text"]


def test_normalizers():
    assert normalize_role("Senior Frontend Engineer") == "frontend"
    assert normalize_role("Full Stack") == "fullstack"
    assert normalize_role("Data Scientist") == "general"
    assert normalize_type("System Design") == "system-design"
    assert normalize_type("HR screen") == "hr"
    assert normalize_type("whatever") == "technical"


def test_select_questions_respects_limit(frontend_config):
    plan = select_questions(frontend_config)
    assert len(plan) == MAX_QUESTIONS
    assert plan == select_questions(frontend_config)
    assert len(select_questions(frontend_config, 3)) == 3

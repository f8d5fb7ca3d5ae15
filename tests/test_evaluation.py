import pytest

from interviewace.evaluation import evaluate_answer, migrate_subscore, to_percent
from interviewace.evaluation.normalize import normalize_overall, normalize_subscore, round_half_up
from interviewace.evaluation.preprocessor import avg_sentence_length, extract_sentences, preprocess, word_count
from interviewace.evaluation.scorers import confidence_score, relevance_score, structure_score, technical_score


def test_preprocess_drops_stopwords_and_short_tokens():
    assert preprocess("The API is a REST endpoint, ok?") == ["api", "rest", "endpoint"]


def test_sentence_helpers():
    text = "First sentence here. Second one! Third?"
    assert extract_sentences(text) == ["First sentence here", "Second one", "Third"]
    assert word_count(text) == 6
    assert avg_sentence_length(text) == 2
    assert avg_sentence_length("") == 0


def test_round_half_up_matches_away_from_bankers():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4) == 2


def test_normalization_scales():
    assert normalize_subscore(84) == 8
    assert normalize_subscore(85) == 9
    assert normalize_subscore(150) == 10
    assert normalize_overall({"relevance": 10, "clarity": 10, "technical": 10, "confidence": 10, "structure": 10}) == 100
    assert normalize_overall({"relevance": 0, "clarity": 0, "technical": 0, "confidence": 0, "structure": 0}) == 0


def test_score_migration():
    assert migrate_subscore(7) == 7
    assert migrate_subscore(70) == 7
    assert to_percent(7) == 70
    assert to_percent(85) == 85
    assert to_percent(None) == 0


def test_individual_scorers():
    assert relevance_score("", "anything") == 0
    assert relevance_score("Explain database indexing", "Database indexing speeds lookups") > 50
    assert technical_score("anything", []) == 50
    assert confidence_score("I implemented it and successfully delivered.") > 50
    assert confidence_score("Maybe, I guess, not sure.") < 50
    assert structure_score("First we did this. Then the result was good because of the approach.") > 40


def test_evaluate_answer_shape(frontend_config, strong_answer):
    evaluation = evaluate_answer("How would you optimize the performance of a slow web page?", strong_answer, frontend_config)

    assert 0 <= evaluation["overall_score"] <= 100
    assert set(evaluation["breakdown"]) == {"technical", "clarity", "confidence", "relevance", "structure"}
    assert all(0 <= value <= 10 for value in evaluation["breakdown"].values())
    assert evaluation["strengths"]
    assert len(evaluation["improvements"]) <= 3
    assert evaluation["feedback"]
    assert evaluation["metadata"]["evaluation_method"] == "algorithmic"
    assert evaluation["metadata"]["version"] == "1.0.0"


def test_strong_answer_beats_weak_answer(frontend_config, strong_answer):
    question = "How would you optimize the performance of a slow web page?"
    strong = evaluate_answer(question, strong_answer, frontend_config)
    weak = evaluate_answer(question, "Maybe I guess not sure.", frontend_config)
    assert strong["overall_score"] > weak["overall_score"]


def test_evaluation_is_deterministic(behavioral_config, strong_answer):
    first = evaluate_answer("Tell me about a project.", strong_answer, behavioral_config)
    second = evaluate_answer("Tell me about a project.", strong_answer, behavioral_config)
    assert first == second


@pytest.mark.parametrize("answer", ["", "   ", "?!"])
def test_degenerate_answers_do_not_raise(frontend_config, answer):
    evaluation = evaluate_answer("What is React?", answer, frontend_config)
    assert evaluation["breakdown"]["clarity"] == 0

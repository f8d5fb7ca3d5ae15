import re
from typing import List

from interviewace.evaluation.normalize import round_half_up
from interviewace.evaluation.preprocessor import (
    avg_sentence_length,
    extract_sentences,
    preprocess,
    word_count,
)

STRONG_SIGNALS = [
    "i implemented", "i designed", "i built", "i created", "i developed",
    "i solved", "i optimized", "i improved", "i achieved", "i delivered",
    "successfully", "effectively", "efficiently", "accomplished",
    "demonstrated", "proven", "resulted in", "led to", "ensured",
]

WEAK_SIGNALS = [
    "maybe", "perhaps", "possibly", "might", "not sure", "i think",
    "i guess", "probably", "kind of", "sort of", "somewhat",
    "hopefully", "try to", "attempted", "didn't really", "not very",
]

SEQUENTIAL_MARKERS = [
    "first", "second", "third", "next", "then", "after", "finally",
    "initially", "subsequently", "lastly", "step 1", "step 2",
]

STAR_MARKERS = [
    "situation", "task", "action", "result", "outcome", "impact",
    "challenge", "approach", "solution", "achieved",
]

LOGICAL_CONNECTORS = [
    "because", "therefore", "however", "consequently", "thus",
    "as a result", "due to", "leads to", "which means",
]

_FIRST_PERSON_ACTION_RE = re.compile(
    r"\bI\s+(implemented|designed|built|created|developed|solved)", re.IGNORECASE
)


def _count_present(text: str, markers: List[str]) -> int:
    return sum(1 for marker in markers if marker in text)


def relevance_score(question: str, answer: str) -> int:
    q_tokens = set(preprocess(question))
    a_tokens = set(preprocess(answer))
    if not q_tokens:
        return 0

    intersection = len(q_tokens & a_tokens)
    similarity = intersection / len(q_tokens | a_tokens)
    coverage = intersection / len(q_tokens)

    return min(round_half_up((coverage * 0.7 + similarity * 0.3) * 100), 100)


def clarity_score(answer: str) -> int:
    if not extract_sentences(answer):
        return 0

    avg_length = avg_sentence_length(answer)
    total_words = word_count(answer)
    score = 50

    if 10 <= avg_length <= 20:
        score += 30
    elif 6 <= avg_length <= 25:
        score += 20
    elif avg_length < 6:
        score += 10
    else:
        score += 5

    if 30 <= total_words <= 150:
        score += 20
    elif 20 <= total_words <= 200:
        score += 10

    if total_words < 10:
        score -= 30

    return max(0, min(score, 100))


def technical_score(answer: str, domain_keywords: List[str]) -> int:
    if not domain_keywords:
        return 50

    tokens = " ".join(preprocess(answer))
    answer_lower = answer.lower()

    matches = 0
    matched = set()
    for keyword in domain_keywords:
        keyword_lower = keyword.lower()
        if keyword_lower in answer_lower or keyword_lower in tokens:
            matches += 1
            matched.add(keyword)

    # sqrt keeps large vocabularies from demanding too many hits
    coverage = matches / (len(domain_keywords) ** 0.5)
    score = min(coverage * 50, 100)

    if len(matched) >= 3:
        score += 10
    if len(matched) >= 5:
        score += 10

    return round_half_up(min(score, 100))


def confidence_score(answer: str) -> int:
    text = answer.lower()
    score = 50
    score += _count_present(text, STRONG_SIGNALS) * 8
    score -= _count_present(text, WEAK_SIGNALS) * 12

    if _FIRST_PERSON_ACTION_RE.search(answer):
        score += 10

    return max(0, min(score, 100))


def structure_score(answer: str) -> int:
    text = answer.lower()
    score = 40

    sequential = _count_present(text, SEQUENTIAL_MARKERS)
    star = _count_present(text, STAR_MARKERS)
    logical = _count_present(text, LOGICAL_CONNECTORS)

    if sequential >= 2:
        score += 20
    elif sequential == 1:
        score += 10

    if star >= 2:
        score += 20
    elif star == 1:
        score += 10

    if logical >= 2:
        score += 15
    elif logical == 1:
        score += 8

    if 3 <= len(extract_sentences(answer)) <= 8:
        score += 10

    return max(0, min(score, 100))

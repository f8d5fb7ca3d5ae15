import re
from typing import List

STOPWORDS = frozenset({
    "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "can", "of", "at", "by", "for", "with",
    "about", "against", "between", "into", "through", "during", "before",
    "after", "above", "below", "to", "from", "up", "down", "in", "out", "on",
    "off", "over", "under", "again", "further", "then", "once", "here", "there",
    "when", "where", "why", "how", "all", "both", "each", "few", "more", "most",
    "other", "some", "such", "no", "nor", "not", "only", "own", "same", "so",
    "than", "too", "very", "just", "but", "and", "or", "if", "because", "as",
    "until", "while", "what", "which", "who", "whom", "this", "that", "these",
    "those", "am", "it",
})

_PUNCTUATION_RE = re.compile(r"[^\w\s]")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def preprocess(text: str) -> List[str]:
    cleaned = _PUNCTUATION_RE.sub(" ", text.lower())
    return [word for word in cleaned.split() if len(word) > 2 and word not in STOPWORDS]


def extract_sentences(text: str) -> List[str]:
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def word_count(text: str) -> int:
    return len(text.split())


def avg_sentence_length(text: str) -> float:
    sentences = extract_sentences(text)
    if not sentences:
        return 0
    return sum(word_count(sentence) for sentence in sentences) / len(sentences)

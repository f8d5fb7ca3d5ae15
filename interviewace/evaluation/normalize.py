import math
from typing import Mapping

# subscores are 0-10, overall scores 0-100
SUBSCORE_WEIGHTS = {
    "relevance": 0.30,
    "clarity": 0.20,
    "technical": 0.25,
    "confidence": 0.15,
    "structure": 0.10,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float, minimum: float = 0, maximum: float = 100) -> float:
    return max(minimum, min(maximum, value))


def normalize_subscore(raw: float) -> int:
    return int(clamp(round_half_up(raw / 10), 0, 10))


def normalize_overall(subscores: Mapping[str, float]) -> int:
    weighted = sum(subscores[name] * weight for name, weight in SUBSCORE_WEIGHTS.items())
    return int(clamp(round_half_up(weighted * 10), 0, 100))


def migrate_subscore(old_score: float) -> float:
    if old_score <= 10:
        return old_score
    return normalize_subscore(old_score)


def to_percent(score: float | None) -> float:
    if score is None:
        return 0
    if score <= 10:
        return clamp(score * 10)
    return clamp(score)

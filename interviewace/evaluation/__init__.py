from interviewace.evaluation.engine import evaluate_answer
from interviewace.evaluation.normalize import migrate_subscore, to_percent

__all__ = [
    "evaluate_answer",
    "migrate_subscore",
    "to_percent"
]

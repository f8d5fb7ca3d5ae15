from interviewace.questions.bank import MAX_QUESTIONS, QUESTION_BANK, Question, select_questions
from interviewace.questions.selector import get_greeting, get_next_question

__all__ = [
    "MAX_QUESTIONS",
    "QUESTION_BANK",
    "Question",
    "select_questions",
    "get_greeting",
    "get_next_question"
]

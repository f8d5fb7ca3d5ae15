import logging
import uuid
from typing import Mapping

from interviewace.core.models import InterviewEvent, InterviewState, StateContext

logger = logging.getLogger(__name__)

STATES = ("idle", "speaking", "listening", "evaluating", "finished")
EVENTS = ("session_started", "tts_finished", "answer_submitted", "evaluation_complete", "interview_ended")

_SIMPLE_EDGES = {
    ("idle", "session_started"): "speaking",
    ("speaking", "tts_finished"): "listening",
    ("listening", "answer_submitted"): "evaluating",
}

STATE_MESSAGES = {
    "idle": "Preparing interview...",
    "speaking": "Listen to the question",
    "listening": "Your turn to respond",
    "evaluating": "Analyzing your answer...",
    "finished": "Interview complete",
}


def transition(current_state: InterviewState, event: InterviewEvent, context: Mapping) -> InterviewState:
    if current_state != "finished":
        if event == "interview_ended":
            return "finished"

        if current_state == "evaluating" and event == "evaluation_complete":
            if context.get("question_index", 0) >= context.get("total_questions", 0):
                return "finished"
            return "speaking"

        next_state = _SIMPLE_EDGES.get((current_state, event))
        if next_state is not None:
            return next_state

    logger.warning(f"Invalid transition: {current_state} + {event}")
    return current_state


def is_input_disabled(state: InterviewState) -> bool:
    return state in ("speaking", "evaluating", "finished")


def should_speak(state: InterviewState) -> bool:
    return state == "speaking"


def get_state_message(state: InterviewState) -> str:
    return STATE_MESSAGES.get(state, "Unknown state")


def create_state_context(total_questions: int = 6) -> StateContext:
    return {
        "question_index": 0,
        "total_questions": total_questions,
        "session_id": f"session_{uuid.uuid4().hex[:8]}",
    }

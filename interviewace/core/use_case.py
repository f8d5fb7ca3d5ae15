import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from interviewace.analytics.overview import build_overview
from interviewace.config.settings import settings
from interviewace.core.decision import build_decision_context, calculate_progress, decide, validate_decision_context
from interviewace.core.engine import InterviewEngine, validate_config, validate_respond_params
from interviewace.core.memory import build_session_summary
from interviewace.core.models import InterviewFailure, PersistedSession, SessionQuestion, Turn
from interviewace.core.state_machine import (
    EVENTS,
    STATES,
    create_state_context,
    get_state_message,
    is_input_disabled,
    should_speak,
    transition,
)
from interviewace.evaluation.normalize import to_percent
from interviewace.questions import select_questions
from interviewace.storages.session_storage import SessionStorage


def failure(error: str) -> InterviewFailure:
    return {"success": False, "error": error}


def _utc_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class InterviewUseCase:
    def __init__(self, engine: InterviewEngine, storage: SessionStorage):
        self.engine = engine
        self.storage = storage

    async def start_interview(self, config: Dict[str, Any], user_name: str | None = None) -> Dict[str, Any]:
        error = validate_config(config)
        if error:
            return failure(error)

        # one event log per session
        self.engine.logger.reset()
        result = await self.engine.start(config, user_name)
        total_questions = self._total_questions(config)
        plan = select_questions(config, total_questions)
        state_context = create_state_context(total_questions)
        return {
            "success": True,
            "session_id": state_context["session_id"],
            "state_context": state_context,
            "greeting": result["greeting"],
            "question": result["question"],
            "source": result["source"],
            "config": config,
            "question_plan": [q["text"] for q in plan],
            "debug": result["debug"],
        }

    async def respond(
        self,
        question: str,
        answer: str,
        history: List[Turn],
        config: Dict[str, Any],
        question_index: int,
        used_questions: List[str] | None = None,
        session_scores: List[float] | None = None,
    ) -> Dict[str, Any]:
        error = validate_respond_params(question, answer, history, config, question_index)
        if error:
            return failure(error)
        if session_scores is not None and not all(
            isinstance(score, (int, float)) and not isinstance(score, bool) for score in session_scores
        ):
            return failure("session_scores must be a list of numbers")

        result = await self.engine.respond(question, answer, history, config, question_index, used_questions)

        scores = [*(to_percent(score) for score in session_scores or []), result["score"]]
        context = build_decision_context(
            question_index,
            self._total_questions(config),
            result["score"],
            scores,
            config,
            source=result["source"],
            success=not result["debug"]["ai_error"],
        )
        if not validate_decision_context(context):
            return failure("Invalid decision context")
        decision = decide(context)
        self.engine.logger.log(
            "Decision",
            decision["reason"],
            {"next_action": decision["next_action"], **build_session_summary(history, scores)},
        )

        return {
            "success": True,
            "evaluation": {
                "score": result["score"],
                "breakdown": result["breakdown"],
                "feedback": result["feedback"],
            },
            "next_question": result["next_question"],
            "done": result["done"],
            "source": result["source"],
            "decision": decision,
            "progress": calculate_progress(scores),
            "debug": result["debug"],
        }

    def transition(self, state: str, event: str, context: Mapping[str, Any]) -> Dict[str, Any]:
        if state not in STATES:
            return failure(f"Unknown interview state '{state}'")
        if event not in EVENTS:
            return failure(f"Unknown interview event '{event}'")

        next_state = transition(state, event, context)
        return {
            "success": True,
            "state": next_state,
            "changed": next_state != state,
            "input_disabled": is_input_disabled(next_state),
            "should_speak": should_speak(next_state),
            "message": get_state_message(next_state),
        }

    def complete_interview(
        self,
        user_email: str,
        started_at: datetime | None,
        ended_at: datetime | None,
        config: Dict[str, Any] | None,
        questions: List[Dict[str, Any]] | None,
        overall_score: float | None = None,
    ) -> Dict[str, Any]:
        if not started_at or not ended_at or not config or questions is None:
            return failure("Invalid payload")
        error = validate_config(config)
        if error:
            return failure(error)

        main_questions: List[SessionQuestion] = [q for q in questions if q.get("kind") == "main"]
        if overall_score is None:
            overall_score = self._score_from_questions(main_questions)

        session: PersistedSession = {
            "id": uuid.uuid4().hex,
            "user_email": user_email,
            "started_at": _utc_iso(started_at),
            "ended_at": _utc_iso(ended_at),
            "config": config,
            "questions": main_questions,
            "overall_score": overall_score,
            "created_at": _utc_iso(datetime.now(timezone.utc)),
        }
        self.storage.save(session)
        self.engine.logger.log("Storage", "Session saved", {"session_id": session["id"], "questions": len(main_questions)})
        return {"success": True, "session_id": session["id"]}

    def get_session(self, user_email: str, session_id: str) -> PersistedSession | None:
        return self.storage.get_for_user(user_email, session_id)

    def list_sessions(self, user_email: str) -> List[PersistedSession]:
        return self.storage.list_by_user(user_email)

    def analytics_overview(self, user_email: str) -> Dict[str, Any]:
        return build_overview(self.storage.list_by_user(user_email))

    @staticmethod
    def _total_questions(config: Mapping[str, Any]) -> int:
        return config.get("question_count") or settings.DEFAULT_TOTAL_QUESTIONS

    @staticmethod
    def _score_from_questions(questions: List[SessionQuestion]) -> float | None:
        scores = [
            to_percent(q["evaluation"]["score"])
            for q in questions
            if q.get("evaluation") and q["evaluation"].get("score") is not None
        ]
        if not scores:
            return None
        return round(sum(scores) / len(scores))

from typing import Any, Dict, List, Protocol, Sequence

from langgraph.graph import END, StateGraph

from interviewace.config.settings import settings
from interviewace.core.ai_client import AIClient
from interviewace.core.models import (
    AIDebug,
    InterviewConfig,
    RespondGraphState,
    RespondResult,
    StartGraphState,
    StartResult,
    Turn,
)
from interviewace.core.prompts import LAST_QUESTION_INDEX, build_respond_prompt, build_start_prompt
from interviewace.core.replies import Invalid, RespondReply, StartReply, parse_reply
from interviewace.evaluation import evaluate_answer
from interviewace.questions import get_greeting, get_next_question
from interviewace.utils.logger import InterviewLogger


class CompletionClient(Protocol):
    async def complete(self, prompt: str) -> str: ...


def _new_debug() -> AIDebug:
    return {"ai_attempted": False, "ai_success": False, "ai_error": None}


class InterviewEngine:
    def __init__(
        self,
        ai_client: CompletionClient | None = None,
        ai_enabled: bool | None = None,
        logger: InterviewLogger | None = None,
    ):
        self.logger = logger or InterviewLogger(settings.LOG_DIR if settings.LOG_TO_FILE else None)
        self.ai_enabled = settings.ai_enabled if ai_enabled is None else ai_enabled
        if self.ai_enabled and ai_client is None:
            ai_client = AIClient(logger=self.logger)
        self.ai_client = ai_client
        self.start_graph = self._build_start_graph()
        self.respond_graph = self._build_respond_graph()

    async def start(self, config: InterviewConfig, user_name: str | None = None) -> StartResult:
        state: StartGraphState = {
            "config": config,
            "user_name": user_name,
            "greeting": "",
            "question": "",
            "source": "fallback",
            "debug": _new_debug(),
        }
        result = await self.start_graph.ainvoke(state)
        return {
            "greeting": result["greeting"],
            "question": result["question"],
            "source": result["source"],
            "debug": result["debug"],
        }

    async def respond(
        self,
        question: str,
        answer: str,
        history: Sequence[Turn],
        config: InterviewConfig,
        question_index: int,
        used_questions: List[str] | None = None,
    ) -> RespondResult:
        state: RespondGraphState = {
            "question": question,
            "answer": answer,
            "history": list(history),
            "config": config,
            "question_index": question_index,
            "used_questions": list(used_questions or []),
            "evaluation": None,
            "feedback": "",
            "next_question": None,
            "done": False,
            "source": "fallback",
            "debug": _new_debug(),
        }
        result = await self.respond_graph.ainvoke(state)
        evaluation = result["evaluation"]
        return {
            "score": evaluation["overall_score"],
            "breakdown": evaluation["breakdown"],
            "feedback": result["feedback"],
            "next_question": None if result["done"] else result["next_question"],
            "done": result["done"],
            "source": result["source"],
            "debug": result["debug"],
        }

    async def start_ai_node(self, state: StartGraphState) -> Dict[str, Any]:
        self.logger.log("AI", "Requesting greeting and first question")
        debug = {**state["debug"], "ai_attempted": True}
        try:
            content = await self.ai_client.complete(build_start_prompt(state["config"], state["user_name"]))
        except Exception as e:
            return self._ai_failed(debug, f"AI call failed: {e}")

        outcome = parse_reply(content, StartReply)
        if isinstance(outcome, Invalid):
            return self._ai_failed(debug, outcome.reason)

        self.logger.log("AI", "Session start generated by AI")
        return {
            "greeting": outcome.parsed.greeting,
            "question": outcome.parsed.question,
            "source": "ai",
            "debug": {**debug, "ai_success": True},
        }

    def start_fallback_node(self, state: StartGraphState) -> Dict[str, Any]:
        config = state["config"]
        self.logger.log("Fallback", "Using question bank greeting", {"role": config["role"], "type": config["type"]})
        self.logger.count("fallbacks")
        first_question = get_next_question({
            "role": config["role"],
            "type": config["type"],
            "difficulty": config["difficulty"],
            "used_questions": [],
        })
        return {
            "greeting": get_greeting(config, state["user_name"])["text"],
            "question": first_question["text"],
            "source": "fallback",
        }

    def evaluate_node(self, state: RespondGraphState) -> Dict[str, Any]:
        config = state["config"]
        evaluation = evaluate_answer(state["question"], state["answer"], {
            "role": config["role"],
            "type": config["type"],
            "difficulty": config["difficulty"],
        })
        self.logger.log("Evaluator", f"Deterministic score {evaluation['overall_score']}/100", evaluation["breakdown"])
        return {"evaluation": evaluation, "feedback": evaluation["feedback"]}

    async def respond_ai_node(self, state: RespondGraphState) -> Dict[str, Any]:
        self.logger.log("AI", "Requesting feedback and next question")
        debug = {**state["debug"], "ai_attempted": True}
        prompt = build_respond_prompt(
            state["question"],
            state["answer"],
            state["history"],
            state["evaluation"],
            state["config"],
            state["question_index"],
        )
        try:
            content = await self.ai_client.complete(prompt)
        except Exception as e:
            return self._ai_failed(debug, f"AI call failed: {e}")

        outcome = parse_reply(content, RespondReply)
        if isinstance(outcome, Invalid):
            return self._ai_failed(debug, outcome.reason)

        reply: RespondReply = outcome.parsed
        self.logger.log("AI", "Conversation flow generated by AI", {"end_interview": reply.end_interview})
        done = reply.end_interview or state["question_index"] >= LAST_QUESTION_INDEX
        next_question = reply.next_question if reply.next_question is not None else reply.follow_up
        if not done and next_question is None:
            next_question = self._bank_question(state)
        return {
            "feedback": reply.feedback,
            "next_question": next_question,
            "done": done,
            "source": "ai",
            "debug": {**debug, "ai_success": True},
        }

    def respond_fallback_node(self, state: RespondGraphState) -> Dict[str, Any]:
        self.logger.count("fallbacks")
        done = state["question_index"] >= LAST_QUESTION_INDEX
        next_question = None if done else self._bank_question(state)
        self.logger.log("Fallback", "Using question bank flow", {"done": done})
        return {
            "feedback": state["evaluation"]["feedback"],
            "next_question": next_question,
            "done": done,
            "source": "fallback",
        }

    def _bank_question(self, state: RespondGraphState) -> str:
        config = state["config"]
        return get_next_question({
            "role": config["role"],
            "type": config["type"],
            "difficulty": config["difficulty"],
            "used_questions": state["used_questions"],
        })["text"]

    def _ai_failed(self, debug: AIDebug, reason: str) -> Dict[str, Any]:
        self.logger.warning("AI", reason)
        self.logger.count("ai_failures")
        return {"source": "fallback", "debug": {**debug, "ai_error": reason}}

    def route_ai(self, state: Dict[str, Any]) -> str:
        return "ai" if self.ai_enabled and self.ai_client is not None else "fallback"

    def route_after_ai(self, state: Dict[str, Any]) -> str:
        return "done" if state["source"] == "ai" else "fallback"

    def _build_start_graph(self):
        workflow = StateGraph(StartGraphState)
        workflow.add_node("ai", self.start_ai_node)
        workflow.add_node("fallback", self.start_fallback_node)
        workflow.set_conditional_entry_point(
            self.route_ai,
            {"ai": "ai", "fallback": "fallback"}
        )
        workflow.add_conditional_edges(
            "ai",
            self.route_after_ai,
            {"done": END, "fallback": "fallback"}
        )
        workflow.add_edge("fallback", END)
        return workflow.compile()

    def _build_respond_graph(self):
        workflow = StateGraph(RespondGraphState)
        workflow.add_node("evaluate", self.evaluate_node)
        workflow.add_node("ai", self.respond_ai_node)
        workflow.add_node("fallback", self.respond_fallback_node)
        workflow.set_entry_point("evaluate")

        workflow.add_conditional_edges(
            "evaluate",
            self.route_ai,
            {"ai": "ai", "fallback": "fallback"}
        )
        workflow.add_conditional_edges(
            "ai",
            self.route_after_ai,
            {"done": END, "fallback": "fallback"}
        )
        workflow.add_edge("fallback", END)
        return workflow.compile()


def validate_config(config: Any) -> str | None:
    if not isinstance(config, dict):
        return "Interview configuration must be an object"
    for key in ("role", "type", "difficulty"):
        value = config.get(key)
        if not isinstance(value, str) or not value.strip():
            return f"Interview configuration requires a non-empty '{key}'"
    return None


def validate_respond_params(
    question: Any,
    answer: Any,
    history: Any,
    config: Any,
    question_index: Any,
) -> str | None:
    if not isinstance(question, str) or not question.strip():
        return "A non-empty question is required"
    if not isinstance(answer, str) or not answer.strip():
        return "A non-empty answer is required"
    if not isinstance(history, list):
        return "Session history must be a list"
    if not isinstance(question_index, int) or isinstance(question_index, bool) or question_index < 0:
        return "question_index must be a non-negative integer"
    return validate_config(config)

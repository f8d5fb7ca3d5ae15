import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from interviewace.api.deps import get_current_user, get_use_case
from interviewace.api.schemas import (
    FailureResponse,
    InterviewCompleteRequest,
    InterviewCompleteResponse,
    InterviewRespondRequest,
    InterviewRespondResponse,
    InterviewStartRequest,
    InterviewStartResponse,
    InterviewTransitionRequest,
    InterviewTransitionResponse
)
from interviewace.core.use_case import InterviewUseCase

logger = logging.getLogger(__name__)
interview_router = APIRouter()

FAILURE_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": FailureResponse}}

START_FALLBACK = {
    "success": True,
    "greeting": "Welcome to InterviewAce. Let's begin your interview.",
    "question": "Tell me about yourself and your experience in software development.",
    "source": "fallback",
    "config": {"role": "general", "type": "behavioral", "difficulty": "medium"},
    "question_plan": [],
}

RESPOND_FALLBACK = {
    "success": True,
    "evaluation": {
        "score": 60,
        "breakdown": {"technical": 6, "clarity": 6, "confidence": 6, "relevance": 6, "structure": 6},
        "feedback": "Thank you for your response. Let's continue with the next question.",
    },
    "next_question": None,
    "done": True,
    "source": "fallback",
}


def _bad_request(result: dict) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result)


@interview_router.post("/start", response_model=InterviewStartResponse, responses=FAILURE_RESPONSES)
async def start_interview(
    request: InterviewStartRequest,
    user: dict = Depends(get_current_user),
    use_case: InterviewUseCase = Depends(get_use_case),
):
    config = request.model_dump(exclude_none=True)
    try:
        result = await use_case.start_interview(config, user["name"])
    except Exception as e:
        logger.error(f"Interview start error: {e}", exc_info=True)
        return {**START_FALLBACK, "session_id": "session_fallback"}

    if not result["success"]:
        return _bad_request(result)
    logger.info(f"Interview started for {user['email']} (source={result['source']})")
    return result


@interview_router.post("/respond", response_model=InterviewRespondResponse, responses=FAILURE_RESPONSES)
async def respond(
    request: InterviewRespondRequest,
    user: dict = Depends(get_current_user),
    use_case: InterviewUseCase = Depends(get_use_case),
):
    try:
        result = await use_case.respond(
            question=request.question,
            answer=request.answer,
            history=[turn.model_dump() for turn in request.session_history],
            config=request.config.model_dump(exclude_none=True),
            question_index=request.question_index,
            used_questions=request.used_questions,
            session_scores=request.session_scores,
        )
    except Exception as e:
        logger.error(f"Interview respond error: {e}", exc_info=True)
        return RESPOND_FALLBACK

    if not result["success"]:
        return _bad_request(result)
    return result


@interview_router.post("/transition", response_model=InterviewTransitionResponse, responses=FAILURE_RESPONSES)
async def transition(
    request: InterviewTransitionRequest,
    use_case: InterviewUseCase = Depends(get_use_case),
):
    result = use_case.transition(
        request.state,
        request.event,
        {"question_index": request.question_index, "total_questions": request.total_questions},
    )
    if not result["success"]:
        return _bad_request(result)
    return result


@interview_router.post("/complete", response_model=InterviewCompleteResponse, responses=FAILURE_RESPONSES)
async def complete_interview(
    request: InterviewCompleteRequest,
    user: dict = Depends(get_current_user),
    use_case: InterviewUseCase = Depends(get_use_case),
):
    result = use_case.complete_interview(
        user_email=user["email"],
        started_at=request.started_at,
        ended_at=request.ended_at,
        config=request.config.model_dump(exclude_none=True) if request.config else None,
        questions=[q.model_dump() for q in request.questions] if request.questions is not None else None,
        overall_score=request.overall_score,
    )
    if not result["success"]:
        return _bad_request(result)
    logger.info(f"Session {result['session_id']} saved for {user['email']}")
    return result

import logging
from typing import List

from fastapi import APIRouter, Depends

from interviewace.api.deps import get_current_user, get_use_case
from interviewace.api.schemas import PersistedSessionResponse
from interviewace.core.use_case import InterviewUseCase
from interviewace.system.exceptions import NotFoundException

logger = logging.getLogger(__name__)
sessions_router = APIRouter()


@sessions_router.get("", response_model=List[PersistedSessionResponse])
async def list_sessions(
    user: dict = Depends(get_current_user),
    use_case: InterviewUseCase = Depends(get_use_case),
):
    return use_case.list_sessions(user["email"])


@sessions_router.get("/{session_id}", response_model=PersistedSessionResponse)
async def get_session(
    session_id: str,
    user: dict = Depends(get_current_user),
    use_case: InterviewUseCase = Depends(get_use_case),
):
    session = use_case.get_session(user["email"], session_id)
    if session is None:
        logger.warning(f"Session {session_id} not found for {user['email']}")
        raise NotFoundException("Session not found")
    return session

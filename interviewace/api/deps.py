from fastapi import Header

from interviewace.core.engine import InterviewEngine
from interviewace.core.use_case import InterviewUseCase
from interviewace.storages.session_storage import SessionStorage
from interviewace.system.exceptions import BadRequestException, UnauthorizedException

_engine: InterviewEngine | None = None
_storage: SessionStorage | None = None
_use_case: InterviewUseCase | None = None


def get_engine() -> InterviewEngine:
    global _engine
    if _engine is None:
        _engine = InterviewEngine()
    return _engine


def get_storage() -> SessionStorage:
    global _storage
    if _storage is None:
        _storage = SessionStorage()
    return _storage


def get_use_case() -> InterviewUseCase:
    global _use_case
    if _use_case is None:
        _use_case = InterviewUseCase(get_engine(), get_storage())
    return _use_case


def get_current_user(
    x_user_email: str | None = Header(default=None),
    x_user_name: str | None = Header(default=None),
) -> dict:
    if not x_user_email:
        raise UnauthorizedException("Authentication required")
    if "@" not in x_user_email:
        raise BadRequestException("Invalid user email")
    return {"email": x_user_email, "name": x_user_name or x_user_email.split("@")[0]}

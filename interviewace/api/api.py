from fastapi import APIRouter

from interviewace.api.endpoints.analytics import analytics_router
from interviewace.api.endpoints.interview import interview_router
from interviewace.api.endpoints.sessions import sessions_router

api_router = APIRouter()

api_router.include_router(interview_router, prefix="/interview", tags=["interview"])
api_router.include_router(sessions_router, prefix="/sessions", tags=["sessions"])
api_router.include_router(analytics_router, prefix="/analytics", tags=["analytics"])

from fastapi import APIRouter, Depends

from interviewace.api.deps import get_current_user, get_use_case
from interviewace.api.schemas import AnalyticsOverviewResponse
from interviewace.core.use_case import InterviewUseCase

analytics_router = APIRouter()


@analytics_router.get("/overview", response_model=AnalyticsOverviewResponse)
async def analytics_overview(
    user: dict = Depends(get_current_user),
    use_case: InterviewUseCase = Depends(get_use_case),
):
    return use_case.analytics_overview(user["email"])

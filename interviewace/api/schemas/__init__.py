from interviewace.api.schemas.interview import (
    AnalyticsOverviewResponse,
    FailureResponse,
    InterviewCompleteRequest,
    InterviewCompleteResponse,
    InterviewRespondRequest,
    InterviewRespondResponse,
    InterviewStartRequest,
    InterviewStartResponse,
    InterviewTransitionRequest,
    InterviewTransitionResponse,
    PersistedSessionResponse
)

__all__ = [
    "AnalyticsOverviewResponse",
    "FailureResponse",
    "InterviewCompleteRequest",
    "InterviewCompleteResponse",
    "InterviewRespondRequest",
    "InterviewRespondResponse",
    "InterviewStartRequest",
    "InterviewStartResponse",
    "InterviewTransitionRequest",
    "InterviewTransitionResponse",
    "PersistedSessionResponse"
]

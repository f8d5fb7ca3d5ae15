from datetime import datetime
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field


class InterviewConfigSchema(BaseModel):
    role: str
    type: str
    difficulty: str
    focus_area: str | None = None
    company: str | None = None
    question_count: int | None = Field(default=None, ge=1)
    questions: List[str] | None = None


class InterviewStartRequest(InterviewConfigSchema):
    pass


class TurnSchema(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class InterviewRespondRequest(BaseModel):
    question: str
    answer: str
    session_history: List[TurnSchema] = []
    config: InterviewConfigSchema
    question_index: int
    used_questions: List[str] = []
    session_scores: List[float] = []


class InterviewTransitionRequest(BaseModel):
    state: str
    event: str
    question_index: int = 0
    total_questions: int = 6


class AIDebugSchema(BaseModel):
    ai_attempted: bool
    ai_success: bool
    ai_error: str | None = None


class InterviewStartResponse(BaseModel):
    success: bool = True
    session_id: str
    state_context: Dict[str, Any] | None = None
    greeting: str
    question: str
    source: Literal["ai", "fallback"]
    config: InterviewConfigSchema
    question_plan: List[str] = []
    debug: AIDebugSchema | None = None


class ScoreBreakdownSchema(BaseModel):
    technical: int
    clarity: int
    confidence: int
    relevance: int
    structure: int


class EvaluationSchema(BaseModel):
    score: int
    breakdown: ScoreBreakdownSchema
    feedback: str


class DecisionSchema(BaseModel):
    should_continue: bool
    should_end: bool
    next_action: Literal["next_question", "follow_up", "end_interview"]
    reason: str
    confidence: float


class ProgressSchema(BaseModel):
    average: float
    trend: Literal["improving", "declining", "stable"]
    consistency: float


class InterviewRespondResponse(BaseModel):
    success: bool = True
    evaluation: EvaluationSchema
    next_question: str | None = None
    done: bool
    source: Literal["ai", "fallback"]
    decision: DecisionSchema | None = None
    progress: ProgressSchema | None = None
    debug: AIDebugSchema | None = None


class InterviewTransitionResponse(BaseModel):
    success: bool = True
    state: str
    changed: bool
    input_disabled: bool
    should_speak: bool
    message: str


class StoredEvaluationSchema(BaseModel):
    score: float | None = None
    confidence: float | None = None
    clarity: float | None = None
    technical_depth: float | None = None
    strengths: List[str] = []
    improvements: List[str] = []


class SessionQuestionSchema(BaseModel):
    text: str
    answer: str = ""
    kind: str | None = None
    evaluation: StoredEvaluationSchema | None = None


class InterviewCompleteRequest(BaseModel):
    started_at: datetime | None = None
    ended_at: datetime | None = None
    config: InterviewConfigSchema | None = None
    questions: List[SessionQuestionSchema] | None = None
    overall_score: float | None = None


class InterviewCompleteResponse(BaseModel):
    success: bool = True
    session_id: str


class FailureResponse(BaseModel):
    success: bool = False
    error: str


class PersistedSessionResponse(BaseModel):
    id: str
    user_email: str
    started_at: str
    ended_at: str | None = None
    config: InterviewConfigSchema
    questions: List[SessionQuestionSchema] = []
    overall_score: float | None = None
    created_at: str


class AnalyticsOverviewResponse(BaseModel):
    total_sessions: int
    average_score: int
    avg_duration: int
    skill_breakdown: Dict[str, int]
    score_trend: List[Dict[str, Any]]

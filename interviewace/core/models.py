from typing import List, Literal, NotRequired, TypedDict

InterviewState = Literal["idle", "speaking", "listening", "evaluating", "finished"]

InterviewEvent = Literal[
    "session_started",
    "tts_finished",
    "answer_submitted",
    "evaluation_complete",
    "interview_ended",
]

Source = Literal["ai", "fallback"]

NextAction = Literal["next_question", "follow_up", "end_interview"]

Trend = Literal["improving", "declining", "stable"]


class InterviewConfig(TypedDict):
    role: str
    type: str
    difficulty: str
    focus_area: NotRequired[str | None]
    company: NotRequired[str | None]
    question_count: NotRequired[int | None]
    questions: NotRequired[List[str] | None]


class Turn(TypedDict):
    role: Literal["user", "assistant"]
    content: str


class ScoreBreakdown(TypedDict):
    technical: int
    clarity: int
    confidence: int
    relevance: int
    structure: int


class EvaluationMetadata(TypedDict):
    word_count: int
    evaluation_method: str
    version: str


class Evaluation(TypedDict):
    overall_score: int
    breakdown: ScoreBreakdown
    strengths: List[str]
    improvements: List[str]
    feedback: str
    metadata: EvaluationMetadata


class StateContext(TypedDict):
    question_index: int
    total_questions: int
    current_question: NotRequired[str | None]
    last_answer: NotRequired[str | None]
    session_id: NotRequired[str | None]


class LastResponse(TypedDict):
    source: Source
    success: bool


class DecisionContext(TypedDict):
    question_index: int
    total_questions: int
    current_score: float
    session_scores: List[float]
    average_score: float
    last_response: LastResponse
    config: InterviewConfig


class DecisionResult(TypedDict):
    should_continue: bool
    should_end: bool
    next_action: NextAction
    reason: str
    confidence: float


class Progress(TypedDict):
    average: float
    trend: Trend
    consistency: float


class AIDebug(TypedDict):
    ai_attempted: bool
    ai_success: bool
    ai_error: str | None


class StartResult(TypedDict):
    greeting: str
    question: str
    source: Source
    debug: AIDebug


class RespondResult(TypedDict):
    score: int
    breakdown: ScoreBreakdown
    feedback: str
    next_question: str | None
    done: bool
    source: Source
    debug: AIDebug


class InterviewFailure(TypedDict):
    success: Literal[False]
    error: str


class StoredEvaluation(TypedDict, total=False):
    score: float
    confidence: float
    clarity: float
    technical_depth: float
    strengths: List[str]
    improvements: List[str]


class SessionQuestion(TypedDict):
    text: str
    answer: str
    kind: str
    evaluation: NotRequired[StoredEvaluation | None]


class PersistedSession(TypedDict):
    id: str
    user_email: str
    started_at: str
    ended_at: str | None
    config: InterviewConfig
    questions: List[SessionQuestion]
    overall_score: float | None
    created_at: str


class RespondGraphState(TypedDict):
    question: str
    answer: str
    history: List[Turn]
    config: InterviewConfig
    question_index: int
    used_questions: List[str]
    evaluation: Evaluation | None
    feedback: str
    next_question: str | None
    done: bool
    source: Source
    debug: AIDebug


class StartGraphState(TypedDict):
    config: InterviewConfig
    user_name: str | None
    greeting: str
    question: str
    source: Source
    debug: AIDebug

import json
import re
from dataclasses import dataclass
from typing import Generic, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

ReplyT = TypeVar("ReplyT", bound=BaseModel)

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


class StartReply(BaseModel):
    model_config = ConfigDict(extra="ignore")

    greeting: StrictStr = Field(min_length=11)
    question: StrictStr = Field(min_length=11)


class RespondReply(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    feedback: StrictStr = Field(min_length=11)
    next_question: StrictStr | None = Field(alias="nextQuestion")
    end_interview: StrictBool = Field(alias="endInterview")
    follow_up: StrictStr | None = Field(default=None, alias="followUp")


@dataclass(frozen=True)
class Valid(Generic[ReplyT]):
    parsed: ReplyT


@dataclass(frozen=True)
class Invalid:
    reason: str


def extract_json(content: str) -> str | None:
    text = content.strip()
    if text.startswith("{") and text.endswith("}"):
        return text

    fenced = _FENCE_RE.search(content)
    if fenced and fenced.group(1).strip().startswith("{"):
        return fenced.group(1).strip()

    start = content.find("{")
    end = content.rfind("}")
    if start == -1 or end <= start:
        return None
    return content[start:end + 1]


def parse_reply(content: str | None, schema: Type[ReplyT]) -> Valid[ReplyT] | Invalid:
    if not content or not content.strip():
        return Invalid("Empty AI response")

    json_str = extract_json(content)
    if json_str is None:
        return Invalid("No JSON object found in AI response")

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        return Invalid(f"Malformed JSON in AI response: {e}")

    if not isinstance(data, dict):
        return Invalid("AI response JSON is not an object")

    try:
        return Valid(schema.model_validate(data))
    except ValidationError as e:
        return Invalid(f"Invalid AI response format: {e.error_count()} field error(s)")

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from interviewace.core.engine import InterviewEngine  # noqa: E402
from interviewace.utils.logger import InterviewLogger  # noqa: E402


class FakeAIClient:
    """Returns canned replies in order and records every prompt it was given."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def frontend_config() -> dict:
    return {"role": "frontend", "type": "technical", "difficulty": "easy"}


@pytest.fixture
def behavioral_config() -> dict:
    return {"role": "general", "type": "behavioral", "difficulty": "medium"}


@pytest.fixture
def strong_answer() -> str:
    return (
        "First, I implemented a React component library with TypeScript. "
        "Then I optimized performance because the bundle was too large, using code splitting and lazy loading. "
        "As a result, the page load time dropped by forty percent and the team successfully delivered the release."
    )


@pytest.fixture
def fallback_engine() -> InterviewEngine:
    return InterviewEngine(ai_enabled=False, logger=InterviewLogger())


@pytest.fixture
def make_ai_engine():
    def _make(*replies):
        client = FakeAIClient(*replies)
        return InterviewEngine(ai_client=client, ai_enabled=True, logger=InterviewLogger()), client
    return _make

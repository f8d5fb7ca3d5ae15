import time

from mistralai import Mistral

from interviewace.config.settings import settings
from interviewace.utils.logger import InterviewLogger


class AIClientError(Exception):
    pass


class AIClient:
    # OpenRouter serves the same chat completions protocol as Mistral
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        server_url: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        timeout_ms: int | None = None,
        logger: InterviewLogger | None = None,
    ):
        self.model = model or settings.OPENROUTER_MODEL
        self.temperature = settings.AI_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or settings.AI_MAX_TOKENS
        self.logger = logger or InterviewLogger()
        self.client = Mistral(
            api_key=api_key or settings.OPENROUTER_API_KEY or "",
            server_url=server_url or settings.OPENROUTER_BASE_URL,
            timeout_ms=timeout_ms or settings.AI_TIMEOUT_MS,
        )

    async def complete(self, prompt: str) -> str:
        start_time = time.time()
        self.logger.count("ai_calls")

        response = await self.client.chat.complete_async(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            stream=False,
        )
        latency = (time.time() - start_time) * 1000
        self.logger.log_latency(latency)

        if response is None or not response.choices:
            raise AIClientError("No response choices returned")

        usage = response.usage
        if usage is not None:
            self.logger.log_tokens(usage.prompt_tokens or 0, usage.completion_tokens or 0)

        content = response.choices[0].message.content
        if not content:
            raise AIClientError("Empty response content")
        if not isinstance(content, str):
            # content chunks
            content = "".join(getattr(chunk, "text", "") for chunk in content)
        return content

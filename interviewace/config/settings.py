from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "InterviewAce"
    APP_ADDRESS: str = "0.0.0.0"
    APP_PORT: int = 8000

    OPENROUTER_API_KEY: str | None = None
    OPENROUTER_MODEL: str = "meta-llama/llama-3.2-3b-instruct:free"
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api"
    AI_TEMPERATURE: float = 0.4
    AI_MAX_TOKENS: int = 1000
    AI_TIMEOUT_MS: int = 15000

    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False
    DEFAULT_TOTAL_QUESTIONS: int = 6

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def ai_enabled(self) -> bool:
        return bool(self.OPENROUTER_API_KEY)


settings = Settings()

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SYSTEM_PROMPT = (
    "You are the shopping assistant of a retail ordering portal. "
    "Answer briefly and politely. Catalog, cart and order details are added "
    "to your reply by the portal, so never invent products, prices or order data."
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (and an optional .env file).
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Portal Assistant API"
    PROJECT_DESCRIPTION: str = "Conversational assistant for the retail ordering portal"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="Log format: colored, json or plain")
    MAX_MESSAGE_CHARS: int = Field(2000, description="Reject chat messages longer than this")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    # Upstream free-text responder (Ollama)
    CHAT_LLM_ENABLED: bool = Field(False, description="Ask the LLM for a free-text reply before running actions")
    CHAT_SYSTEM_PROMPT: str = Field(DEFAULT_SYSTEM_PROMPT, description="System prompt sent with every chat call")
    OLLAMA_API_URL: str = Field("http://localhost:11434", description="Ollama service URL")
    OLLAMA_API_MODEL: str = Field("llama3.2:latest", description="Model used for free-text replies")
    OLLAMA_TEMPERATURE: float = Field(0.3, description="Sampling temperature for chat replies")
    OLLAMA_REQUEST_TIMEOUT: int = Field(60, description="LLM request timeout in seconds")

    # Assistant behaviour
    SEARCH_RESULT_LIMIT: int = Field(5, description="Products listed per search reply")
    ORDER_HISTORY_DEFAULT_LIMIT: int = Field(5, description="Orders listed when no count is given")
    ORDER_HISTORY_MAX_LIMIT: int = Field(20, description="Upper bound for listed orders")
    REORDER_MAX_FAILED_DISPLAY: int = Field(3, description="Failed product names shown after a reorder")
    SUGGESTION_CANDIDATE_LIMIT: int = Field(5, description="Same-category products fetched for suggestions")
    SUGGESTION_DISPLAY_LIMIT: int = Field(3, description="Suggestions shown to the customer")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("colored", "json", "plain"):
            raise ValueError("LOG_FORMAT must be one of: colored, json, plain")
        return v

    @field_validator(
        "SEARCH_RESULT_LIMIT",
        "ORDER_HISTORY_DEFAULT_LIMIT",
        "ORDER_HISTORY_MAX_LIMIT",
        "SUGGESTION_CANDIDATE_LIMIT",
        "SUGGESTION_DISPLAY_LIMIT",
    )
    @classmethod
    def validate_positive_limit(cls, v):
        if v < 1:
            raise ValueError("Limits must be at least 1")
        return v

    @field_validator("ORDER_HISTORY_MAX_LIMIT")
    @classmethod
    def validate_history_cap(cls, v):
        if v > 100:
            raise ValueError("ORDER_HISTORY_MAX_LIMIT should not exceed 100")
        return v

    @computed_field
    @property
    def is_development(self) -> bool:
        """Whether the app runs in a development environment"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]

    def assistant_config(self) -> dict:
        """Handler tuning values consumed by ChatProcessor."""
        return {
            "search_result_limit": self.SEARCH_RESULT_LIMIT,
            "order_history_default_limit": self.ORDER_HISTORY_DEFAULT_LIMIT,
            "order_history_max_limit": self.ORDER_HISTORY_MAX_LIMIT,
            "reorder_max_failed_display": self.REORDER_MAX_FAILED_DISPLAY,
            "suggestion_candidate_limit": self.SUGGESTION_CANDIDATE_LIMIT,
            "suggestion_display_limit": self.SUGGESTION_DISPLAY_LIMIT,
            "system_prompt": self.CHAT_SYSTEM_PROMPT,
        }


# Singleton settings instance
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached Settings instance so the environment is read only once.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance

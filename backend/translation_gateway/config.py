"""Application configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Translation Gateway"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # CORS - open to every origin
    cors_origins: list[str] = ["*"]

    # LLM API Keys
    gemini_api_key: Optional[str] = None
    claude_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    deepseek_api_key: Optional[str] = None

    # Models
    gemini_model: str = "gemini-1.5-flash"
    claude_model: str = "claude-3-sonnet-20240229"
    claude_max_tokens: int = 1000
    openai_model: str = "gpt-4-turbo-preview"
    deepseek_model: str = "deepseek-chat"  # or "deepseek-reasoner"
    deepseek_base_url: str = "https://api.deepseek.com"

    # Per-call timeout in seconds (None waits for the vendor indefinitely)
    request_timeout: Optional[float] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def get_api_key(self, provider: str) -> Optional[str]:
        """Get API key for a provider."""
        key_map = {
            "gemini": self.gemini_api_key,
            "claude": self.claude_api_key,
            "openai": self.openai_api_key,
            "deepseek": self.deepseek_api_key,
        }
        return key_map.get(provider)

    def get_model(self, provider: str) -> str:
        """Get configured model id for a provider."""
        model_map = {
            "gemini": self.gemini_model,
            "claude": self.claude_model,
            "openai": self.openai_model,
            "deepseek": self.deepseek_model,
        }
        if provider not in model_map:
            raise ValueError(f"Unknown provider: {provider}")
        return model_map[provider]


settings = Settings()

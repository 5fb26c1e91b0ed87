from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000
    cors_allow_origins: list[str] = ["*"]

    analysis_provider: str = "gemini"
    analysis_temperature: float = 0.2

    google_generative_ai_api_key: str = ""
    gemini_model_name: str = "gemini-2.0-flash"
    gemini_timeout_seconds: int = 60

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60

    client_base_url: str = "http://localhost:8000"
    client_timeout_seconds: int = 120

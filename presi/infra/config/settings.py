"""
Application configuration settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"], case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field("Presi Content API", alias="APP_NAME")
    version: str = Field("1.0.0", alias="APP_VERSION")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(True, alias="CORS_ALLOW_CREDENTIALS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    # Parsing
    max_input_chars: int = Field(200_000, alias="MAX_INPUT_CHARS")
    parse_log_excerpt_chars: int = Field(500, alias="PARSE_LOG_EXCERPT_CHARS")

    # Projection
    reading_words_per_minute: int = Field(200, alias="READING_WORDS_PER_MINUTE")
    speech_words_per_minute: int = Field(150, alias="SPEECH_WORDS_PER_MINUTE")
    min_clip_seconds: int = Field(2, alias="MIN_CLIP_SECONDS")
    html_lang: str = Field("he", alias="HTML_LANG")
    html_dir: str = Field("rtl", alias="HTML_DIR")

    # Generation (OpenRouter-compatible model ids)
    default_model: str = Field("qwen/qwen-2.5-72b-instruct", alias="DEFAULT_MODEL")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    return Settings()

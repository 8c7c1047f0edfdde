"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "internship_user"
    postgres_password: str = "password"
    postgres_db: str = "internship_db"
    database_url: Optional[str] = None  # overrides the postgres_* parts when set

    # Connection pool
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_connect_timeout: float = 30.0
    db_command_timeout: float = 30.0

    # Azure Blob Storage (resume uploads)
    azure_storage_connection_string: Optional[str] = None
    resume_container: str = "resumes"
    sas_expiry_seconds: int = 3600

    # Azure AI Language (skill analysis)
    azure_language_endpoint: Optional[str] = None
    azure_language_key: Optional[str] = None

    # OpenAI-compatible LLM (recommendations)
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    openai_model: str = "gpt-35-turbo"

    # App
    debug: bool = False
    log_level: str = "INFO"

    @property
    def postgres_url(self) -> str:
        """Construct async PostgreSQL connection URL"""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Defaults for API-backed tool definitions
    api_base_url: str = Field(default="", alias="API_BASE_URL")
    default_api_timeout_seconds: int = Field(
        default=20, alias="DEFAULT_API_TIMEOUT_SECONDS"
    )

    # JSON file used as the build context when the CLI gets no --context
    tool_context_file: str = Field(default="", alias="TOOL_CONTEXT_FILE")


@lru_cache
def get_settings() -> Settings:
    return Settings()

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_INT32 = 2**31 - 1


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SUTIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    debug: bool = Field(default=False, description="SUTIL_DEBUG")

    # Pagination: upper bound for a page size, never above int32
    max_limit: int = Field(default=MAX_INT32, ge=1, le=MAX_INT32, description="SUTIL_MAX_LIMIT")


@lru_cache
def get_settings() -> Settings:
    return Settings()

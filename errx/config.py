"""Library configuration."""
from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """errx settings."""

    # Chain walking
    # Links visited before a walk gives up; guards against hand-built cycles
    # that slip past identity tracking (e.g. proxies re-created on unwrap).
    ERRX_MAX_CHAIN_DEPTH: int = Field(100, ge=1)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

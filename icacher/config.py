from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Library defaults, overridable through ICACHER_* environment variables"""

    # TTL Cache Settings
    default_ttl_seconds: float = 300.0

    # Keyed Cache Settings
    keyed_max_size: Optional[int] = None  # None = unbounded

    model_config = SettingsConfigDict(
        env_prefix="ICACHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Core
    ENVIRONMENT: str = Field(default="production")
    LOG_LEVEL: str = Field(default="INFO")
    FIRESTORE_PROJECT_ID: str = Field(default="")

    # MSM gateway credentials (issued by MSM)
    MSM_USERNAME: str = Field(default="")
    MSM_PASSWORD: str = Field(default="")
    MSM_SENDER: str = Field(default="")

    # Persist every send attempt to the msm_logs collection
    MSM_LOGGING: bool = Field(default=False)
    MSM_HTTP_TIMEOUT: float = Field(default=20.0)


settings = Settings()

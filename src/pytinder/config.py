"""pytinder settings loaded from the environment."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """pytinder settings, read from TINDER_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="TINDER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Facebook credentials used to authorize from the command line
    facebook_token: Optional[str] = Field(default=None)
    facebook_id: Optional[str] = Field(default=None)

    timeout: float = Field(default=30.0, gt=0)
    log_level: str = Field(default="WARNING")

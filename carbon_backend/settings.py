import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    estimator_provider: Literal["climatiq", "gemini", "offline"] = Field(
        default="climatiq", alias="ESTIMATOR_PROVIDER"
    )
    climatiq_api_key: str | None = Field(default=None, alias="CLIMATIQ_API_KEY")
    climatiq_base_url: str = Field(
        default="https://api.climatiq.io", alias="CLIMATIQ_BASE_URL"
    )
    gemini_api_key: str | None = Field(default=None, alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")
    remote_timeout_seconds: float = Field(default=10.0, gt=0, alias="REMOTE_TIMEOUT_SECONDS")
    offsets_base_url: str = Field(
        default="https://api.goldstandard.org", alias="OFFSETS_BASE_URL"
    )
    offsets_limit: int = Field(default=10, gt=0, alias="OFFSETS_LIMIT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @classmethod
    def from_env(cls):
        data = {
            "ESTIMATOR_PROVIDER": os.getenv("ESTIMATOR_PROVIDER", "climatiq").lower(),
            "CLIMATIQ_API_KEY": os.getenv("CLIMATIQ_API_KEY") or None,
            "CLIMATIQ_BASE_URL": os.getenv("CLIMATIQ_BASE_URL", "https://api.climatiq.io"),
            "GEMINI_API_KEY": os.getenv("GEMINI_API_KEY") or None,
            "GEMINI_MODEL": os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            "REMOTE_TIMEOUT_SECONDS": os.getenv("REMOTE_TIMEOUT_SECONDS", "10"),
            "OFFSETS_BASE_URL": os.getenv("OFFSETS_BASE_URL", "https://api.goldstandard.org"),
            "OFFSETS_LIMIT": os.getenv("OFFSETS_LIMIT", "10"),
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
        }
        return cls.model_validate(data)


settings = Settings.from_env()

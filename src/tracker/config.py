import os
from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    # Logging
    log_level: str = os.environ.get("LOG_LEVEL", "INFO")

    # Prometheus
    metrics_enabled: bool = True
    metrics_port: int = int(os.environ.get("METRICS_PORT", 8001))

    # HTTP service
    host: str = "0.0.0.0"
    port: int = int(os.environ.get("PORT", 8000))

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

settings = Settings()

import os
from functools import lru_cache

from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    log_level: str = Field(default="INFO", description="Root log level for the service")
    max_upload_mb: float = Field(default=10.0, gt=0, description="Largest accepted resume upload, in megabytes")

    @property
    def max_upload_bytes(self) -> int:
        return int(self.max_upload_mb * 1024 * 1024)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Read configuration from the environment once per process."""
    return AppConfig(
        log_level=os.getenv("CV_IMPORTER_LOG_LEVEL", "INFO").strip().upper(),
        max_upload_mb=os.getenv("CV_IMPORTER_MAX_UPLOAD_MB", "10"),
    )

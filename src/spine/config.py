import os
from typing import Literal

from pydantic import BaseModel, ValidationError

from spine.core.errors import ConfigurationError

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseModel):
    log_level: LogLevel = "WARNING"
    archive_encoding: str = "utf-8"


def load_settings() -> Settings:
    """Read settings from ``SPINE_*`` environment variables.

    Raises ``ConfigurationError`` when a variable holds an unsupported value.
    """
    try:
        return Settings(
            log_level=os.getenv("SPINE_LOG_LEVEL", "WARNING").upper(),  # type: ignore[arg-type]
            archive_encoding=os.getenv("SPINE_ARCHIVE_ENCODING", "utf-8"),
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid spine configuration: {exc.errors()[0]['msg']}") from exc

import os
from typing import Literal
from pydantic import BaseModel, Field

__all__ = ["Settings", "settings"]

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    cores: int = Field(
        1, ge=1, description="Default number of workers used by map dispatchers."
    )
    backend: Literal["thread", "process"] = Field(
        "thread", description="Executor type used when more than one core is requested."
    )
    progress: bool = Field(
        False, description="Show a progress bar for dispatched iterations by default."
    )
    log_level: str = Field("INFO", description="Level of the 'foldwise' logger.")

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``FOLDWISE_*`` environment variables."""
        values = {}

        cores = os.getenv("FOLDWISE_CORES")
        if cores:
            values["cores"] = int(cores)

        backend = os.getenv("FOLDWISE_BACKEND")
        if backend:
            values["backend"] = backend.lower()

        progress = os.getenv("FOLDWISE_PROGRESS")
        if progress:
            values["progress"] = progress.lower() in _TRUTHY

        log_level = os.getenv("FOLDWISE_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.upper()

        return cls(**values)


settings = Settings.load()

"""Runtime settings read from the environment (.env is loaded by the entry point)."""

import os
from dataclasses import dataclass

_TRUE = ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    default_region: str | None = None
    log_level: str = "INFO"
    sample_data: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        region = os.environ.get("CONNECTIFY_DEFAULT_REGION", "").strip().upper()
        level = os.environ.get("CONNECTIFY_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        sample = os.environ.get("CONNECTIFY_SAMPLE_DATA", "").strip().lower() in _TRUE
        return cls(default_region=region or None, log_level=level, sample_data=sample)

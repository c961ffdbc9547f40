# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — storage layout is fixed, diagnostics are env-driven.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings; only LOG_LEVEL is read from the environment."""

    SERVICE_NAME: str = "scheduler"
    SERVICE_VERSION: str = "1.0.0"

    STORAGE_FILE: str = "schedules.json"
    STORAGE_ENCODING: str = "utf-8"
    JSON_INDENT: int = 1

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()


settings = Settings()

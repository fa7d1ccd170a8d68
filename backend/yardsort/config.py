# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Application Configuration
All settings are loaded from environment variables with defaults sized
for interactive use. Override via .env or environment.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Search Limits ───────────────────────────────────────────────────────
    # Recursion depth is N + 1, keep well below sys.getrecursionlimit()
    max_cars: int = Field(500, ge=1)
    # Applied by Sequencer.from_settings (API and sort service). A search
    # cannot be cancelled from its threadpool thread, so it stops itself.
    # None runs until the tree is exhausted; Sequencer() has no deadline.
    search_deadline_seconds: Optional[float] = Field(5.0, gt=0)

    # ─── Logging ─────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ─── Server ──────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000

    # ─── Derived helpers ─────────────────────────────────────────────────────
    @property
    def has_deadline(self) -> bool:
        return self.search_deadline_seconds is not None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached singleton Settings instance."""
    return Settings()

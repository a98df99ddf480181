"""
Connection settings for the remote search service.

Values come from the process environment (populate it from `.env` with
`load_dotenv()` before calling `SearchServiceConfig.from_env`).

  - SEARCH_API_BASE_URL (default http://localhost:8000)
  - SEARCH_API_TIMEOUT (optional, seconds; unset means no client-side timeout)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "http://localhost:8000"


@dataclass(frozen=True, slots=True)
class SearchServiceConfig:
    """Fixed connection details for the search / PDF service."""

    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "SearchServiceConfig":
        base_url = os.getenv("SEARCH_API_BASE_URL") or DEFAULT_BASE_URL
        raw_timeout = os.getenv("SEARCH_API_TIMEOUT")
        timeout: Optional[float] = None
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise EnvironmentError(f"SEARCH_API_TIMEOUT must be a number of seconds, got '{raw_timeout}'.") from exc
            if timeout <= 0:
                raise EnvironmentError("SEARCH_API_TIMEOUT must be greater than zero.")
        return cls(base_url=base_url, timeout=timeout)

"""
State models for a single search session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from domain.locales import DEFAULT_COUNTRY, DEFAULT_UI_LANGUAGE
from domain.results import SearchResult

MAX_RECENT_SEARCHES = 5
RECENT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """The query text and filters captured when a request is submitted."""

    text: str
    country: str = DEFAULT_COUNTRY
    ui_language: str = DEFAULT_UI_LANGUAGE


@dataclass(frozen=True, slots=True)
class RecentSearch:
    """A previously completed search and the time it completed."""

    query: str
    time: datetime

    def display_time(self) -> str:
        return self.time.strftime(RECENT_TIME_FORMAT)


@dataclass(slots=True)
class SessionState:
    """Everything a search session keeps in memory between user actions."""

    query: str = ""
    country: str = DEFAULT_COUNTRY
    ui_language: str = DEFAULT_UI_LANGUAGE
    results: List[SearchResult] = field(default_factory=list)
    loading: bool = False
    error_message: Optional[str] = None
    expanded_index: Optional[int] = None
    recent_searches: List[RecentSearch] = field(default_factory=list)


def push_recent_search(history: List[RecentSearch], entry: RecentSearch) -> List[RecentSearch]:
    """Return a new history with ``entry`` first, keeping at most five entries.

    Repeated queries are kept as separate entries.
    """

    return [entry, *history][:MAX_RECENT_SEARCHES]

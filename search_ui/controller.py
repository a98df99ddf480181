"""
Interaction controller for the search front-ends.

`SearchController` owns the session state and is the only thing that mutates
it. Every user action maps to one method; the UI re-renders from the
read-only properties afterwards.

Searches are tagged with a ticket when they start. When several searches
overlap, only the outcome of the most recently *submitted* one is applied;
outcomes of older tickets are discarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, List, Optional

from domain.locales import validate_country, validate_ui_language
from domain.results import SearchResponse, SearchResult, combine_summaries
from search_state_manager import (
    RecentSearch,
    SearchQuery,
    SessionState,
    push_recent_search,
)

from .api_client import SearchServiceClient, SearchServiceError
from .export import ExportFile, ExportResult, export_file_name
from .presets import QUICK_TAGS, export_error_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchTicket:
    """Identifies one submitted search."""

    sequence: int
    query: SearchQuery


class SearchController:
    """Session state plus the transitions the search UI is allowed to make."""

    def __init__(
        self,
        client: SearchServiceClient,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._client = client
        self._clock = clock
        self._state = SessionState()
        self._sequence = 0

    # ------------------------------------------------------------------
    # Input transitions
    # ------------------------------------------------------------------
    def set_query(self, text: str) -> None:
        self._state.query = text

    def set_country(self, code: str) -> None:
        self._state.country = validate_country(code)

    def set_ui_language(self, tag: str) -> None:
        self._state.ui_language = validate_ui_language(tag)

    def select_quick_tag(self, tag: str) -> None:
        if tag not in QUICK_TAGS:
            raise ValueError(f"Unknown quick tag '{tag}'.")
        self._state.query = tag

    def toggle_expand(self, index: int) -> None:
        self._state.expanded_index = None if self._state.expanded_index == index else index

    def reset(self) -> None:
        """Drop all session state; any search still in flight becomes stale."""
        self._sequence += 1
        self._state = SessionState()
        logger.info("Search session reset.")

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def submit_search(
        self,
        query: Optional[str] = None,
        country: Optional[str] = None,
        ui_language: Optional[str] = None,
    ) -> bool:
        """Run one search to completion. Returns False when the query is empty."""
        ticket = self.begin_search(query, country, ui_language)
        if ticket is None:
            return False
        try:
            response = self._client.fetch_search_results(ticket.query)
        except SearchServiceError as exc:
            self.fail_search(ticket, exc)
        else:
            self.complete_search(ticket, response)
        finally:
            self._settle(ticket)
        return True

    def begin_search(
        self,
        query: Optional[str] = None,
        country: Optional[str] = None,
        ui_language: Optional[str] = None,
    ) -> Optional[SearchTicket]:
        captured = self._capture(query, country, ui_language)
        if captured is None:
            return None

        self._sequence += 1
        ticket = SearchTicket(sequence=self._sequence, query=captured)
        self._state.loading = True
        self._state.error_message = None
        self._state.results = []
        self._state.expanded_index = None
        logger.info(
            "Submitting search #%d: %r (country=%s, ui_lang=%s)",
            ticket.sequence,
            captured.text,
            captured.country,
            captured.ui_language,
        )
        return ticket

    def complete_search(self, ticket: SearchTicket, response: SearchResponse) -> bool:
        if not self._is_current(ticket):
            return False
        self._state.results = list(response.results)
        self._state.recent_searches = push_recent_search(
            self._state.recent_searches,
            RecentSearch(query=ticket.query.text, time=self._clock()),
        )
        self._state.loading = False
        logger.info("Search #%d returned %d results.", ticket.sequence, len(response.results))
        return True

    def fail_search(self, ticket: SearchTicket, error: Exception) -> bool:
        if not self._is_current(ticket):
            return False
        logger.warning("Search #%d failed: %s", ticket.sequence, error)
        self._state.results = []
        self._state.error_message = str(error) or "Failed to fetch results"
        self._state.loading = False
        return True

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def request_export(
        self,
        query: Optional[str] = None,
        country: Optional[str] = None,
        ui_language: Optional[str] = None,
    ) -> Optional[ExportResult]:
        """Fetch the PDF export. Returns None when the query is empty."""
        captured = self._capture(query, country, ui_language)
        if captured is None:
            return None
        logger.info("Requesting export for %r", captured.text)
        try:
            data = self._client.fetch_export_blob(captured)
        except SearchServiceError as exc:
            logger.exception("Export for %r failed: %s", captured.text, exc)
            return ExportResult(error_message=export_error_message(exc))
        return ExportResult(file=ExportFile(file_name=export_file_name(captured.text), data=data))

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def state(self) -> SessionState:
        """Return a snapshot copy of the session state."""
        return replace(
            self._state,
            results=list(self._state.results),
            recent_searches=list(self._state.recent_searches),
        )

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def country(self) -> str:
        return self._state.country

    @property
    def ui_language(self) -> str:
        return self._state.ui_language

    @property
    def results(self) -> List[SearchResult]:
        return list(self._state.results)

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error_message(self) -> Optional[str]:
        return self._state.error_message

    @property
    def expanded_index(self) -> Optional[int]:
        return self._state.expanded_index

    @property
    def recent_searches(self) -> List[RecentSearch]:
        return list(self._state.recent_searches)

    @property
    def combined_summary(self) -> str:
        return combine_summaries(self._state.results)

    @property
    def can_export(self) -> bool:
        return not self._state.loading and bool(self._state.results)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _capture(
        self,
        query: Optional[str],
        country: Optional[str],
        ui_language: Optional[str],
    ) -> Optional[SearchQuery]:
        text = self._state.query if query is None else query
        if not text:
            logger.debug("Ignoring request with an empty query.")
            return None
        return SearchQuery(
            text=text,
            country=self._state.country if country is None else validate_country(country),
            ui_language=self._state.ui_language if ui_language is None else validate_ui_language(ui_language),
        )

    def _is_current(self, ticket: SearchTicket) -> bool:
        if ticket.sequence != self._sequence:
            logger.info(
                "Discarding outcome of stale search #%d (latest is #%d).",
                ticket.sequence,
                self._sequence,
            )
            return False
        return True

    def _settle(self, ticket: SearchTicket) -> None:
        if ticket.sequence == self._sequence and self._state.loading:
            self._state.loading = False

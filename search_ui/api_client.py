"""
HTTP client for the remote search service.

The service exposes two GET endpoints taking the same three query parameters:

  - `/search` returns JSON `{"results": [...]}`.
  - `/generate_pdf` returns a binary document.

Every failure is raised as a `SearchServiceError` subclass so callers only
need one `except` clause.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote, urlencode

import requests
from pydantic import ValidationError

from domain.results import SearchResponse
from search_state_manager import SearchQuery

from .config import SearchServiceConfig

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search"
EXPORT_PATH = "/generate_pdf"


class SearchServiceError(RuntimeError):
    """Base class for failures talking to the search service."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(SearchServiceError):
    """Raised when the request could not be sent or no response arrived."""


class HttpStatusError(SearchServiceError):
    """Raised when the service answers with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int, url: Optional[str] = None) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class DecodeError(SearchServiceError):
    """Raised when a search response body is not the expected JSON document."""


class SearchServiceClient:
    """
    Minimal GET client for the search service.

    One `requests.Session` is reused for every call. Pass `session` to supply
    a pre-configured (or fake) session.
    """

    def __init__(
        self,
        *,
        config: Optional[SearchServiceConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config or SearchServiceConfig()
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json, application/pdf, */*",
                "User-Agent": "AIResearchAgentUI/0.1",
            }
        )
        logger.info("Initialising SearchServiceClient for %s", self._config.base_url)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def build_url(self, path: str, query: SearchQuery) -> str:
        params = {
            "query": query.text,
            "country": query.country,
            "ui_lang": query.ui_language,
        }
        # quote (not quote_plus) so spaces become %20, as a browser's component encoding does.
        return f"{self._config.base_url}{path}?{urlencode(params, quote_via=quote)}"

    def fetch_search_results(self, query: SearchQuery) -> SearchResponse:
        url = self.build_url(SEARCH_PATH, query)
        response = self._get(url, failure_message="Failed to fetch results")
        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Search response from %s is not valid JSON: %s", url, exc)
            raise DecodeError("Search service returned a malformed response", url=url) from exc
        return self._parse_search_payload(data, url=url)

    def fetch_export_blob(self, query: SearchQuery) -> bytes:
        url = self.build_url(EXPORT_PATH, query)
        response = self._get(url, failure_message="Failed to generate PDF")
        logger.info("Received %d byte export from %s", len(response.content), url)
        return response.content

    def _get(self, url: str, *, failure_message: str) -> requests.Response:
        logger.info("GET %s", url)
        try:
            response = self._session.get(url, timeout=self._config.timeout)
        except requests.exceptions.RequestException as exc:
            logger.exception("Request to %s failed: %s", url, exc)
            raise TransportError("Could not reach the search service", url=url) from exc

        logger.info("Response status from %s: %s", url, response.status_code)
        if not 200 <= response.status_code < 300:
            logger.error("HTTP %s from %s: %s", response.status_code, url, response.text[:500])
            raise HttpStatusError(failure_message, status_code=response.status_code, url=url)
        return response

    @staticmethod
    def _parse_search_payload(data: Any, *, url: str) -> SearchResponse:
        if not isinstance(data, dict):
            logger.error("Search response from %s is a %s, expected an object", url, type(data).__name__)
            raise DecodeError("Search service returned a malformed response", url=url)
        try:
            parsed = SearchResponse.model_validate(data)
        except ValidationError as exc:
            logger.error("Search response from %s failed validation: %s", url, exc)
            raise DecodeError("Search service returned a malformed response", url=url) from exc
        logger.debug("Parsed %d search results", len(parsed.results))
        return parsed

"""
Fixed copy shown by the search front-ends.
"""

from __future__ import annotations

from typing import Tuple

APP_TITLE: str = "AI Research Agent"

SEARCH_PLACEHOLDER: str = "Ask anything or start your research..."

QUICK_TAGS: Tuple[str, ...] = (
    "Market Research",
    "Competitor Analysis",
    "Industry Trends",
    "User Behavior",
)

COMBINED_SUMMARY_HEADING: str = "Combined Summary"
RECENT_SEARCHES_HEADING: str = "Recent Searches"
FOOTER_TEXT: str = "Powered by advanced AI research capabilities"

SHOW_SUMMARY_LABEL: str = "Show summary ▼"
HIDE_SUMMARY_LABEL: str = "Hide summary ▲"

EXPORT_ERROR_PREFIX: str = "Error generating PDF: "


def export_error_message(reason: object) -> str:
    return f"{EXPORT_ERROR_PREFIX}{reason}"

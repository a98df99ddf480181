"""
Streamlit entry point for the AI Research Agent search page.

Each browser session gets its own `SearchController` (kept in
`st.session_state`); the HTTP client is shared by the whole process.
"""

from __future__ import annotations

import logging

import streamlit as st
from dotenv import load_dotenv

from domain.locales import country_codes, country_label, ui_language_label, ui_language_tags
from search_ui import SearchController, SearchServiceClient, SearchServiceConfig
from search_ui.presets import (
    APP_TITLE,
    COMBINED_SUMMARY_HEADING,
    FOOTER_TEXT,
    HIDE_SUMMARY_LABEL,
    QUICK_TAGS,
    RECENT_SEARCHES_HEADING,
    SEARCH_PLACEHOLDER,
    SHOW_SUMMARY_LABEL,
)
from search_ui.export import latest_export_file
from search_ui.sanitizer import escape_markdown, markdown_link, sanitize_content

# Ensure SEARCH_API_* variables from .env are loaded before the client is built.
load_dotenv()

LOGGER = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def _get_client() -> SearchServiceClient:
    """Create a singleton SearchServiceClient per Streamlit process."""
    return SearchServiceClient(config=SearchServiceConfig.from_env())


def _init_session_state() -> SearchController:
    """Initialize keys stored in st.session_state and return the session controller."""
    if "controller" not in st.session_state:
        st.session_state.controller = SearchController(_get_client())
    controller: SearchController = st.session_state.controller
    if "query_input" not in st.session_state:
        st.session_state.query_input = controller.query
    if "country_input" not in st.session_state:
        st.session_state.country_input = controller.country
    if "ui_lang_input" not in st.session_state:
        st.session_state.ui_lang_input = controller.ui_language
    if "export_file" not in st.session_state:
        st.session_state.export_file = None
    return controller


def _clear_session() -> None:
    st.session_state.controller.reset()
    for key in ("query_input", "country_input", "ui_lang_input", "export_file"):
        st.session_state.pop(key, None)


def _apply_quick_tag(tag: str) -> None:
    st.session_state.controller.select_quick_tag(tag)
    st.session_state.query_input = tag


def _render_sidebar() -> None:
    with st.sidebar:
        st.header("Session Controls")
        st.button("Clear session", use_container_width=True, on_click=_clear_session)


def _render_search_form(controller: SearchController) -> None:
    with st.form("search_form"):
        st.text_input("Search", key="query_input", placeholder=SEARCH_PLACEHOLDER, label_visibility="collapsed")
        country_col, lang_col = st.columns(2)
        country_col.selectbox("Country", options=country_codes(), format_func=country_label, key="country_input")
        lang_col.selectbox("Language", options=ui_language_tags(), format_func=ui_language_label, key="ui_lang_input")
        submitted = st.form_submit_button("🔍 Search", disabled=controller.loading)

    if not submitted:
        return

    controller.set_query(st.session_state.query_input)
    controller.set_country(st.session_state.country_input)
    controller.set_ui_language(st.session_state.ui_lang_input)
    with st.spinner("Loading..."):
        if controller.submit_search():
            st.session_state.export_file = None


def _render_quick_tags() -> None:
    for column, tag in zip(st.columns(len(QUICK_TAGS)), QUICK_TAGS):
        column.button(tag, key=f"tag_{tag}", on_click=_apply_quick_tag, args=(tag,), use_container_width=True)


def _render_export_controls(controller: SearchController) -> None:
    pdf_col, word_col = st.columns(2)
    with pdf_col:
        if st.button("Export PDF", disabled=not controller.can_export, use_container_width=True):
            with st.spinner("Generating PDF..."):
                result = controller.request_export()
            st.session_state.export_file = latest_export_file(st.session_state.export_file, result)
            if result is not None and not result.ok:
                st.error(result.error_message)
        export_file = st.session_state.export_file
        if export_file is not None:
            st.download_button(
                "Save PDF",
                data=export_file.data,
                file_name=export_file.file_name,
                mime=export_file.mime_type,
                use_container_width=True,
            )
    with word_col:
        # TODO: wire up once the search service exposes a Word export endpoint.
        st.button("Export Word", disabled=True, use_container_width=True)


def _render_results(controller: SearchController) -> None:
    combined = controller.combined_summary
    if combined:
        with st.container(border=True):
            st.subheader(COMBINED_SUMMARY_HEADING)
            st.text(combined)

    if controller.error_message:
        st.error(controller.error_message)

    expanded_index = controller.expanded_index
    for index, result in enumerate(controller.results):
        with st.container(border=True):
            st.markdown(f"**{markdown_link(result.display_title, result.url)}**")
            expanded = expanded_index == index
            st.button(
                HIDE_SUMMARY_LABEL if expanded else SHOW_SUMMARY_LABEL,
                key=f"expand_{index}",
                on_click=controller.toggle_expand,
                args=(index,),
            )
            if expanded:
                st.markdown(sanitize_content(result.content), unsafe_allow_html=True)


def _render_recent_searches(controller: SearchController) -> None:
    st.subheader(RECENT_SEARCHES_HEADING)
    recent = controller.recent_searches
    if not recent:
        st.caption("No searches yet.")
        return
    columns = st.columns(2)
    for idx, entry in enumerate(recent):
        with columns[idx % 2]:
            st.markdown(f"**{escape_markdown(entry.query)}**")
            st.caption(entry.display_time())


def main() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="centered")
    st.title(APP_TITLE)

    try:
        controller = _init_session_state()
    except Exception as exc:  # pragma: no cover - surfaced to UI
        LOGGER.exception("Streamlit failed to initialize the search controller: %s", exc)
        st.error(
            "Failed to initialize the search page. "
            "Check SEARCH_API_BASE_URL / SEARCH_API_TIMEOUT in your environment and restart the app.\n\n"
            f"Details: {exc}"
        )
        return

    _render_sidebar()
    _render_search_form(controller)
    _render_quick_tags()
    _render_export_controls(controller)
    _render_results(controller)
    _render_recent_searches(controller)
    st.caption(FOOTER_TEXT)


if __name__ == "__main__":
    main()

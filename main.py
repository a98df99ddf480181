"""
Command line interface for the AI Research Agent search service.

Loads connection settings from environment variables (via `.env`), creates a
SearchController, and enters an interactive loop. A plain line runs a search;
lines starting with ':' are commands (type ':help').
"""

import logging
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from domain.locales import COUNTRIES, UI_LANGUAGES
from search_ui import SearchController, SearchServiceClient, SearchServiceConfig
from search_ui.presets import APP_TITLE, QUICK_TAGS

# --- Logging configuration ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

EXIT_WORDS = {"quit", "exit", "q"}

HELP_TEXT = (
    "Commands:\n"
    "  <text>            search for <text>\n"
    "  :country <code>   set the country (" + ", ".join(COUNTRIES) + ")\n"
    "  :lang <tag>       set the UI language (" + ", ".join(UI_LANGUAGES) + ")\n"
    "  :open <n>         show / hide the content of result <n>\n"
    "  :pdf [directory]  export the current query as PDF (default: current directory)\n"
    "  :summary          print the combined summary\n"
    "  :recent           list recent searches\n"
    "  :help             show this help\n"
    "  quit              exit\n"
    "Try one of: " + ", ".join(QUICK_TAGS)
)


def format_results(controller: SearchController) -> str:
    if controller.error_message:
        return f"Error: {controller.error_message}"
    results = controller.results
    if not results:
        return "No results."
    lines: List[str] = []
    for position, result in enumerate(results, start=1):
        lines.append(f"{position}. {result.display_title}\n   {result.url}")
        if controller.expanded_index == position - 1:
            lines.append(f"   {result.content or 'No summary available.'}")
    return "\n".join(lines)


def format_recent(controller: SearchController) -> str:
    recent = controller.recent_searches
    if not recent:
        return "No recent searches."
    return "\n".join(f"- {entry.query} ({entry.display_time()})" for entry in recent)


def handle_line(controller: SearchController, line: str) -> str:
    """Apply one line of user input to the controller and return the text to print."""
    if not line.startswith(":"):
        controller.set_query(line)
        if not controller.submit_search():
            return ""
        return format_results(controller)

    command, _, argument = line[1:].partition(" ")
    argument = argument.strip()
    command = command.lower()

    if command == "help":
        return HELP_TEXT
    if command == "country":
        try:
            controller.set_country(argument.upper())
        except ValueError as exc:
            return str(exc)
        return f"Country set to {controller.country}."
    if command == "lang":
        try:
            controller.set_ui_language(argument)
        except ValueError as exc:
            return str(exc)
        return f"UI language set to {controller.ui_language}."
    if command == "open":
        try:
            position = int(argument)
        except ValueError:
            return "Usage: :open <result number>"
        if not 1 <= position <= len(controller.results):
            return f"No result number {position}."
        controller.toggle_expand(position - 1)
        return format_results(controller)
    if command == "pdf":
        if not controller.can_export:
            return "Search for something first."
        result = controller.request_export()
        if result is None:
            return "Search for something first."
        if not result.ok:
            return result.error_message or "Export failed."
        try:
            target = result.file.save_to(Path(argument or "."))
        except OSError as exc:
            logger.exception("Failed to save export to %s: %s", argument or ".", exc)
            return f"Could not save export: {exc}"
        return f"Saved {target}"
    if command == "summary":
        return controller.combined_summary or "No summaries available."
    if command == "recent":
        return format_recent(controller)
    return f"Unknown command ':{command}'. Type :help for the list of commands."


def main() -> None:
    """Run the command line loop for the search service."""
    logger.info("Loading environment variables from .env file...")
    load_dotenv()

    try:
        controller = SearchController(SearchServiceClient(config=SearchServiceConfig.from_env()))
    except EnvironmentError as exc:
        logger.exception("Failed to initialize the search client: %s", exc)
        return

    print(f"\nWelcome to the {APP_TITLE}!\nType a search and press Enter.  Type ':help' for commands, 'quit' to exit.\n")

    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            logger.info("EOF received; exiting.")
            break

        if not line:
            continue
        if line.lower() in EXIT_WORDS:
            logger.info("User requested exit.")
            break

        try:
            logger.info("Processing input: %s", line)
            output = handle_line(controller, line)
        except Exception as exc:
            logger.exception("Error while processing input: %s", exc)
            print(f"An error occurred: {exc}\n")
            continue
        if output:
            print(f"{output}\n")

    logger.info("Session ended. Goodbye!")
    print("Goodbye!")


if __name__ == "__main__":
    main()

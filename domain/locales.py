
from typing import Dict, List

DEFAULT_COUNTRY = "US"
DEFAULT_UI_LANGUAGE = "en-US"

# Ordered as presented in the filter drop-downs.
COUNTRIES: Dict[str, str] = {
    "US": "🇺🇸 US",
    "IN": "🇮🇳 India",
    "GB": "🇬🇧 UK",
    "CA": "🇨🇦 Canada",
    "FR": "🇫🇷 France",
    "DE": "🇩🇪 Germany",
}

UI_LANGUAGES: Dict[str, str] = {
    "en-US": "English",
    "en-IN": "IND ENG",
    "en-GB": "UK ENG",
    "en-CA": "CA ENG",
    "fr-FR": "French",
    "de-DE": "German",
}


def country_codes() -> List[str]:
    return list(COUNTRIES)


def ui_language_tags() -> List[str]:
    return list(UI_LANGUAGES)


def country_label(code: str) -> str:
    return COUNTRIES.get(code, code)


def ui_language_label(tag: str) -> str:
    return UI_LANGUAGES.get(tag, tag)


def validate_country(code: str) -> str:
    if code not in COUNTRIES:
        raise ValueError(f"Unsupported country code '{code}'. Expected one of: {', '.join(COUNTRIES)}")
    return code


def validate_ui_language(tag: str) -> str:
    if tag not in UI_LANGUAGES:
        raise ValueError(f"Unsupported UI language '{tag}'. Expected one of: {', '.join(UI_LANGUAGES)}")
    return tag


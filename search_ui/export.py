"""Containers for document exports returned to the front-ends."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

EXPORT_EXTENSION = "pdf"
EXPORT_MIME_TYPE = "application/pdf"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def export_file_name(query: str, extension: str = EXPORT_EXTENSION) -> str:
    """Download name offered to the browser, derived only from the query text."""
    return f"search_results_{query}.{extension}"


def safe_file_name(file_name: str, max_length: int = 255) -> str:
    """Strip path components and unusual characters before writing to disk."""
    cleaned = file_name.replace("..", "").replace("/", "").replace("\\", "")
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", cleaned)
    if len(cleaned) > max_length:
        stem, dot, ext = cleaned.rpartition(".")
        if dot and stem:
            cleaned = stem[: max_length - len(ext) - 1] + "." + ext
        else:
            cleaned = cleaned[:max_length]
    return cleaned


@dataclass(frozen=True, slots=True)
class ExportFile:
    """Opaque document bytes plus the name to save them under."""

    file_name: str
    data: bytes
    mime_type: str = EXPORT_MIME_TYPE

    def save_to(self, directory: Path) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / safe_file_name(self.file_name)
        target.write_bytes(self.data)
        return target


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Outcome of an export request: either a file or a user-facing error."""

    file: Optional[ExportFile] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.file is not None


def latest_export_file(current: Optional[ExportFile], result: Optional[ExportResult]) -> Optional[ExportFile]:
    """File the page should offer for download after an export attempt.

    A failed attempt drops any earlier file; a skipped one (``None``) keeps it.
    """
    if result is None:
        return current
    return result.file

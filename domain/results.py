
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    url: str
    title: Optional[str] = None
    content: Optional[str] = None
    summary: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.title or self.url


class SearchResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    results: List[SearchResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_results_are_empty(cls, value: Any) -> Any:
        return [] if value is None else value


def combine_summaries(results: Sequence[SearchResult]) -> str:
    """Number each non-empty summary by its result position and join them with blank lines."""
    chunks: List[str] = []
    for position, result in enumerate(results, start=1):
        if result.summary:
            chunks.append(f"{position}. {result.summary}")
    return "\n\n".join(chunks)

"""TimelineEntry: one chronological item parsed from timeline source text.

Entries are built fresh on every parse, never mutated afterwards and only
identified by their position in the parsed sequence. `date` and `title` are
the raw labels as authored (no date validation happens anywhere); `body` is
Markdown prose handed to the prose renderer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HeaderParts(BaseModel):
    """The (date, title) split of a single header line."""

    model_config = ConfigDict(frozen=True)

    date: str | None = Field(default=None, description="Date label before the separator.")
    title: str | None = Field(default=None, description="Title text after the separator.")

    @property
    def is_empty(self) -> bool:
        """Return True when neither a date nor a title was found."""
        return not self.date and not self.title


class TimelineEntry(BaseModel):
    """A single event on a rendered timeline."""

    model_config = ConfigDict(frozen=True)

    date: str | None = Field(default=None, description="Raw, unvalidated date label.")
    title: str | None = Field(default=None, description="Raw title text.")
    body: str = Field(default="", description="Markdown prose for the entry; may be empty.")


__all__ = ["HeaderParts", "TimelineEntry"]

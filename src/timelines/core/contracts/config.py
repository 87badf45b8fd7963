"""RenderConfiguration: the user-facing options read at render time.

The JSON representation uses camelCase keys (``showMarkers``,
``defaultDateLabel``) so a persisted settings file stays compatible with the
editor plugin that first produced it; Python code uses snake_case names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DATE_LABEL = "Date"


class RenderConfiguration(BaseModel):
    """Options consumed by both renderers; read-only to the core."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    show_markers: bool = Field(
        default=True,
        alias="showMarkers",
        description="Emit the start marker and per-item marker decorations.",
    )
    default_date_label: str = Field(
        default=DEFAULT_DATE_LABEL,
        alias="defaultDateLabel",
        description="Fallback label shown when an entry has no date.",
    )

    @property
    def fallback_date(self) -> str | None:
        """Return the trimmed default label, or None when it is blank."""
        label = self.default_date_label.strip()
        return label or None


__all__ = ["DEFAULT_DATE_LABEL", "RenderConfiguration"]

"""
Request/response schemas for the TimeLines HTTP API.

All payloads are Pydantic v2 models so FastAPI validates input (422 on bad
shapes) and documents the contract in the OpenAPI schema.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RenderFormat(str, Enum):
    """Representation returned by `POST /render`."""

    HTML = "html"
    TREE = "tree"
    PAGE = "page"


class RenderRequest(BaseModel):
    """Timeline source plus optional per-request overrides of the settings."""

    source: str = Field(..., description="Timeline source text.")
    source_path: str = Field(
        default="", description="Path of the enclosing document, for relative links."
    )
    format: RenderFormat = Field(default=RenderFormat.HTML)
    show_markers: bool | None = Field(default=None, description="Override `showMarkers`.")
    default_date_label: str | None = Field(
        default=None, description="Override `defaultDateLabel`."
    )


class RenderResponse(BaseModel):
    format: RenderFormat
    entries: int = Field(ge=0, description="Number of parsed entries.")
    html: str | None = Field(default=None, description="Markup for html/page formats.")
    tree: dict[str, Any] | None = Field(default=None, description="Node tree for tree format.")


class ParseRequest(BaseModel):
    source: str = Field(..., description="Timeline source text.")


class ConvertRequest(BaseModel):
    content: str = Field(..., description="Full Markdown document.")
    source_path: str = Field(default="", description="Path of the document.")


class ConvertResponse(BaseModel):
    converted: int = Field(ge=0)
    content: str
    message: str


class SettingsUpdate(BaseModel):
    """Partial update of the persisted render configuration."""

    model_config = ConfigDict(populate_by_name=True)

    show_markers: bool | None = Field(default=None, alias="showMarkers")
    default_date_label: str | None = Field(default=None, alias="defaultDateLabel")


__all__ = [
    "ConvertRequest",
    "ConvertResponse",
    "ParseRequest",
    "RenderFormat",
    "RenderRequest",
    "RenderResponse",
    "SettingsUpdate",
]

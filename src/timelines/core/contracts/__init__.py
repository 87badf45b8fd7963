"""Pydantic contracts shared by the parser, renderers and front-ends."""

from __future__ import annotations

from .config import RenderConfiguration
from .entry import HeaderParts, TimelineEntry

__all__ = ["HeaderParts", "RenderConfiguration", "TimelineEntry"]

"""Core package initializer for TimeLines.

Holds configuration (`timelines.core.settings`), the persisted render
configuration store (`timelines.core.config_store`) and the Pydantic
contracts shared by parser and renderers (`timelines.core.contracts`).
"""

from __future__ import annotations

__all__ = ["__doc__"]

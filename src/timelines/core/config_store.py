"""Disk-backed store for the persisted :class:`RenderConfiguration`.

- Default path: `TIMELINES_SETTINGS_PATH` env var or `.timelines.json`
- Content:      a JSON object with camelCase keys, e.g.
                ``{"showMarkers": true, "defaultDateLabel": "Date"}``

Loading merges three layers, later ones winning:
1) the model defaults,
2) the environment-driven defaults from :class:`Settings`,
3) whatever the JSON file contains (unknown keys ignored).

A missing file is the normal first-run case. An unreadable or malformed file
is logged and treated as missing so a broken settings file never prevents
rendering.

Usage
-----
>>> store = ConfigStore()
>>> config = store.load()
>>> store.update(show_markers=False)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from timelines.core.contracts.config import RenderConfiguration
from timelines.core.settings import Settings, get_logger, load_settings

log = get_logger("timelines.config")


class ConfigStore:
    """Load and save the render configuration as a small JSON document."""

    def __init__(self, path: Path | None = None, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else load_settings()
        self.path: Path = path if path is not None else self._settings.settings_path

    def defaults(self) -> RenderConfiguration:
        """Return the configuration used when nothing has been saved yet."""
        return RenderConfiguration(
            show_markers=self._settings.show_markers,
            default_date_label=self._settings.default_date_label,
        )

    def _read_raw(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            log.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring settings file %s: expected a JSON object", self.path)
            return {}
        return data

    def load(self) -> RenderConfiguration:
        """Return defaults overlaid with the persisted values."""
        merged = self.defaults().model_dump(by_alias=True)
        merged.update(self._read_raw())
        try:
            return RenderConfiguration.model_validate(merged)
        except ValidationError as exc:
            log.warning("Ignoring invalid settings in %s: %s", self.path, exc)
            return self.defaults()

    def save(self, config: RenderConfiguration) -> Path:
        """Write `config` to disk and return the file path."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(config.model_dump(by_alias=True), f, ensure_ascii=False, indent=2)
            f.write("\n")
        log.debug("Saved render configuration to %s", self.path)
        return self.path

    def update(
        self,
        *,
        show_markers: bool | None = None,
        default_date_label: str | None = None,
    ) -> RenderConfiguration:
        """Apply the given changes on top of the stored values and persist them.

        The date label is trimmed before saving, matching what the settings
        form does on every edit.
        """
        changes: dict[str, Any] = {}
        if show_markers is not None:
            changes["show_markers"] = show_markers
        if default_date_label is not None:
            changes["default_date_label"] = default_date_label.strip()

        config = self.load().model_copy(update=changes)
        self.save(config)
        return config


__all__ = ["ConfigStore"]

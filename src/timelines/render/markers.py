"""Process-wide marker visibility, applied as a class on the document body.

Besides the per-render `show_markers` option, markers can be hidden for
everything already on screen by putting ``timeline-hide-markers`` on the
document body (the page stylesheet hides ``.timeline-marker`` under it).

:class:`MarkerVisibility` owns that single side effect:

- ``apply(config)``  : idempotently sync the class with `config.show_markers`
  (called at startup and again whenever settings change);
- ``release()``      : remove the class (called once at shutdown).

It can also be used as a context manager around a service's lifetime.
"""

from __future__ import annotations

from types import TracebackType

from timelines.core.contracts.config import RenderConfiguration

from .nodes import Node

HIDE_MARKERS_CLASS = "timeline-hide-markers"


class MarkerVisibility:
    """Scoped owner of the body-level marker visibility class."""

    def __init__(self, body: Node, config: RenderConfiguration | None = None) -> None:
        self.body = body
        self._initial = config

    def apply(self, config: RenderConfiguration) -> None:
        self.body.toggle_class(HIDE_MARKERS_CLASS, not config.show_markers)

    def release(self) -> None:
        self.body.remove_class(HIDE_MARKERS_CLASS)

    @property
    def markers_hidden(self) -> bool:
        return self.body.has_class(HIDE_MARKERS_CLASS)

    def __enter__(self) -> MarkerVisibility:
        if self._initial is not None:
            self.apply(self._initial)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


__all__ = ["HIDE_MARKERS_CLASS", "MarkerVisibility"]

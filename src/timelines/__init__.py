"""TimeLines: turn loosely-structured chronological notes into rendered timelines.

The package is split into:

- ``timelines.parsing``   : header detection and blank-line block segmentation.
- ``timelines.render``    : the shared section layout plus the live (node tree)
  and static (HTML string) renderers.
- ``timelines.pipelines`` : document-level batch conversion.
- ``timelines.cli`` / ``timelines.api`` : terminal and HTTP front-ends.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"

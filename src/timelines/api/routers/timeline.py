"""
API Routes for parsing, rendering and converting timelines.

Endpoints
---------
- `POST /parse`    : Parse source text into entries.
- `POST /render`   : Render source text as HTML, a full page, or a node tree.
- `POST /convert`  : Replace timeline code blocks in a Markdown document.
- `GET  /settings` : Read the persisted render configuration.
- `PUT  /settings` : Update it and re-apply body-level marker visibility.

Design Decisions
----------------
- **Shared state lives on `app.state`**: the config store, the prose
  renderer and the document body node are created by the app factory, so
  tests can inject their own.
- **Render errors are not caught here**: a failing prose render surfaces
  through the app's global exception handlers.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from timelines.api.schemas import (
    ConvertRequest,
    ConvertResponse,
    ParseRequest,
    RenderFormat,
    RenderRequest,
    RenderResponse,
    SettingsUpdate,
)
from timelines.core.config_store import ConfigStore
from timelines.core.contracts.config import RenderConfiguration
from timelines.core.contracts.entry import TimelineEntry
from timelines.parsing.segmenter import parse_timeline_source
from timelines.pipelines.convert import convert_timeline_blocks
from timelines.render.live import render_timeline_entries
from timelines.render.markers import MarkerVisibility
from timelines.render.nodes import Node
from timelines.render.page import render_page
from timelines.render.prose import ProseRenderer
from timelines.render.static import render_timeline_document

router = APIRouter(tags=["Timeline"])


def _store(request: Request) -> ConfigStore:
    store: ConfigStore = request.app.state.config_store
    return store


def _prose(request: Request) -> ProseRenderer:
    prose: ProseRenderer = request.app.state.prose
    return prose


@router.post("/parse", response_model=list[TimelineEntry], summary="Parse timeline source")
async def parse_source(payload: ParseRequest) -> list[TimelineEntry]:
    """Return the entries parsed from `source`, in order."""
    return parse_timeline_source(payload.source)


@router.post("/render", response_model=RenderResponse, summary="Render a timeline")
async def render_source(payload: RenderRequest, request: Request) -> RenderResponse:
    """
    Render timeline source text.

    Options not given in the request fall back to the persisted settings.
    """
    changes: dict[str, object] = {}
    if payload.show_markers is not None:
        changes["show_markers"] = payload.show_markers
    if payload.default_date_label is not None:
        changes["default_date_label"] = payload.default_date_label
    config = _store(request).load().model_copy(update=changes)

    entries = parse_timeline_source(payload.source)
    prose = _prose(request)

    if payload.format is RenderFormat.TREE:
        container = Node(classes=["timeline"])
        await render_timeline_entries(entries, container, payload.source_path, config, prose)
        return RenderResponse(format=payload.format, entries=len(entries), tree=container.to_dict())

    html = await render_timeline_document(entries, config, payload.source_path, prose)
    if payload.format is RenderFormat.PAGE:
        html = render_page(html, request.app.state.body)
    return RenderResponse(format=payload.format, entries=len(entries), html=html)


@router.post("/convert", response_model=ConvertResponse, summary="Convert timeline blocks")
async def convert_document(payload: ConvertRequest, request: Request) -> ConvertResponse:
    """Replace every ```` ```timeline ```` block in `content` with static HTML."""
    config = _store(request).load()
    report = await convert_timeline_blocks(
        payload.content, config, payload.source_path, _prose(request)
    )
    return ConvertResponse(
        converted=report.converted, content=report.content, message=report.message
    )


@router.get("/settings", response_model=RenderConfiguration, summary="Read settings")
async def read_settings(request: Request) -> RenderConfiguration:
    return _store(request).load()


@router.put("/settings", response_model=RenderConfiguration, summary="Update settings")
async def update_settings(payload: SettingsUpdate, request: Request) -> RenderConfiguration:
    """Persist the given fields and re-apply body-level marker visibility."""
    config = _store(request).update(
        show_markers=payload.show_markers,
        default_date_label=payload.default_date_label,
    )
    visibility: MarkerVisibility = request.app.state.marker_visibility
    visibility.apply(config)
    return config


__all__ = ["router"]

"""Pipeline de rendu : plan résolu → preview / HTML email / source TSX."""
from .plan import PlannedBlock, RenderPlan, project
from .tree import build_tree
from .html import render_html, format_node, format_nodes
from .source import render_source, escape_jsx
from .preview import PreviewNode, render_preview, render_preview_page
from .service import (
    MarkupRenderError,
    LocalMarkupService,
    RemoteMarkupService,
    default_service,
    export_html,
)

__all__ = [
    "PlannedBlock", "RenderPlan", "project", "build_tree",
    "render_html", "format_node", "format_nodes",
    "render_source", "escape_jsx",
    "PreviewNode", "render_preview", "render_preview_page",
    "MarkupRenderError", "LocalMarkupService", "RemoteMarkupService",
    "default_service", "export_html",
]

"""
Back-end preview — un noeud affichable par bloc, pour le canevas de l'éditeur.

Contrairement au HTML email, la preview peut utiliser flex/grid. Un bloc
rich-text en cours d'édition n'a pas de rendu "lecture" : il expose sa
surface d'édition, qui porte l'objet contenu lui-même (aucune transformation).
"""
import html
import logging
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_serializer

from ..blocks import RICH_TEXT_TYPES
from ..components import Node, RAW_HTML, node
from ..core.document import EmailDocument
from ..design.resolver import ResolvedStyle, hints_for
from ..design.tokens import DesignSystem
from ..richtext.model import RichTextNode, serialize
from ..richtext.render import to_portable_nodes
from .html import format_node, format_nodes
from .icons import social_icon
from .plan import PlannedBlock, RenderPlan, project

log = logging.getLogger(__name__)

SimulateMode = Literal["light", "dark"]

DARK_TEXT = "#e5e7eb"
_PLACEHOLDER = {"light": "#f3f4f6", "dark": "#3f3f46"}
_MUTED = {"light": "#6b7280", "dark": "#a1a1aa"}
_CANVAS = {"light": "#ffffff", "dark": "#18181b"}
_JUSTIFY = {"left": "flex-start", "center": "center", "right": "flex-end"}


class PreviewNode(BaseModel):
    """Rendu preview d'un bloc : HTML de lecture OU surface d'édition."""
    model_config = ConfigDict(frozen=True)

    block_id: str
    category: str
    position: int
    style: ResolvedStyle
    html: Optional[str] = None
    editing: bool = False
    edit_surface: Optional[RichTextNode] = None

    @field_serializer("edit_surface")
    def _canonical_surface(self, value: Optional[RichTextNode]):
        return serialize(value) if value is not None else None


def render_preview(
    document: EmailDocument,
    design_system: Optional[DesignSystem] = None,
    editing_block_id: Optional[str] = None,
    simulate_mode: SimulateMode = "light",
) -> Tuple[PreviewNode, ...]:
    """
    Noeuds preview dans l'ordre du document.

    Raises:
        ValueError: simulate_mode différent de "light"/"dark"
    """
    return _preview_nodes(project(document, design_system), editing_block_id, simulate_mode)


def render_preview_page(
    document: EmailDocument,
    design_system: Optional[DesignSystem] = None,
    editing_block_id: Optional[str] = None,
    simulate_mode: SimulateMode = "light",
) -> str:
    """Page HTML complète assemblant les noeuds preview (canevas de l'éditeur)."""
    plan = project(document, design_system)
    nodes = _preview_nodes(plan, editing_block_id, simulate_mode)
    plan_settings = plan.settings
    blocks = []
    for n in nodes:
        if n.editing:
            inner = f'<div contenteditable="true">{format_nodes(to_portable_nodes(n.edit_surface, _mode_hints(n.style, simulate_mode)))}</div>'
        else:
            inner = n.html or ""
        blocks.append(
            f'<div data-block-id="{html.escape(n.block_id)}" data-category="{n.category}" '
            f'style="margin-bottom:16px">{inner}</div>'
        )
    return (
        "<!DOCTYPE html>"
        f'<html lang="en"><head><meta charset="utf-8"/><title>{html.escape(document.name)}</title></head>'
        f'<body style="margin:0;padding:40px 20px;background-color:{html.escape(plan_settings.background_color)};'
        f'font-family:{html.escape(plan_settings.font_family)}">'
        f'<div style="max-width:{plan_settings.content_width}px;margin:0 auto;'
        f'background-color:{_CANVAS[simulate_mode]};border-radius:8px;padding:24px">'
        f'{"".join(blocks)}</div></body></html>'
    )


def _preview_nodes(plan: RenderPlan, editing_block_id: Optional[str], mode: str) -> Tuple[PreviewNode, ...]:
    if mode not in ("light", "dark"):
        raise ValueError(f"simulate_mode invalide : {mode!r}")
    return tuple(_preview_node(planned, editing_block_id, mode) for planned in plan.blocks)


def _preview_node(planned: PlannedBlock, editing_block_id: Optional[str], mode: str) -> PreviewNode:
    block = planned.block
    base = dict(block_id=block.id, category=planned.category, position=planned.position, style=planned.style)
    if block.id == editing_block_id and planned.category in RICH_TEXT_TYPES:
        return PreviewNode(**base, editing=True, edit_surface=block.content)
    builder = _BUILDERS.get(planned.category)
    if builder is None:
        log.warning("Pas de preview pour la catégorie %r", planned.category)
        return PreviewNode(**base, html="")
    return PreviewNode(**base, html=format_node(builder(block, planned.style, mode)))


# ── Builders preview ────────────────────────────────────────────────────────

def _mode_hints(style: ResolvedStyle, mode: str):
    hints = hints_for(style)
    if mode == "dark":
        hints = hints.model_copy(update={"text_color": DARK_TEXT, "list_color": DARK_TEXT, "blockquote_color": DARK_TEXT})
    return hints


def _rich_text(block, style: ResolvedStyle, mode: str) -> Node:
    hints = _mode_hints(style, mode)
    return node("div", {"style": {"textAlign": style.text_align, "color": hints.text_color}}, to_portable_nodes(block.content, hints))


def _image(block, style: ResolvedStyle, mode: str) -> Node:
    if block.src:
        content = node("img", {"src": block.src, "alt": block.alt, "style": {
            "width": block.width,
            "height": block.height,
            "objectFit": "cover",
            "display": "inline-block",
            "borderRadius": 6,
        }})
    else:
        content = node("div", {"style": {
            "width": block.width,
            "height": block.height,
            "display": "inline-flex",
            "alignItems": "center",
            "justifyContent": "center",
            "backgroundColor": _PLACEHOLDER[mode],
            "borderRadius": 6,
        }})
    return node("div", {"style": {"textAlign": style.text_align}}, content)


def _button(block, style: ResolvedStyle, mode: str) -> Node:
    return node("div", {"style": {"textAlign": style.text_align}}, node("a", {"href": block.url, "style": {
        "display": "inline-block",
        "padding": style.padding,
        "fontFamily": style.font_family,
        "fontSize": style.font_size,
        "fontWeight": style.font_weight,
        "backgroundColor": style.background_color,
        "color": style.text_color,
        "borderRadius": style.border_radius,
        "textDecoration": "none",
    }}, block.text))


def _header(block, style: ResolvedStyle, mode: str) -> Node:
    if block.logo_src:
        logo = node("img", {"src": block.logo_src, "alt": block.brand_name, "style": {
            "width": 40, "height": 40, "borderRadius": 6, "objectFit": "cover",
        }})
    else:
        logo = node("div", {"style": {"width": 40, "height": 40, "borderRadius": 6, "backgroundColor": _PLACEHOLDER[mode]}})
    brand = node("span", {"style": {
        "fontFamily": style.font_family,
        "fontSize": style.font_size,
        "fontWeight": style.font_weight,
        "color": DARK_TEXT if mode == "dark" else style.color,
    }}, block.brand_name)
    badge = None
    if block.show_badge:
        badge = node("div", {"style": {"width": 16, "height": 16, "borderRadius": "50%", "backgroundColor": "#06b6d4"}})
    return node(
        "div", {"style": {"display": "flex", "alignItems": "center", "justifyContent": "space-between"}},
        node("div", {"style": {"display": "flex", "alignItems": "center", "gap": 12}}, logo, brand),
        badge,
    )


def _columns(block, style: ResolvedStyle, mode: str) -> Node:
    slots = [
        node("div", {"style": {
            "minHeight": 96,
            "padding": 16,
            "border": f"2px dashed {'#52525b' if mode == 'dark' else '#e5e7eb'}",
            "borderRadius": 6,
        }}, node("p", {"style": {"margin": 0, "textAlign": "center", "fontSize": 12, "color": _MUTED[mode]}}, f"Column {i + 1}"))
        for i in range(len(block.content))
    ]
    return node("div", {"style": {
        "display": "grid",
        "gridTemplateColumns": f"repeat({block.columns}, 1fr)",
        "gap": style.gap,
    }}, slots)


def _divider(block, style: ResolvedStyle, mode: str) -> Node:
    return node("hr", {"style": {
        "border": "none",
        "borderTop": f"{style.thickness}px {style.border_style} {style.color}",
        "margin": 0,
    }})


def _spacer(block, style: ResolvedStyle, mode: str) -> Node:
    return node("div", {"style": {"height": style.height}})


def _social(block, style: ResolvedStyle, mode: str) -> Node:
    box = style.icon_size + 16
    links = [
        node("a", {"href": link.url, "style": {
            "display": "flex",
            "alignItems": "center",
            "justifyContent": "center",
            "width": box,
            "height": box,
            "borderRadius": 6,
            "backgroundColor": _PLACEHOLDER[mode] if mode == "dark" else style.background_color,
            "color": "#d4d4d8" if mode == "dark" else style.color,
        }}, node(RAW_HTML, {"html": social_icon(link.platform, style.icon_size), "label": f"{link.platform} icon"}))
        for link in block.links
    ]
    return node("div", {"style": {
        "display": "flex",
        "gap": 16,
        "justifyContent": _JUSTIFY.get(style.text_align, "center"),
    }}, links)


_BUILDERS = {
    "heading":      _rich_text,
    "text":         _rich_text,
    "footer":       _rich_text,
    "image":        _image,
    "button":       _button,
    "header":       _header,
    "columns":      _columns,
    "divider":      _divider,
    "spacer":       _spacer,
    "social-links": _social,
}

"""
Plan de rendu → arbre de composants email (Html > Body > Container > blocs).

Un builder par catégorie (même principe que le registry de blocs). Les
back-ends HTML et source formatent l'arbre produit ici, à l'identique.
"""
import logging
from typing import Callable, Dict, Optional

from ..components import Node, RAW_HTML, node
from ..design.resolver import ResolvedStyle, hints_for
from ..richtext.render import to_portable_nodes
from .icons import social_icon
from .plan import PlannedBlock, RenderPlan

log = logging.getLogger(__name__)

NBSP = "\u00a0"

PLACEHOLDER_BG = "#f3f4f6"
BADGE_COLOR = "#06b6d4"


def build_tree(plan: RenderPlan) -> Node:
    """Document complet : wrapper head/body + conteneur + blocs dans l'ordre."""
    settings = plan.settings
    blocks = [block_node(planned) for planned in plan.blocks]
    preview = node("Preview", None, settings.preview_text) if settings.preview_text else None
    return node(
        "Html", {"lang": "en", "dir": "ltr"},
        node("Head"),
        preview,
        node(
            "Body",
            {"style": {
                "backgroundColor": settings.background_color,
                "fontFamily": settings.font_family,
                "margin": 0,
                "padding": "40px 20px",
            }},
            node(
                "Container",
                {"style": {
                    "maxWidth": settings.content_width,
                    "margin": "0 auto",
                    "backgroundColor": "#ffffff",
                    "borderRadius": 8,
                    "padding": 24,
                }},
                blocks,
            ),
        ),
    )


def block_node(planned: PlannedBlock) -> Optional[Node]:
    """Composant d'un bloc ; None (rien) pour une catégorie sans builder."""
    builder = _BUILDERS.get(planned.category)
    if builder is None:
        log.warning("Pas de rendu pour la catégorie %r", planned.category)
        return None
    return builder(planned.block, planned.style)


# ── Builders par catégorie ──────────────────────────────────────────────────

def _rich_text(block, style: ResolvedStyle) -> Node:
    return node("Section", {"style": {"marginBottom": 16}}, to_portable_nodes(block.content, hints_for(style)))


def _image(block, style: ResolvedStyle) -> Node:
    if not block.src:
        content = node("div", {"style": {
            "width": block.width,
            "height": block.height,
            "backgroundColor": PLACEHOLDER_BG,
            "borderRadius": 4,
            "display": "inline-block",
        }})
    else:
        content = node("Img", {
            "src": block.src,
            "alt": block.alt,
            "width": block.width,
            "style": {"borderRadius": 4, "maxWidth": "100%", "height": "auto"},
        })
    return node("Section", {"style": {"textAlign": style.text_align, "marginBottom": 16}}, content)


def _button(block, style: ResolvedStyle) -> Node:
    return node(
        "Section", {"style": {"textAlign": style.text_align, "marginBottom": 16}},
        node("Button", {
            "href": block.url,
            "style": {
                "display": "inline-block",
                "padding": style.padding,
                "fontFamily": style.font_family,
                "fontSize": style.font_size,
                "fontWeight": style.font_weight,
                "color": style.text_color,
                "backgroundColor": style.background_color,
                "textDecoration": "none",
                "borderRadius": style.border_radius,
            },
        }, block.text),
    )


def _header(block, style: ResolvedStyle) -> Node:
    if block.logo_src:
        logo = node("Img", {
            "src": block.logo_src,
            "alt": block.brand_name,
            "width": 40,
            "height": 40,
            "style": {"borderRadius": 4, "objectFit": "cover"},
        })
    else:
        logo = node("div", {"style": {"width": 40, "height": 40, "backgroundColor": PLACEHOLDER_BG, "borderRadius": 4}})

    badge = None
    if block.show_badge:
        badge = node("Column", {"style": {"textAlign": "right"}}, node("div", {"style": {
            "width": 16,
            "height": 16,
            "backgroundColor": BADGE_COLOR,
            "borderRadius": "50%",
            "display": "inline-block",
        }}))

    return node(
        "Section", {"style": {"marginBottom": 16}},
        node(
            "Row", None,
            node("Column", {"style": {"width": 52}}, logo),
            node("Column", {"style": {"paddingLeft": 12}}, node("Text", {"style": {
                "fontFamily": style.font_family,
                "fontSize": style.font_size,
                "fontWeight": style.font_weight,
                "color": style.color,
                "margin": 0,
            }}, block.brand_name)),
            badge,
        ),
    )


def _columns(block, style: ResolvedStyle) -> Node:
    # contenu des colonnes non rendu : emplacements vides numérotés
    cells = []
    for index in range(len(block.content)):
        if index and style.gap:
            cells.append(node("Column", {"style": {"width": style.gap}}))
        cells.append(node(
            "Column",
            {"style": {
                "padding": 16,
                "border": "2px dashed #e5e7eb",
                "borderRadius": 4,
                "textAlign": "center",
            }},
            node("Text", {"style": {"margin": 0, "fontSize": 12, "color": "#6b7280"}}, f"Column {index + 1}"),
        ))
    return node("Section", {"style": {"marginBottom": 16}}, node("Row", None, cells))


def _divider(block, style: ResolvedStyle) -> Node:
    return node("Hr", {"style": {
        "border": "none",
        "borderTop": f"{style.thickness}px {style.border_style} {style.color}",
        "margin": "0 0 16px 0",
    }})


def _spacer(block, style: ResolvedStyle) -> Node:
    return node(
        "Section", {"style": {"height": style.height}},
        node("Text", {"style": {"margin": 0, "fontSize": 0, "lineHeight": 0}}, NBSP),
    )


def _social(block, style: ResolvedStyle) -> Node:
    box = style.icon_size + 16
    cells = [
        node("Column", {"style": {"width": "auto", "padding": "0 8px"}}, node(
            "Link",
            {"href": link.url, "style": {
                "display": "inline-block",
                "width": box,
                "height": box,
                "backgroundColor": style.background_color,
                "borderRadius": 4,
                "textAlign": "center",
                "lineHeight": f"{box}px",
                "color": style.color,
            }},
            node(RAW_HTML, {"html": social_icon(link.platform, style.icon_size), "label": f"{link.platform} icon"}),
        ))
        for link in block.links
    ]
    return node(
        "Section", {"style": {"textAlign": style.text_align, "marginBottom": 16}},
        node("Row", None, cells),
    )


_BUILDERS: Dict[str, Callable[..., Node]] = {
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

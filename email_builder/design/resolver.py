"""
Resolver de styles — cascade à trois niveaux, champ par champ :

    valeur explicite du bloc  >  token du design system  >  baseline en dur

Pas de spécificité ni d'héritage entre catégories : chaque catégorie lit son
propre sous-record de tokens (+ list/blockquote pour le contenu rich-text).
Le resolver ne modifie jamais le bloc : changer de design system ne change
que ce qu'il retourne.
"""
import logging
from typing import Callable, Dict, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from ..blocks import (
    BaseBlock,
    ButtonBlock,
    ColumnsBlock,
    DividerBlock,
    FooterBlock,
    HeaderBlock,
    HeadingBlock,
    ImageBlock,
    SocialLinksBlock,
    SpacerBlock,
    TextBlock,
)
from ..core.document import DocumentSettings
from ..richtext.render import HEADING_SIZES, StyleHints
from .tokens import DesignSystem

log = logging.getLogger(__name__)

T = TypeVar("T")

# Police du conteneur sans design system actif
BASE_FONT_STACK = (
    "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, "
    "'Helvetica Neue', Ubuntu, sans-serif"
)

# ── Baselines (3e niveau de la cascade) ─────────────────────────────────────
BASELINE = {
    "heading": {"color": "#000000", "font_weight": "700", "line_height": 1.6, "text_align": "left"},
    "text":    {"color": "#374151", "font_size": 16, "line_height": 1.6, "text_align": "left"},
    "footer":  {"color": "#6b7280", "font_size": 14, "line_height": 1.6, "text_align": "left"},
    "button":  {
        "background_color": "#000000", "text_color": "#ffffff", "border_radius": 4,
        "font_size": 16, "font_weight": "500", "padding": "12px 24px", "text_align": "center",
    },
    "divider": {"color": "#e5e7eb", "thickness": 1, "border_style": "solid"},
    "image":   {"text_align": "center"},
    "header":  {"color": "#000000", "font_size": 16, "font_weight": "600"},
    "spacer":  {"height": 32},
    "social-links": {
        "icon_size": 24, "text_align": "center",
        "color": "#6b7280", "background_color": "#f3f4f6",
    },
    "columns": {"gap": 16},
}


class ResolvedStyle(BaseModel):
    """Style calculé d'une instance de bloc (éphémère, jamais persisté)."""
    model_config = ConfigDict(frozen=True)

    category: str
    color: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    text_align: Optional[str] = None
    font_family: Optional[str] = None
    font_size: Optional[int] = None
    font_weight: Optional[str] = None
    line_height: Optional[float] = None
    border_radius: Optional[int] = None
    padding: Optional[str] = None
    thickness: Optional[int] = None
    border_style: Optional[str] = None
    height: Optional[int] = None
    icon_size: Optional[int] = None
    gap: Optional[int] = None
    list_color: Optional[str] = None
    list_font_family: Optional[str] = None
    blockquote_color: Optional[str] = None
    blockquote_border_color: Optional[str] = None
    blockquote_font_family: Optional[str] = None


class ResolvedSettings(BaseModel):
    """Conteneur résolu : fond, largeur, police du body, texte de preview."""
    model_config = ConfigDict(frozen=True)

    background_color: str
    content_width: int
    font_family: str
    preview_text: Optional[str] = None


def resolve_field(explicit: Optional[T], token: Optional[T], baseline: Optional[T]) -> Optional[T]:
    """Premier niveau non-None : explicite, puis token, puis baseline."""
    if explicit is not None:
        return explicit
    if token is not None:
        return token
    return baseline


def resolve(block: BaseBlock, design_system: Optional[DesignSystem] = None) -> ResolvedStyle:
    """
    Style final d'un bloc sous le design system actif (ou aucun).

    Catégorie inconnue : style vide + warning (le rendu ignore le bloc).
    """
    category = getattr(block, "type", None)
    resolver = _RESOLVERS.get(category)
    if resolver is None:
        log.warning("Catégorie de bloc inconnue %r : aucun style résolu", category)
        return ResolvedStyle(category=str(category))
    tokens = design_system.tokens if design_system is not None else None
    return ResolvedStyle(category=category, **resolver(block, tokens))


def resolve_settings(settings: DocumentSettings, design_system: Optional[DesignSystem] = None) -> ResolvedSettings:
    """Les réglages du document gagnent toujours ; la police vient du token global."""
    font = design_system.tokens.global_.font_family if design_system is not None else None
    return ResolvedSettings(
        background_color=settings.background_color,
        content_width=settings.content_width,
        font_family=resolve_field(None, font, BASE_FONT_STACK),
        preview_text=settings.preview_text or None,
    )


def hints_for(style: ResolvedStyle) -> StyleHints:
    """Style résolu → indications de rendu du contenu rich-text."""
    return StyleHints(
        text_color=style.color,
        text_align=style.text_align,
        font_size=style.font_size,
        font_family=style.font_family,
        font_weight=style.font_weight,
        line_height=style.line_height,
        list_color=style.list_color,
        list_font_family=style.list_font_family,
        blockquote_color=style.blockquote_color,
        blockquote_border_color=style.blockquote_border_color,
        blockquote_font_family=style.blockquote_font_family,
    )


# ── Par catégorie ───────────────────────────────────────────────────────────

def _tok(tokens, category: str, field: str):
    """Valeur de token, None sans design system actif."""
    if tokens is None:
        return None
    record = getattr(tokens, "global_" if category == "global" else category)
    return getattr(record, field)


def _rich_content(tokens) -> dict:
    return {
        "list_color": _tok(tokens, "list", "color"),
        "list_font_family": _tok(tokens, "list", "font_family"),
        "blockquote_color": _tok(tokens, "blockquote", "color"),
        "blockquote_border_color": _tok(tokens, "blockquote", "border_color"),
        "blockquote_font_family": _tok(tokens, "blockquote", "font_family"),
    }


def _heading(block: HeadingBlock, tokens) -> dict:
    base = BASELINE["heading"]
    return {
        "color": resolve_field(block.color, _tok(tokens, "heading", "color"), base["color"]),
        "text_align": resolve_field(block.align, None, base["text_align"]),
        "font_family": resolve_field(None, _tok(tokens, "heading", "font_family"), None),
        "font_size": HEADING_SIZES[block.level],
        "font_weight": resolve_field(None, _tok(tokens, "heading", "font_weight"), base["font_weight"]),
        "line_height": base["line_height"],
    }


def _text(block: TextBlock, tokens) -> dict:
    base = BASELINE["text"]
    return {
        "color": resolve_field(block.color, _tok(tokens, "text", "color"), base["color"]),
        "text_align": resolve_field(block.align, None, base["text_align"]),
        "font_family": resolve_field(None, _tok(tokens, "text", "font_family"), None),
        "font_size": resolve_field(None, _tok(tokens, "text", "font_size"), base["font_size"]),
        "line_height": resolve_field(None, _tok(tokens, "text", "line_height"), base["line_height"]),
        **_rich_content(tokens),
    }


def _footer(block: FooterBlock, tokens) -> dict:
    base = BASELINE["footer"]
    return {
        "color": resolve_field(block.color, _tok(tokens, "footer", "color"), base["color"]),
        "text_align": resolve_field(block.align, None, base["text_align"]),
        "font_family": resolve_field(None, _tok(tokens, "footer", "font_family"), None),
        "font_size": resolve_field(None, _tok(tokens, "footer", "font_size"), base["font_size"]),
        "line_height": base["line_height"],
        **_rich_content(tokens),
    }


def _button(block: ButtonBlock, tokens) -> dict:
    base = BASELINE["button"]
    return {
        "background_color": resolve_field(
            block.background_color, _tok(tokens, "button", "background_color"), base["background_color"]
        ),
        "text_color": resolve_field(block.text_color, _tok(tokens, "button", "text_color"), base["text_color"]),
        "border_radius": resolve_field(
            block.border_radius, _tok(tokens, "button", "border_radius"), base["border_radius"]
        ),
        "font_family": resolve_field(None, _tok(tokens, "button", "font_family"), None),
        "font_size": base["font_size"],
        "font_weight": base["font_weight"],
        "padding": base["padding"],
        "text_align": resolve_field(block.align, None, base["text_align"]),
    }


def _divider(block: DividerBlock, tokens) -> dict:
    base = BASELINE["divider"]
    return {
        "color": resolve_field(block.color, _tok(tokens, "divider", "color"), base["color"]),
        "thickness": resolve_field(block.thickness, _tok(tokens, "divider", "thickness"), base["thickness"]),
        "border_style": resolve_field(block.style, _tok(tokens, "divider", "style"), base["border_style"]),
    }


def _image(block: ImageBlock, tokens) -> dict:
    return {"text_align": resolve_field(block.align, None, BASELINE["image"]["text_align"])}


def _header(block: HeaderBlock, tokens) -> dict:
    base = BASELINE["header"]
    return {
        "color": base["color"],
        "font_family": resolve_field(None, _tok(tokens, "global", "font_family"), None),
        "font_size": base["font_size"],
        "font_weight": base["font_weight"],
    }


def _spacer(block: SpacerBlock, tokens) -> dict:
    return {"height": resolve_field(block.height, None, BASELINE["spacer"]["height"])}


def _social(block: SocialLinksBlock, tokens) -> dict:
    base = BASELINE["social-links"]
    return {
        "icon_size": resolve_field(block.icon_size, None, base["icon_size"]),
        "text_align": resolve_field(block.align, None, base["text_align"]),
        "color": base["color"],
        "background_color": base["background_color"],
    }


def _columns(block: ColumnsBlock, tokens) -> dict:
    return {"gap": resolve_field(block.gap, None, BASELINE["columns"]["gap"])}


_RESOLVERS: Dict[str, Callable[[BaseBlock, object], dict]] = {
    "heading":      _heading,
    "text":         _text,
    "image":        _image,
    "button":       _button,
    "header":       _header,
    "columns":      _columns,
    "divider":      _divider,
    "spacer":       _spacer,
    "social-links": _social,
    "footer":       _footer,
}

"""
Rendu rich-text → composants portables / HTML inline.

`to_portable_nodes` produit l'arbre de composants, `to_markup` le formate en
HTML : les deux sorties sont équivalentes par construction.

Noeuds et marks inconnus : rendus en texte brut, jamais d'exception.
"""
import logging
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from ..components import Node, node
from .model import RichTextNode, NODE_TYPES, ordered_marks, plain_text

log = logging.getLogger(__name__)

HEADING_SIZES = {1: 30, 2: 24, 3: 20}

_MARK_TAGS = {"bold": "strong", "italic": "em", "underline": "u", "strike": "s"}


class StyleHints(BaseModel):
    """Styles résolus transmis au rendu du contenu d'un bloc."""
    model_config = ConfigDict(frozen=True)

    text_color: Optional[str] = None
    text_align: Optional[str] = None
    font_size: Optional[int] = None
    font_family: Optional[str] = None
    font_weight: Optional[str] = None
    line_height: Optional[float] = None
    list_color: Optional[str] = None
    list_font_family: Optional[str] = None
    blockquote_color: Optional[str] = None
    blockquote_border_color: Optional[str] = None
    blockquote_font_family: Optional[str] = None


Child = Union[Node, str]


def to_portable_nodes(doc: RichTextNode, hints: Optional[StyleHints] = None) -> Tuple[Node, ...]:
    """Arbre rich-text → séquence de composants (un par bloc de premier niveau)."""
    hints = hints or StyleHints()
    out = []
    for child in doc.children:
        rendered = _render_block_level(child, hints)
        if rendered is not None:
            out.append(rendered)
    return tuple(out)


def to_markup(doc: RichTextNode, hints: Optional[StyleHints] = None) -> str:
    """Arbre rich-text → HTML inline (formatage de to_portable_nodes)."""
    from ..renderer.html import format_nodes
    return format_nodes(to_portable_nodes(doc, hints))


# ── Niveau bloc ─────────────────────────────────────────────────────────────

def _paragraph_style(hints: StyleHints, font_size: Optional[int] = None, font_weight: Optional[str] = None) -> dict:
    return {
        "color": hints.text_color,
        "textAlign": hints.text_align,
        "fontFamily": hints.font_family,
        "fontSize": font_size or hints.font_size or 16,
        "fontWeight": font_weight or hints.font_weight,
        "lineHeight": hints.line_height or 1.6,
        "margin": "0 0 8px 0",
    }


def _render_block_level(n: RichTextNode, hints: StyleHints) -> Optional[Child]:
    if n.type == "paragraph":
        return node("Text", {"style": _paragraph_style(hints)}, _render_inline(n.children))

    if n.type == "heading":
        level = (n.attrs or {}).get("level", 1)
        level = level if level in HEADING_SIZES else 1
        return node(
            "Heading",
            {"as": f"h{level}", "style": _paragraph_style(hints, HEADING_SIZES[level], hints.font_weight or "700")},
            _render_inline(n.children),
        )

    if n.type in ("bulletList", "orderedList"):
        tag = "ul" if n.type == "bulletList" else "ol"
        items = [_render_list_item(item, hints) for item in n.children]
        return node(tag, {"style": {
            "paddingLeft": 24,
            "margin": "0 0 8px 0",
            "color": hints.list_color or hints.text_color,
            "fontFamily": hints.list_font_family,
        }}, items)

    if n.type == "blockquote":
        inner = [_render_block_level(child, hints) for child in n.children]
        return node("blockquote", {"style": {
            "margin": "0 0 8px 0",
            "paddingLeft": 12,
            "borderLeft": f"3px solid {hints.blockquote_border_color or '#e5e7eb'}",
            "color": hints.blockquote_color or hints.text_color,
            "fontFamily": hints.blockquote_font_family,
        }}, inner)

    if n.type in ("text", "hardBreak"):
        # inline égaré au premier niveau → paragraphe implicite
        return node("Text", {"style": _paragraph_style(hints)}, _render_inline((n,)))

    log.warning("Noeud rich-text inconnu %r rendu en texte brut", n.type)
    text = plain_text(n)
    if not text:
        return None
    return node("Text", {"style": _paragraph_style(hints)}, text)


def _render_list_item(item: RichTextNode, hints: StyleHints) -> Node:
    if item.type != "listItem":
        log.warning("Enfant de liste inattendu %r rendu en texte brut", item.type)
        return node("li", {"style": {"marginBottom": 4}}, plain_text(item))
    children = []
    for child in item.children:
        if child.type == "paragraph":
            # pas de marge de paragraphe dans un item
            children.append(node("p", {"style": {"margin": 0}}, _render_inline(child.children)))
        else:
            children.append(_render_block_level(child, hints))
    return node("li", {"style": {"marginBottom": 4}}, children)


# ── Niveau inline ───────────────────────────────────────────────────────────

def _render_inline(nodes) -> Tuple[Child, ...]:
    out = []
    for n in nodes:
        if n.type == "text":
            out.append(_render_text(n))
        elif n.type == "hardBreak":
            out.append(node("br"))
        else:
            if n.type not in NODE_TYPES:
                log.warning("Noeud inline inconnu %r rendu en texte brut", n.type)
            text = plain_text(n)
            if text:
                out.append(text)
    return tuple(out)


def _render_text(n: RichTextNode) -> Child:
    marks = ordered_marks(n.marks)
    if n.marks and len(marks) != len({m.type for m in n.marks}):
        unknown = sorted({m.type for m in n.marks} - {m.type for m in marks})
        log.warning("Marks inconnues ignorées : %s", unknown)

    rendered: Child = n.text or ""
    # on enveloppe de l'intérieur vers l'extérieur
    for mark in reversed(marks):
        if mark.type == "link":
            rendered = node(
                "Link",
                {"href": mark.href, "style": {"color": "inherit", "textDecoration": "underline"}},
                rendered,
            )
        else:
            rendered = node(_MARK_TAGS[mark.type], None, rendered)
    return rendered

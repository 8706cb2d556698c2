"""
Back-end HTML statique — compatible clients email.

  - tous les styles sont inline (pas de <style>, pas de CSS externe)
  - mise en page multi-colonnes en tables (Section/Row/Column), jamais flex/grid
  - tout texte et attribut dynamique est échappé
"""
import html
from typing import Iterable, Optional

from ..components import Node, RAW_HTML, inline_css
from ..core.document import EmailDocument
from ..design.tokens import DesignSystem
from .plan import RenderPlan, project
from .tree import build_tree

DOCTYPE = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">'
)

_VOID = {"br", "hr", "img", "meta"}

_TABLE_ATTRS = 'align="center" width="100%" border="0" cellpadding="0" cellspacing="0" role="presentation"'

_PREVIEW_STYLE = "display:none;overflow:hidden;line-height:1px;opacity:0;max-height:0;max-width:0"


def render_html(document: EmailDocument, design_system: Optional[DesignSystem] = None) -> str:
    """Document → HTML complet et autonome (doctype, head, body, conteneur)."""
    return render_plan_html(project(document, design_system))


def render_plan_html(plan: RenderPlan) -> str:
    return DOCTYPE + format_node(build_tree(plan))


def format_nodes(nodes: Iterable) -> str:
    return "".join(format_node(n) for n in nodes)


def format_node(n) -> str:
    if isinstance(n, str):
        return _escape_text(n)
    if n.component == RAW_HTML:
        return n.props.get("html", "")
    formatter = _FORMATTERS.get(n.component)
    if formatter is not None:
        return formatter(n)
    return _element(n.component, n.props, n.children)


# ── Composants email ────────────────────────────────────────────────────────

def _html(n: Node) -> str:
    return _element("html", n.props, n.children)


def _head(n: Node) -> str:
    return (
        '<head><meta content="text/html; charset=UTF-8" http-equiv="Content-Type"/>'
        '<meta name="x-apple-disable-message-reformatting"/></head>'
    )


def _preview(n: Node) -> str:
    return f'<div style="{_PREVIEW_STYLE}">{format_nodes(n.children)}</div>'


def _body(n: Node) -> str:
    return _element("body", n.props, n.children)


def _container(n: Node) -> str:
    return (
        f'<table {_TABLE_ATTRS}{_style_attr(n)}><tbody><tr style="width:100%"><td>'
        f'{format_nodes(n.children)}</td></tr></tbody></table>'
    )


def _section(n: Node) -> str:
    return (
        f'<table {_TABLE_ATTRS}{_style_attr(n)}><tbody><tr><td>'
        f'{format_nodes(n.children)}</td></tr></tbody></table>'
    )


def _row(n: Node) -> str:
    return (
        f'<table {_TABLE_ATTRS}{_style_attr(n)}><tbody style="width:100%"><tr style="width:100%">'
        f'{format_nodes(n.children)}</tr></tbody></table>'
    )


def _column(n: Node) -> str:
    return _element("td", n.props, n.children)


def _text(n: Node) -> str:
    return _element("p", n.props, n.children)


def _heading(n: Node) -> str:
    props = dict(n.props)
    tag = props.pop("as", "h1")
    return _element(tag, props, n.children)


def _anchor(n: Node) -> str:
    return _element("a", {**n.props, "target": "_blank"}, n.children)


def _img(n: Node) -> str:
    return _element("img", n.props, ())


def _hr(n: Node) -> str:
    return _element("hr", n.props, ())


_FORMATTERS = {
    "Html":      _html,
    "Head":      _head,
    "Preview":   _preview,
    "Body":      _body,
    "Container": _container,
    "Section":   _section,
    "Row":       _row,
    "Column":    _column,
    "Text":      _text,
    "Heading":   _heading,
    "Button":    _anchor,
    "Link":      _anchor,
    "Img":       _img,
    "Hr":        _hr,
}


# ── Helpers ─────────────────────────────────────────────────────────────────

def _element(tag: str, props: dict, children) -> str:
    attrs = _attributes(props)
    if tag in _VOID:
        return f"<{tag}{attrs}/>"
    return f"<{tag}{attrs}>{format_nodes(children)}</{tag}>"


def _attributes(props: dict) -> str:
    parts = []
    for key, value in props.items():
        if value is None or value is False:
            continue
        if key == "style":
            css = inline_css(value)
            if css:
                parts.append(f' style="{_escape_attr(css)}"')
        elif value is True:
            parts.append(f" {key}")
        else:
            parts.append(f' {key}="{_escape_attr(value)}"')
    return "".join(parts)


def _style_attr(n: Node) -> str:
    css = inline_css(n.style)
    return f' style="{_escape_attr(css)}"' if css else ""


def _escape_text(text: str) -> str:
    return html.escape(text, quote=False).replace("\u00a0", "&nbsp;")


def _escape_attr(value) -> str:
    return html.escape(str(value), quote=True)

"""Modèle rich-text : parse/serialize canoniques + rendu portable/HTML."""
from .model import (
    RichTextNode,
    Mark,
    RichTextError,
    NODE_TYPES,
    MARK_ORDER,
    parse,
    serialize,
    create_empty_content,
    plain_text,
    ordered_marks,
)
from .render import StyleHints, to_portable_nodes, to_markup

__all__ = [
    "RichTextNode", "Mark", "RichTextError", "NODE_TYPES", "MARK_ORDER",
    "parse", "serialize", "create_empty_content", "plain_text",
    "ordered_marks",
    "StyleHints", "to_portable_nodes", "to_markup",
]

"""
email_builder — éditeur d'emails par blocs.

Document typé → styles résolus (design system) → preview / HTML email /
source TSX / JSON.

Usage:
    >>> from email_builder import new_document, add_block, render_html
    >>> doc = add_block(new_document("Newsletter"), "heading")
    >>> html = render_html(doc)
"""
from .richtext import RichTextNode, parse, serialize, create_empty_content, to_markup, to_portable_nodes
from .blocks import BlockUnion, BLOCK_REGISTRY, BLOCK_TYPES
from .core import (
    EmailDocument,
    DocumentSettings,
    new_document,
    create_block,
    add_block,
    update_block,
    delete_block,
    move_block,
    EditHistory,
)
from .design import DesignSystem, DesignSystemStore, ResolvedStyle, resolve, resolve_field
from .renderer import project, render_html, render_source, render_preview, export_html
from .codec import export_json, import_json, DocumentImportError

__version__ = "0.3.0"

__all__ = [
    "RichTextNode", "parse", "serialize", "create_empty_content", "to_markup", "to_portable_nodes",
    "BlockUnion", "BLOCK_REGISTRY", "BLOCK_TYPES",
    "EmailDocument", "DocumentSettings", "new_document",
    "create_block", "add_block", "update_block", "delete_block", "move_block",
    "EditHistory",
    "DesignSystem", "DesignSystemStore", "ResolvedStyle", "resolve", "resolve_field",
    "project", "render_html", "render_source", "render_preview", "export_html",
    "export_json", "import_json", "DocumentImportError",
]

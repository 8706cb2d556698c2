"""Core : document, opérations pures, historique."""
from .document import EmailDocument, DocumentSettings, new_document
from .operations import (
    InvalidBlockUpdate,
    create_block,
    find_block,
    add_block,
    update_block,
    delete_block,
    move_block,
    update_settings,
    rename_document,
)
from .history import EditHistory, EditKind

__all__ = [
    "EmailDocument", "DocumentSettings", "new_document",
    "InvalidBlockUpdate", "create_block", "find_block",
    "add_block", "update_block", "delete_block", "move_block",
    "update_settings", "rename_document",
    "EditHistory", "EditKind",
]

"""
Opérations pures sur le document : chaque appel retourne un nouveau document.

    doc = new_document()
    doc = add_block(doc, "heading")
    doc = update_block(doc, doc.blocks[0].id, {"color": "#ff0000"})
    doc = move_block(doc, doc.blocks[0].id, "down")   # no-op : dernier bloc
"""
import logging
from typing import Any, Dict, Literal, Optional

from pydantic import ValidationError

from ..blocks import BLOCK_REGISTRY, BaseBlock, ColumnsBlock
from .document import EmailDocument, DocumentSettings

log = logging.getLogger(__name__)

Direction = Literal["up", "down"]

_IDENTITY_FIELDS = ("id", "type")


class InvalidBlockUpdate(ValueError):
    """Patch refusé : champ inconnu, identité modifiée ou valeur invalide."""


def create_block(block_type: str) -> BaseBlock:
    """Bloc neuf, valeurs par défaut de la catégorie, id fraîchement généré."""
    block_cls = BLOCK_REGISTRY.get(block_type)
    if block_cls is None:
        raise ValueError(f"Type de bloc inconnu : {block_type!r}. Registry : {list(BLOCK_REGISTRY)}")
    return block_cls.default()


def find_block(doc: EmailDocument, block_id: str) -> Optional[BaseBlock]:
    index = doc.index_of(block_id)
    return doc.blocks[index] if index >= 0 else None


def add_block(doc: EmailDocument, block_type: str) -> EmailDocument:
    """Ajoute en fin de document un bloc par défaut du type demandé."""
    block = create_block(block_type)
    return doc.model_copy(update={"blocks": doc.blocks + (block,)})


def update_block(doc: EmailDocument, block_id: str, fields: Dict[str, Any]) -> EmailDocument:
    """
    Fusionne `fields` dans le bloc `block_id` (no-op si absent).

    Les clés acceptent le nom Python ou l'alias JSON (backgroundColor).
    Une valeur None retire la surcharge explicite d'un champ stylistique.

    Raises:
        InvalidBlockUpdate: champ inconnu, id/type modifiés, résultat invalide
    """
    index = doc.index_of(block_id)
    if index < 0:
        log.debug("update_block : bloc %s absent, document inchangé", block_id)
        return doc

    block = doc.blocks[index]
    block_cls = type(block)
    patch = _normalize_patch(block_cls, fields)

    data = block.model_dump()
    data.update(patch)
    if isinstance(block, ColumnsBlock) and "columns" in patch and "content" not in patch:
        data["content"] = _resize_slots(data["content"], patch["columns"])

    try:
        updated = block_cls.model_validate(data)
        blocks = doc.blocks[:index] + (updated,) + doc.blocks[index + 1:]
        return EmailDocument(name=doc.name, blocks=blocks, settings=doc.settings)
    except ValidationError as e:
        raise InvalidBlockUpdate(f"mise à jour invalide du bloc {block_id!r} : {e}") from e


def delete_block(doc: EmailDocument, block_id: str) -> EmailDocument:
    if doc.index_of(block_id) < 0:
        return doc
    return doc.model_copy(update={"blocks": tuple(b for b in doc.blocks if b.id != block_id)})


def move_block(doc: EmailDocument, block_id: str, direction: Direction) -> EmailDocument:
    """Échange le bloc avec son voisin ; no-op aux bornes ou si id absent."""
    if direction not in ("up", "down"):
        raise ValueError(f"direction invalide : {direction!r}")
    index = doc.index_of(block_id)
    if index < 0:
        return doc
    target = index - 1 if direction == "up" else index + 1
    if target < 0 or target >= len(doc.blocks):
        return doc

    blocks = list(doc.blocks)
    blocks[index], blocks[target] = blocks[target], blocks[index]
    return doc.model_copy(update={"blocks": tuple(blocks)})


def update_settings(doc: EmailDocument, fields: Dict[str, Any]) -> EmailDocument:
    """Fusionne des réglages globaux (backgroundColor, contentWidth, previewText)."""
    patch = _normalize_patch(DocumentSettings, fields)
    data = doc.settings.model_dump()
    data.update(patch)
    try:
        settings = DocumentSettings.model_validate(data)
    except ValidationError as e:
        raise InvalidBlockUpdate(f"réglages invalides : {e}") from e
    return doc.model_copy(update={"settings": settings})


def rename_document(doc: EmailDocument, name: str) -> EmailDocument:
    return doc.model_copy(update={"name": name})


# ── Helpers ─────────────────────────────────────────────────────────────────

def _normalize_patch(model_cls, fields: Dict[str, Any]) -> Dict[str, Any]:
    """Alias JSON → noms Python ; refuse les champs inconnus et l'identité."""
    by_alias = {info.alias or name: name for name, info in model_cls.model_fields.items()}
    patch = {}
    for key, value in fields.items():
        name = key if key in model_cls.model_fields else by_alias.get(key)
        if name is None:
            raise InvalidBlockUpdate(f"champ inconnu pour {model_cls.__name__} : {key!r}")
        if name in _IDENTITY_FIELDS:
            raise InvalidBlockUpdate(f"le champ {name!r} n'est pas modifiable")
        patch[name] = value
    return patch


def _resize_slots(content, columns: int):
    slots = list(content)[:columns]
    while len(slots) < columns:
        slots.append([])
    return slots

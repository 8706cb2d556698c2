"""
Forme persistée d'un template sauvegardé (le stockage lui-même est externe).

    {"id": "...", "name": "...", "document": {...}, "updatedAt": 1767225600000}
"""
import time
import uuid
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from .blocks.base import MODEL_CONFIG
from .core.document import EmailDocument


def now_ms() -> int:
    return int(time.time() * 1000)


class SavedTemplate(BaseModel):
    model_config = MODEL_CONFIG

    id: str
    name: str
    document: EmailDocument
    updated_at: int = Field(..., ge=0, description="epoch en millisecondes")

    @classmethod
    def snapshot(cls, document: EmailDocument, template_id: Optional[str] = None) -> "SavedTemplate":
        """Nouvelle sauvegarde (ou nouvelle version de `template_id`) datée de maintenant."""
        return cls(
            id=template_id or uuid.uuid4().hex,
            name=document.name,
            document=document,
            updated_at=now_ms(),
        )


def most_recent(templates: Iterable[SavedTemplate]) -> Optional[SavedTemplate]:
    """Template le plus récemment modifié (chargé au démarrage), None si aucun."""
    return max(templates, key=lambda t: t.updated_at, default=None)

"""
Document email — séquence ordonnée de blocs + réglages globaux.

Le document est immuable : toute modification produit un nouveau document
(voir core.operations), ce qui permet l'historique et le diff externes.
"""
from typing import TYPE_CHECKING, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from ..blocks import BlockUnion, ColumnsBlock
from ..blocks.base import MODEL_CONFIG

if TYPE_CHECKING:
    from ..design.tokens import DesignSystem

DEFAULT_NAME = "Untitled Email"
DEFAULT_BACKGROUND = "#f4f4f5"
DEFAULT_CONTENT_WIDTH = 600


class DocumentSettings(BaseModel):
    """Réglages globaux du conteneur (fond, largeur, texte de preview)."""
    model_config = MODEL_CONFIG

    background_color: str
    content_width: int = Field(..., ge=1)
    preview_text: Optional[str] = None


class EmailDocument(BaseModel):
    """Document complet : nom + blocs + réglages."""
    model_config = MODEL_CONFIG

    name: str
    blocks: Tuple[BlockUnion, ...]
    settings: DocumentSettings

    @model_validator(mode="after")
    def _unique_block_ids(self) -> "EmailDocument":
        seen = set()
        for block in self.iter_blocks():
            if block.id in seen:
                raise ValueError(f"id de bloc dupliqué : {block.id!r}")
            seen.add(block.id)
        return self

    def iter_blocks(self):
        """Tous les blocs, y compris ceux imbriqués dans les colonnes."""
        for block in self.blocks:
            yield block
            if isinstance(block, ColumnsBlock):
                yield from block.inner_blocks()

    def index_of(self, block_id: str) -> int:
        """Position d'un bloc de premier niveau, -1 si absent."""
        for i, block in enumerate(self.blocks):
            if block.id == block_id:
                return i
        return -1


def new_document(name: str = DEFAULT_NAME, design_system: Optional["DesignSystem"] = None) -> EmailDocument:
    """
    Document vide ("nouveau").

    Si un design system est fourni, ses tokens `global` initialisent le fond
    et la largeur du conteneur.
    """
    background, width = DEFAULT_BACKGROUND, DEFAULT_CONTENT_WIDTH
    if design_system is not None:
        background = design_system.tokens.global_.background_color
        width = design_system.tokens.global_.content_width
    return EmailDocument(
        name=name,
        blocks=(),
        settings=DocumentSettings(background_color=background, content_width=width),
    )

"""
Bloc de base — identité + configuration commune (immuable, clés camelCase).

Les champs stylistiques (color, align…) sont optionnels : None = pas de
surcharge explicite, le resolver retombe sur le token puis la baseline.
"""
import uuid
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from ..richtext.model import RichTextNode, parse, serialize

MODEL_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
)

Align = Literal["left", "center", "right"]


def new_block_id() -> str:
    """Identifiant opaque, stable pour toute la vie du bloc."""
    return uuid.uuid4().hex


def _coerce_rich_text(value):
    # un RichTextNode déjà construit repasse aussi par les invariants
    return parse(value)


# Contenu rich-text : forme canonique en entrée/sortie, RichTextNode en mémoire
RichText = Annotated[
    RichTextNode,
    BeforeValidator(_coerce_rich_text),
    PlainSerializer(serialize, return_type=dict),
]


class BaseBlock(BaseModel):
    """Bloc de base (classe parente de tous les blocs)."""
    model_config = MODEL_CONFIG

    id: str = Field(..., min_length=1)
    type: str

    @classmethod
    def default(cls) -> "BaseBlock":
        """Instance complète avec les valeurs par défaut de la catégorie."""
        raise NotImplementedError

"""
Bloc Columns — 2 ou 3 colonnes, chacune portant une liste de blocs.

Un seul niveau d'imbrication : une colonne ne peut pas contenir de bloc
columns. Le contenu des colonnes n'est pas rendu (emplacements vides).
"""
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import Field, model_validator

from .base import BaseBlock, new_block_id
from .heading import HeadingBlock
from .text import TextBlock
from .image import ImageBlock
from .button import ButtonBlock
from .header import HeaderBlock
from .divider import DividerBlock
from .spacer import SpacerBlock
from .social import SocialLinksBlock
from .footer import FooterBlock

# Blocs admis dans une colonne (tout sauf columns)
InnerBlockUnion = Annotated[
    Union[
        HeadingBlock,
        TextBlock,
        ImageBlock,
        ButtonBlock,
        HeaderBlock,
        DividerBlock,
        SpacerBlock,
        SocialLinksBlock,
        FooterBlock,
    ],
    Field(discriminator="type"),
]


class ColumnsBlock(BaseBlock):
    type: Literal["columns"] = "columns"
    columns: Literal[2, 3]
    gap: Optional[int] = Field(default=None, ge=0)
    content: Tuple[Tuple[InnerBlockUnion, ...], ...]

    @model_validator(mode="after")
    def _one_slot_per_column(self) -> "ColumnsBlock":
        if len(self.content) != self.columns:
            raise ValueError(
                f"columns={self.columns} mais {len(self.content)} emplacement(s) de contenu"
            )
        return self

    @classmethod
    def default(cls) -> "ColumnsBlock":
        return cls(id=new_block_id(), columns=2, gap=16, content=((), ()))

    def inner_blocks(self):
        """Blocs imbriqués, colonne par colonne."""
        for slot in self.content:
            yield from slot

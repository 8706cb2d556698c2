"""Bloc Heading — titre rich-text niveau 1 à 3."""
from typing import Literal, Optional
from .base import BaseBlock, Align, RichText, new_block_id
from ..richtext.model import create_empty_content


class HeadingBlock(BaseBlock):
    type: Literal["heading"] = "heading"
    content: RichText
    level: Literal[1, 2, 3] = 1
    align: Optional[Align] = None
    color: Optional[str] = None

    @classmethod
    def default(cls) -> "HeadingBlock":
        return cls(
            id=new_block_id(),
            content=create_empty_content("Your Heading Here"),
            level=1,
            align="center",
            color="#000000",
        )

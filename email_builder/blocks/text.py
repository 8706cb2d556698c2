"""Bloc Text — paragraphe(s) rich-text."""
from typing import Literal, Optional
from .base import BaseBlock, Align, RichText, new_block_id
from ..richtext.model import create_empty_content


class TextBlock(BaseBlock):
    type: Literal["text"] = "text"
    content: RichText
    align: Optional[Align] = None
    color: Optional[str] = None

    @classmethod
    def default(cls) -> "TextBlock":
        return cls(
            id=new_block_id(),
            content=create_empty_content(
                "Enter your text here. You can style this text using the properties panel."
            ),
            align="center",
            color="#374151",
        )

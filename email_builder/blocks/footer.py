"""Bloc Footer — mentions légales / désinscription en rich-text."""
from typing import Literal, Optional
from .base import BaseBlock, Align, RichText, new_block_id
from ..richtext.model import create_empty_content


class FooterBlock(BaseBlock):
    type: Literal["footer"] = "footer"
    content: RichText
    align: Optional[Align] = None
    color: Optional[str] = None

    @classmethod
    def default(cls) -> "FooterBlock":
        return cls(
            id=new_block_id(),
            content=create_empty_content(
                "© 2026 Your Company. All rights reserved.\nUnsubscribe | Privacy Policy"
            ),
            align="center",
            color="#6b7280",
        )

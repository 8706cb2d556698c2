"""Bloc Button — lien stylé (call-to-action)."""
from typing import Literal, Optional
from pydantic import Field
from .base import BaseBlock, Align, new_block_id


class ButtonBlock(BaseBlock):
    type: Literal["button"] = "button"
    text: str
    url: str
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    border_radius: Optional[int] = Field(default=None, ge=0)
    align: Optional[Align] = None

    @classmethod
    def default(cls) -> "ButtonBlock":
        return cls(
            id=new_block_id(),
            text="Click Here",
            url="https://example.com",
            background_color="#000000",
            text_color="#ffffff",
            border_radius=4,
            align="center",
        )

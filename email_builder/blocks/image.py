"""Bloc Image — image seule, placeholder si pas de source."""
from typing import Literal, Optional
from pydantic import Field
from .base import BaseBlock, Align, new_block_id


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    src: str
    alt: str
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    align: Optional[Align] = None

    @classmethod
    def default(cls) -> "ImageBlock":
        return cls(
            id=new_block_id(),
            src="",
            alt="Image description",
            width=600,
            height=300,
            align="center",
        )

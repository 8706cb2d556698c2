"""Bloc Spacer — espace vertical."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, new_block_id


class SpacerBlock(BaseBlock):
    type: Literal["spacer"] = "spacer"
    height: int = Field(..., ge=0)

    @classmethod
    def default(cls) -> "SpacerBlock":
        return cls(id=new_block_id(), height=32)

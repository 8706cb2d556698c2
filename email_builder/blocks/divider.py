"""Bloc Divider — ligne horizontale."""
from typing import Literal, Optional
from pydantic import Field
from .base import BaseBlock, new_block_id

DividerStyle = Literal["solid", "dashed", "dotted"]


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"
    color: Optional[str] = None
    thickness: Optional[int] = Field(default=None, ge=0)
    style: Optional[DividerStyle] = None

    @classmethod
    def default(cls) -> "DividerBlock":
        return cls(id=new_block_id(), color="#e5e7eb", thickness=1, style="solid")

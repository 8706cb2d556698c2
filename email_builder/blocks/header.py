"""Bloc Header — logo + nom de marque + badge optionnel."""
from typing import Literal
from .base import BaseBlock, new_block_id


class HeaderBlock(BaseBlock):
    type: Literal["header"] = "header"
    logo_src: str
    brand_name: str
    show_badge: bool

    @classmethod
    def default(cls) -> "HeaderBlock":
        return cls(id=new_block_id(), logo_src="", brand_name="Your Brand", show_badge=True)

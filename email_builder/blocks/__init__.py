"""
Blocs — exports publics + BlockUnion discriminée par `type`.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock, Align, RichText, new_block_id
from .heading import HeadingBlock
from .text import TextBlock
from .image import ImageBlock
from .button import ButtonBlock
from .header import HeaderBlock
from .columns import ColumnsBlock, InnerBlockUnion
from .divider import DividerBlock, DividerStyle
from .spacer import SpacerBlock
from .social import SocialLinksBlock, SocialLink, SocialPlatform, SOCIAL_PLATFORMS
from .footer import FooterBlock

# Union discriminée par type — utilisable dans Pydantic avec discriminator
BlockUnion = Annotated[
    Union[
        HeadingBlock,
        TextBlock,
        ImageBlock,
        ButtonBlock,
        HeaderBlock,
        ColumnsBlock,
        DividerBlock,
        SpacerBlock,
        SocialLinksBlock,
        FooterBlock,
    ],
    Field(discriminator="type"),
]

# Registry catégorie → classe (ordre de la palette de blocs)
BLOCK_REGISTRY: dict = {
    "heading":      HeadingBlock,
    "text":         TextBlock,
    "image":        ImageBlock,
    "button":       ButtonBlock,
    "header":       HeaderBlock,
    "columns":      ColumnsBlock,
    "divider":      DividerBlock,
    "spacer":       SpacerBlock,
    "social-links": SocialLinksBlock,
    "footer":       FooterBlock,
}

BLOCK_TYPES = tuple(BLOCK_REGISTRY)

# Catégories dont le contenu est rich-text (éditables en place dans la preview)
RICH_TEXT_TYPES = ("heading", "text", "footer")

__all__ = [
    "BaseBlock", "Align", "RichText", "new_block_id",
    "HeadingBlock", "TextBlock", "ImageBlock", "ButtonBlock", "HeaderBlock",
    "ColumnsBlock", "InnerBlockUnion",
    "DividerBlock", "DividerStyle", "SpacerBlock",
    "SocialLinksBlock", "SocialLink", "SocialPlatform", "SOCIAL_PLATFORMS",
    "FooterBlock",
    "BlockUnion", "BLOCK_REGISTRY", "BLOCK_TYPES", "RICH_TEXT_TYPES",
]

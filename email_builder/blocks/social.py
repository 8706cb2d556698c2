"""Bloc Social Links — icônes vers les réseaux sociaux."""
from typing import Literal, Optional, Tuple
from pydantic import BaseModel, Field
from .base import BaseBlock, Align, MODEL_CONFIG, new_block_id

SocialPlatform = Literal["twitter", "facebook", "instagram", "linkedin", "youtube"]

SOCIAL_PLATFORMS = ("twitter", "facebook", "instagram", "linkedin", "youtube")


class SocialLink(BaseModel):
    model_config = MODEL_CONFIG

    platform: SocialPlatform
    url: str


class SocialLinksBlock(BaseBlock):
    type: Literal["social-links"] = "social-links"
    links: Tuple[SocialLink, ...]
    icon_size: Optional[int] = Field(default=None, ge=1)
    align: Optional[Align] = None

    @classmethod
    def default(cls) -> "SocialLinksBlock":
        return cls(
            id=new_block_id(),
            links=(
                SocialLink(platform="twitter", url="https://twitter.com"),
                SocialLink(platform="facebook", url="https://facebook.com"),
                SocialLink(platform="instagram", url="https://instagram.com"),
            ),
            icon_size=24,
            align="center",
        )

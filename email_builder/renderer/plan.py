"""
Plan de rendu résolu — entrée commune des back-ends.

`project()` résout une fois le style de chaque bloc ; preview, HTML et
source formatent ensuite ce même plan, ils ne relisent jamais les tokens.
"""
import logging
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..blocks import BLOCK_REGISTRY, BaseBlock
from ..core.document import EmailDocument
from ..design.resolver import ResolvedSettings, ResolvedStyle, resolve, resolve_settings
from ..design.tokens import DesignSystem

log = logging.getLogger(__name__)


class PlannedBlock(BaseModel):
    """Un bloc prêt à formater : catégorie, position, style résolu, contenu."""
    model_config = ConfigDict(frozen=True)

    category: str
    position: int
    style: ResolvedStyle
    block: BaseBlock


class RenderPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    settings: ResolvedSettings
    blocks: Tuple[PlannedBlock, ...] = ()


def project(document: EmailDocument, design_system: Optional[DesignSystem] = None) -> RenderPlan:
    """
    (document, design system actif) → plan de rendu.

    Les blocs de catégorie inconnue sont écartés du plan (warning).
    """
    planned = []
    for position, block in enumerate(document.blocks):
        category = getattr(block, "type", None)
        if category not in BLOCK_REGISTRY:
            log.warning("Bloc %s de catégorie inconnue %r ignoré au rendu", getattr(block, "id", "?"), category)
            continue
        planned.append(PlannedBlock(
            category=category,
            position=position,
            style=resolve(block, design_system),
            block=block,
        ))
    return RenderPlan(
        settings=resolve_settings(document.settings, design_system),
        blocks=tuple(planned),
    )

"""Design systems : tokens, presets, store, resolver de styles."""
from .tokens import (
    DesignSystem,
    DesignSystemTokens,
    EmailFontFamily,
    FontWeight,
    DEFAULT_FONT,
    DEFAULT_TOKENS,
)
from .presets import PRESET_DESIGN_SYSTEMS, PRESET_IDS, is_preset, get_preset
from .store import DesignSystemStore
from .resolver import (
    ResolvedStyle,
    ResolvedSettings,
    BASE_FONT_STACK,
    resolve_field,
    resolve,
    resolve_settings,
    hints_for,
)

__all__ = [
    "DesignSystem", "DesignSystemTokens", "EmailFontFamily", "FontWeight",
    "DEFAULT_FONT", "DEFAULT_TOKENS",
    "PRESET_DESIGN_SYSTEMS", "PRESET_IDS", "is_preset", "get_preset",
    "DesignSystemStore",
    "ResolvedStyle", "ResolvedSettings", "BASE_FONT_STACK",
    "resolve_field", "resolve", "resolve_settings", "hints_for",
]

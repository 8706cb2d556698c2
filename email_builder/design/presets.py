"""
Presets de design system — liste figée, en lecture seule.

Chaque preset est un ensemble cohérent de tokens (même esprit que les style
presets du composer : un preset = des règles qui fonctionnent ensemble) :
  - default  → neutre, noir sur gris clair
  - minimal  → typographie fine, boutons carrés, beaucoup de blanc
  - bold     → contrastes forts, boutons très arrondis
  - elegant  → serif, tons chauds
  - dark     → fond sombre, texte clair
Pour personnaliser un preset : le dupliquer.
"""
from typing import Tuple

from .tokens import DesignSystem, DEFAULT_TOKENS

_SERIF = "Georgia, Times New Roman, serif"
_VERDANA = "Verdana, Geneva, sans-serif"
_TAHOMA = "Tahoma, sans-serif"


def _preset(preset_id: str, name: str, overrides: dict) -> DesignSystem:
    return DesignSystem(id=preset_id, name=name, tokens=DEFAULT_TOKENS.merged(overrides))


PRESET_DESIGN_SYSTEMS: Tuple[DesignSystem, ...] = (
    _preset("preset-default", "Default", {}),
    _preset("preset-minimal", "Minimal", {
        "global":  {"backgroundColor": "#ffffff", "contentWidth": 560, "fontFamily": _VERDANA},
        "heading": {"color": "#18181b", "fontFamily": _VERDANA, "fontWeight": "500"},
        "text":    {"color": "#3f3f46", "fontFamily": _VERDANA, "fontSize": 15, "lineHeight": 1.8},
        "button":  {"backgroundColor": "#18181b", "textColor": "#ffffff", "borderRadius": 0, "fontFamily": _VERDANA},
        "divider": {"color": "#f4f4f5", "thickness": 1, "style": "solid"},
        "footer":  {"color": "#a1a1aa", "fontFamily": _VERDANA, "fontSize": 12},
        "list":    {"color": "#3f3f46", "fontFamily": _VERDANA},
    }),
    _preset("preset-bold", "Bold", {
        "global":     {"backgroundColor": "#fef3c7", "contentWidth": 640},
        "heading":    {"color": "#7c2d12", "fontWeight": "800"},
        "text":       {"color": "#1c1917", "fontSize": 17},
        "button":     {"backgroundColor": "#ea580c", "textColor": "#ffffff", "borderRadius": 24},
        "divider":    {"color": "#ea580c", "thickness": 3, "style": "solid"},
        "blockquote": {"color": "#7c2d12", "borderColor": "#ea580c"},
    }),
    _preset("preset-elegant", "Elegant", {
        "global":     {"backgroundColor": "#faf8f5", "fontFamily": _SERIF},
        "heading":    {"color": "#3f2e1e", "fontFamily": _SERIF, "fontWeight": "600"},
        "text":       {"color": "#44403c", "fontFamily": _SERIF, "lineHeight": 1.7},
        "button":     {"backgroundColor": "#b0906f", "textColor": "#ffffff", "borderRadius": 2, "fontFamily": _SERIF},
        "divider":    {"color": "#d6c7b5", "thickness": 1, "style": "dotted"},
        "footer":     {"color": "#8a7968", "fontFamily": _SERIF, "fontSize": 13},
        "blockquote": {"color": "#57534e", "borderColor": "#b0906f", "fontFamily": _SERIF},
        "list":       {"color": "#44403c", "fontFamily": _SERIF},
    }),
    _preset("preset-dark", "Dark", {
        "global":     {"backgroundColor": "#18181b", "fontFamily": _TAHOMA},
        "heading":    {"color": "#fafafa", "fontFamily": _TAHOMA},
        "text":       {"color": "#e4e4e7", "fontFamily": _TAHOMA},
        "button":     {"backgroundColor": "#6366f1", "textColor": "#ffffff", "borderRadius": 8, "fontFamily": _TAHOMA},
        "divider":    {"color": "#3f3f46", "thickness": 1, "style": "solid"},
        "footer":     {"color": "#a1a1aa", "fontFamily": _TAHOMA},
        "blockquote": {"color": "#d4d4d8", "borderColor": "#6366f1", "fontFamily": _TAHOMA},
        "list":       {"color": "#e4e4e7", "fontFamily": _TAHOMA},
    }),
)

PRESET_IDS = frozenset(p.id for p in PRESET_DESIGN_SYSTEMS)


def is_preset(design_system_id: str) -> bool:
    return design_system_id in PRESET_IDS


def get_preset(design_system_id: str) -> DesignSystem | None:
    for preset in PRESET_DESIGN_SYSTEMS:
        if preset.id == design_system_id:
            return preset
    return None

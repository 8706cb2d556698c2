"""
Tokens de design system — un sous-record par catégorie de bloc.

Forme fixe, identique pour les presets et les design systems utilisateur :
global, heading, text, button, divider, footer, blockquote, list.
"""
from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

from ..blocks.base import MODEL_CONFIG
from ..blocks.divider import DividerStyle

# Polices "email-safe"
EmailFontFamily = Literal[
    "Arial, Helvetica, sans-serif",
    "Georgia, Times New Roman, serif",
    "Verdana, Geneva, sans-serif",
    "Trebuchet MS, sans-serif",
    "Courier New, monospace",
    "Tahoma, sans-serif",
]

FontWeight = Literal["400", "500", "600", "700", "800"]


class GlobalTokens(BaseModel):
    model_config = MODEL_CONFIG

    background_color: str
    content_width: int = Field(..., ge=400, le=800)
    font_family: EmailFontFamily


class HeadingTokens(BaseModel):
    model_config = MODEL_CONFIG

    color: str
    font_family: EmailFontFamily
    font_weight: FontWeight


class TextTokens(BaseModel):
    model_config = MODEL_CONFIG

    color: str
    font_family: EmailFontFamily
    font_size: int = Field(..., ge=12, le=24)
    line_height: float = Field(..., ge=1, le=2.5)


class ButtonTokens(BaseModel):
    model_config = MODEL_CONFIG

    background_color: str
    text_color: str
    border_radius: int = Field(..., ge=0, le=50)
    font_family: EmailFontFamily


class DividerTokens(BaseModel):
    model_config = MODEL_CONFIG

    color: str
    thickness: int = Field(..., ge=1, le=10)
    style: DividerStyle


class FooterTokens(BaseModel):
    model_config = MODEL_CONFIG

    color: str
    font_family: EmailFontFamily
    font_size: int = Field(..., ge=10, le=18)


class BlockquoteTokens(BaseModel):
    model_config = MODEL_CONFIG

    color: str
    border_color: str
    font_family: EmailFontFamily


class ListTokens(BaseModel):
    model_config = MODEL_CONFIG

    color: str
    font_family: EmailFontFamily


class DesignSystemTokens(BaseModel):
    """Record complet — un sous-record par catégorie."""
    model_config = MODEL_CONFIG

    # `global` est un mot réservé Python
    global_: GlobalTokens = Field(..., alias="global")
    heading: HeadingTokens
    text: TextTokens
    button: ButtonTokens
    divider: DividerTokens
    footer: FooterTokens
    blockquote: BlockquoteTokens
    list: ListTokens

    def merged(self, partial: Dict[str, Any]) -> "DesignSystemTokens":
        """
        Fusion profonde d'un patch partiel ({"heading": {"color": "#f00"}}).
        Retourne un nouveau record validé (ValidationError si invalide).
        """
        data = self.model_dump(by_alias=True)
        for category, values in (partial or {}).items():
            if category not in data:
                raise ValueError(f"catégorie de tokens inconnue : {category!r}")
            if not isinstance(values, dict):
                raise ValueError(f"tokens {category!r} : objet attendu")
            sub = _canonical_keys(type(self).model_fields, category)
            data[category] = {**data[category], **{sub.get(k, k): v for k, v in values.items()}}
        return type(self).model_validate(data)


class DesignSystem(BaseModel):
    """Design system nommé (preset ou utilisateur)."""
    model_config = MODEL_CONFIG

    id: str
    name: str
    tokens: DesignSystemTokens


def _canonical_keys(fields, category: str) -> Dict[str, str]:
    """snake_case → alias camelCase pour un sous-record (les deux sont acceptés)."""
    name = "global_" if category == "global" else category
    sub_model = fields[name].annotation
    return {field: info.alias or field for field, info in sub_model.model_fields.items()}


DEFAULT_FONT = "Arial, Helvetica, sans-serif"

# Baseline de création d'un design system utilisateur
DEFAULT_TOKENS = DesignSystemTokens.model_validate({
    "global":     {"backgroundColor": "#f4f4f5", "contentWidth": 600, "fontFamily": DEFAULT_FONT},
    "heading":    {"color": "#111827", "fontFamily": DEFAULT_FONT, "fontWeight": "700"},
    "text":       {"color": "#374151", "fontFamily": DEFAULT_FONT, "fontSize": 16, "lineHeight": 1.6},
    "button":     {"backgroundColor": "#000000", "textColor": "#ffffff", "borderRadius": 4, "fontFamily": DEFAULT_FONT},
    "divider":    {"color": "#e5e7eb", "thickness": 1, "style": "solid"},
    "footer":     {"color": "#6b7280", "fontFamily": DEFAULT_FONT, "fontSize": 14},
    "blockquote": {"color": "#4b5563", "borderColor": "#d1d5db", "fontFamily": DEFAULT_FONT},
    "list":       {"color": "#374151", "fontFamily": DEFAULT_FONT},
})

"""
Arbre de composants portable — représentation intermédiaire commune aux back-ends.

Un Node décrit un appel de composant déclaratif (Section, Row, Text, Button…)
ou un élément brut (p, ul, strong…). Le back-end HTML et le back-end source
formatent le même arbre : ils ne contiennent aucune logique métier.

    Node("Text", {"style": {"fontSize": 16}}, ("Hello",))
"""
import re
from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# Composants "email" (idiome portable) — tout le reste est un élément brut
EMAIL_COMPONENTS = (
    "Html", "Head", "Preview", "Body", "Container",
    "Section", "Row", "Column", "Text", "Heading",
    "Button", "Img", "Hr", "Link",
)

# Contenu HTML inséré tel quel (icônes SVG) — commentaire côté source
RAW_HTML = "RawHtml"

# Propriétés CSS sans unité (même règle que le moteur de style React)
_UNITLESS = {
    "lineHeight", "fontWeight", "opacity", "zIndex", "flex",
    "flexGrow", "flexShrink", "order", "orphans", "widows",
}


class Node(BaseModel):
    """Noeud de l'arbre de composants (immuable)."""
    model_config = ConfigDict(frozen=True)

    component: str
    props: Dict[str, Any] = Field(default_factory=dict)
    children: Tuple[Union["Node", str], ...] = ()

    @property
    def style(self) -> Dict[str, Any]:
        return self.props.get("style") or {}

    def walk(self):
        """Parcours préfixe de l'arbre (noeuds uniquement, pas les textes)."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.walk()


def node(component: str, props: Dict[str, Any] | None = None, *children) -> Node:
    """Raccourci de construction — les styles à None sont retirés."""
    props = dict(props or {})
    if "style" in props:
        props["style"] = clean_style(props["style"])
        if not props["style"]:
            del props["style"]
    flat = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(c for c in child if c is not None)
        else:
            flat.append(child)
    return Node(component=component, props=props, children=tuple(flat))


def clean_style(style: Dict[str, Any] | None) -> Dict[str, Any]:
    """Retire les entrées None en conservant l'ordre d'insertion."""
    return {k: v for k, v in (style or {}).items() if v is not None}


# ── Conversion style → CSS inline ───────────────────────────────────────────

def css_property(name: str) -> str:
    """camelCase → kebab-case (backgroundColor → background-color)."""
    return re.sub(r"([A-Z])", lambda m: "-" + m.group(1).lower(), name)


def css_value(name: str, value: Any) -> str:
    """Valeur CSS : les nombres reçoivent 'px' sauf propriétés sans unité et 0."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer() and name not in _UNITLESS:
        value = int(value)
    if isinstance(value, (int, float)):
        if value == 0 or name in _UNITLESS:
            return str(value)
        return f"{value}px"
    return str(value).strip()


def inline_css(style: Dict[str, Any] | None) -> str:
    """Dict de style → chaîne 'a:b;c:d' (ordre stable)."""
    return ";".join(
        f"{css_property(k)}:{css_value(k, v)}"
        for k, v in clean_style(style).items()
    )

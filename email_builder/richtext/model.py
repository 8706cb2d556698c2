"""
Modèle rich-text — arbre récursif de texte formaté (forme canonique = JSON éditeur).

    {"type": "doc", "content": [
        {"type": "paragraph", "content": [
            {"type": "text", "text": "Hello", "marks": [{"type": "bold"}]}
        ]}
    ]}

Invariants :
  - la racine est toujours `doc`
  - un noeud `text` est une feuille (pas de `content`) portant une chaîne `text`
  - les marks ne sont portées que par les noeuds `text`
  - une mark `link` porte un `href` non vide

Les noeuds et marks inconnus sont conservés au parse (aller-retour exact) ;
c'est le rendu qui les dégrade en texte brut.
"""
import json
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

NODE_TYPES = (
    "doc", "paragraph", "heading", "bulletList", "orderedList",
    "listItem", "text", "hardBreak", "blockquote",
)

# Ordre de rendu des marks, de l'extérieur vers l'intérieur
MARK_ORDER = ("bold", "italic", "underline", "strike", "link")

# Clés reconnues d'un noeud canonique, dans l'ordre d'émission
_NODE_KEYS = ("type", "attrs", "content", "text", "marks")


class RichTextError(ValueError):
    """Arbre rich-text invalide (racine, feuille texte, lien sans href…)."""


class Mark(BaseModel):
    """Mark inline (bold, italic, underline, strike, link{href})."""
    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    attrs: Optional[Dict[str, Any]] = None

    @property
    def href(self) -> Optional[str]:
        return (self.attrs or {}).get("href")


class RichTextNode(BaseModel):
    """Noeud de l'arbre. `content`/`marks`/`attrs` à None = clé absente de la forme canonique."""
    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    attrs: Optional[Dict[str, Any]] = None
    content: Optional[Tuple["RichTextNode", ...]] = None
    text: Optional[str] = None
    marks: Optional[Tuple[Mark, ...]] = None

    @property
    def children(self) -> Tuple["RichTextNode", ...]:
        return self.content or ()

    @property
    def is_known(self) -> bool:
        return self.type in NODE_TYPES


# ── parse ───────────────────────────────────────────────────────────────────

def parse(canonical: Union[Dict[str, Any], str, RichTextNode]) -> RichTextNode:
    """
    Forme canonique (dict ou texte JSON) → RichTextNode validé.

    Raises:
        RichTextError: racine différente de `doc` ou invariant violé
    """
    if isinstance(canonical, RichTextNode):
        data = serialize(canonical)
    elif isinstance(canonical, str):
        try:
            data = json.loads(canonical)
        except json.JSONDecodeError as e:
            raise RichTextError(f"JSON rich-text illisible : {e}") from e
    else:
        data = canonical

    if not isinstance(data, dict):
        raise RichTextError("la forme canonique doit être un objet")
    if data.get("type") != "doc":
        raise RichTextError(f"la racine doit être 'doc', reçu {data.get('type')!r}")
    return _parse_node(data, path="doc")


def _parse_node(data: Any, path: str) -> RichTextNode:
    if not isinstance(data, dict):
        raise RichTextError(f"{path} : noeud attendu, reçu {type(data).__name__}")
    node_type = data.get("type")
    if not isinstance(node_type, str) or not node_type:
        raise RichTextError(f"{path} : 'type' manquant")

    attrs = data.get("attrs")
    if attrs is not None and not isinstance(attrs, dict):
        raise RichTextError(f"{path} : 'attrs' doit être un objet")

    extra = {k: v for k, v in data.items() if k not in _NODE_KEYS}

    if node_type == "text":
        if "content" in data:
            raise RichTextError(f"{path} : un noeud text ne peut pas avoir d'enfants")
        text = data.get("text")
        if not isinstance(text, str):
            raise RichTextError(f"{path} : un noeud text doit porter une chaîne 'text'")
        marks = None
        if "marks" in data:
            marks = tuple(_parse_mark(m, f"{path}.marks[{i}]") for i, m in enumerate(_as_list(data["marks"], path)))
        return RichTextNode(type="text", attrs=attrs, text=text, marks=marks, **extra)

    if "marks" in data or "text" in data:
        raise RichTextError(f"{path} : 'text'/'marks' réservés aux noeuds text")

    content = None
    if "content" in data:
        content = tuple(
            _parse_node(child, f"{path}.{node_type}[{i}]")
            for i, child in enumerate(_as_list(data["content"], path))
        )
    return RichTextNode(type=node_type, attrs=attrs, content=content, **extra)


def _parse_mark(data: Any, path: str) -> Mark:
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise RichTextError(f"{path} : mark invalide")
    attrs = data.get("attrs")
    if attrs is not None and not isinstance(attrs, dict):
        raise RichTextError(f"{path} : 'attrs' doit être un objet")
    if data["type"] == "link":
        href = (attrs or {}).get("href")
        if not isinstance(href, str) or not href.strip():
            raise RichTextError(f"{path} : une mark link exige un href non vide")
    extra = {k: v for k, v in data.items() if k not in ("type", "attrs")}
    return Mark(type=data["type"], attrs=attrs, **extra)


def _as_list(value: Any, path: str) -> list:
    if not isinstance(value, (list, tuple)):
        raise RichTextError(f"{path} : liste attendue")
    return list(value)


# ── serialize ───────────────────────────────────────────────────────────────

def serialize(node: RichTextNode) -> Dict[str, Any]:
    """RichTextNode → forme canonique (inverse exact de parse)."""
    out: Dict[str, Any] = {"type": node.type}
    if node.attrs is not None:
        out["attrs"] = dict(node.attrs)
    if node.content is not None:
        out["content"] = [serialize(child) for child in node.content]
    if node.text is not None:
        out["text"] = node.text
    if node.marks is not None:
        out["marks"] = [_serialize_mark(m) for m in node.marks]
    out.update(node.model_extra or {})
    return out


def _serialize_mark(mark: Mark) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": mark.type}
    if mark.attrs is not None:
        out["attrs"] = dict(mark.attrs)
    out.update(mark.model_extra or {})
    return out


# ── Helpers ─────────────────────────────────────────────────────────────────

def create_empty_content(text: str = "Enter your text here...") -> RichTextNode:
    """Document minimal doc > paragraph > text — contenu par défaut des blocs."""
    return parse({
        "type": "doc",
        "content": [{"type": "paragraph", "content": [{"type": "text", "text": text}]}],
    })


def plain_text(node: RichTextNode) -> str:
    """Texte brut d'un (sous-)arbre, marks ignorées. Blocs séparés par un saut de ligne."""
    if node.type == "text":
        return node.text or ""
    if node.type == "hardBreak":
        return "\n"
    parts = [plain_text(child) for child in node.children]
    if node.type in ("doc", "bulletList", "orderedList", "listItem", "blockquote"):
        return "\n".join(p for p in parts if p)
    return "".join(parts)


def ordered_marks(marks: Optional[Iterable[Mark]]) -> Tuple[Mark, ...]:
    """
    Marks connues, dédoublonnées, triées bold › italic › underline › strike › link.
    Les marks inconnues sont retirées.
    """
    by_type: Dict[str, Mark] = {}
    for mark in marks or ():
        if mark.type in MARK_ORDER and mark.type not in by_type:
            by_type[mark.type] = mark
    return tuple(by_type[t] for t in MARK_ORDER if t in by_type)


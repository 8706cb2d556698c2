"""
Back-end source — module TSX "React Email" autonome, à coller dans un autre projet.

Même arbre que le back-end HTML, formaté en appels de composants
déclaratifs. Aucun identifiant de bloc n'est émis.
"""
import html
import json
from typing import List, Optional

from ..components import EMAIL_COMPONENTS, Node, RAW_HTML
from ..core.document import EmailDocument
from ..design.tokens import DesignSystem
from .plan import RenderPlan, project
from .tree import build_tree

INDENT = "  "

_JSX_ESCAPES = {"&": "&amp;", "{": "&#123;", "}": "&#125;", "<": "&lt;", ">": "&gt;", "\u00a0": "&nbsp;"}


def render_source(document: EmailDocument, design_system: Optional[DesignSystem] = None) -> str:
    """Document → source TSX exportant `EmailTemplate` (nommé + défaut)."""
    return render_plan_source(project(document, design_system))


def render_plan_source(plan: RenderPlan) -> str:
    tree = build_tree(plan)
    used = {n.component for n in tree.walk()}
    imports = [c for c in EMAIL_COMPONENTS if c in used]

    lines = ["import {"]
    lines += [f"{INDENT}{name}," for name in imports]
    lines.append('} from "@react-email/components"')
    lines.append("")
    lines.append("export function EmailTemplate() {")
    lines.append(f"{INDENT}return (")
    lines += format_jsx(tree, depth=2)
    lines.append(f"{INDENT})")
    lines.append("}")
    lines.append("")
    lines.append("export default EmailTemplate")
    return "\n".join(lines) + "\n"


def format_jsx(n: Node, depth: int = 0) -> List[str]:
    """Noeud → lignes JSX indentées."""
    pad = INDENT * depth
    if n.component == RAW_HTML:
        return [f"{pad}{{/* {n.props.get('label', 'raw html')} */}}"]

    opening = f"<{n.component}{_props(n.props)}"
    if not n.children:
        return [f"{pad}{opening} />"]
    if any(isinstance(child, str) for child in n.children):
        # contenu texte : une seule ligne, les espaces restent significatifs
        return [f"{pad}{_inline(n)}"]

    lines = [f"{pad}{opening}>"]
    for child in n.children:
        lines += format_jsx(child, depth + 1)
    lines.append(f"{pad}</{n.component}>")
    return lines


def escape_jsx(text: str) -> str:
    """Échappe les caractères réservés du JSX dans un texte enfant."""
    out = "".join(_JSX_ESCAPES.get(ch, ch) for ch in text)
    return out.replace("\n", '{"\\n"}')


# ── Helpers ─────────────────────────────────────────────────────────────────

def _inline(n) -> str:
    if isinstance(n, str):
        return escape_jsx(n)
    if n.component == RAW_HTML:
        return f"{{/* {n.props.get('label', 'raw html')} */}}"
    opening = f"<{n.component}{_props(n.props)}"
    if not n.children:
        return f"{opening} />"
    inner = "".join(_inline(child) for child in n.children)
    return f"{opening}>{inner}</{n.component}>"


def _props(props: dict) -> str:
    parts = []
    for key, value in props.items():
        if value is None:
            continue
        if key == "style":
            if value:
                parts.append(f" style={{{_object(value)}}}")
        elif isinstance(value, str):
            parts.append(f' {key}="{html.escape(value, quote=True)}"')
        else:
            parts.append(f" {key}={{{_literal(value)}}}")
    return "".join(parts)


def _object(style: dict) -> str:
    entries = ", ".join(f"{k}: {_literal(v)}" for k, v in style.items() if v is not None)
    return f"{{ {entries} }}"


def _literal(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(str(value), ensure_ascii=False)

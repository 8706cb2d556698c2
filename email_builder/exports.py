"""
Fichiers exportés : nom dérivé du document, extension et media type par format.

    html → <slug>.html  text/html
    tsx  → <slug>.tsx   text/typescript
    json → <slug>.json  application/json
"""
import re
import unicodedata
from typing import Literal, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from .codec import export_json
from .core.document import EmailDocument
from .design.tokens import DesignSystem
from .renderer.service import MarkupService, export_html
from .renderer.source import render_source

ExportFormat = Literal["html", "tsx", "json"]

MEDIA_TYPES = {
    "html": "text/html",
    "tsx":  "text/typescript",
    "json": "application/json",
}


class ExportArtifact(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    media_type: str
    content: str


def export_filename(name: str, fmt: str) -> str:
    """'My Newsletter' + html → 'my-newsletter.html'."""
    slug = re.sub(r"\s+", "-", name.strip().lower()) or "email"
    return f"{slug}.{fmt}"


def content_disposition(filename: str) -> str:
    """
    En-tête Content-Disposition d'un fichier exporté.

    `filename=` reste ASCII (accents décomposés, guillemets retirés) ; le nom
    exact part en `filename*=UTF-8''…` (RFC 5987) quand il diffère.
    """
    ascii_name = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
    ascii_name = re.sub(r'["\\\x00-\x1f]', "", ascii_name) or "email"
    header = f'attachment; filename="{ascii_name}"'
    if ascii_name != filename:
        header += f"; filename*=UTF-8''{quote(filename, safe='')}"
    return header


def export_document(
    document: EmailDocument,
    fmt: ExportFormat,
    design_system: Optional[DesignSystem] = None,
    service: Optional[MarkupService] = None,
) -> ExportArtifact:
    """
    Artefact prêt à télécharger.

    Raises:
        ValueError: format inconnu
        MarkupRenderError: échec du service de rendu (format html)
    """
    if fmt == "html":
        content = export_html(document, design_system, service)
    elif fmt == "tsx":
        content = render_source(document, design_system)
    elif fmt == "json":
        content = export_json(document)
    else:
        raise ValueError(f"format d'export inconnu : {fmt!r} (attendu : {', '.join(MEDIA_TYPES)})")
    return ExportArtifact(filename=export_filename(document.name, fmt), media_type=MEDIA_TYPES[fmt], content=content)

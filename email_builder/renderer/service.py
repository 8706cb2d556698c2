"""
Service de rendu HTML — seule frontière I/O du pipeline.

L'export HTML passe par un service : local (formateur intégré) ou distant
(POST de l'arbre de composants, réponse = document HTML complet). Un seul
aller-retour, pas de retry, pas de sortie partielle : un échec est levé.
"""
import logging
from typing import Optional, Protocol

import requests

from ..components import Node
from ..config import Settings, get_settings
from ..core.document import EmailDocument
from ..design.tokens import DesignSystem
from .html import DOCTYPE, format_node
from .plan import project
from .tree import build_tree

log = logging.getLogger(__name__)


class MarkupRenderError(RuntimeError):
    """Le service de rendu a échoué ou a renvoyé un corps vide."""


class MarkupService(Protocol):
    def render(self, tree: Node) -> str:
        ...


class LocalMarkupService:
    """Formatage en process (aucune I/O)."""

    def render(self, tree: Node) -> str:
        return DOCTYPE + format_node(tree)


class RemoteMarkupService:
    """POST JSON {"tree": ...} → texte HTML."""

    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    def render(self, tree: Node) -> str:
        try:
            resp = requests.post(self.url, json={"tree": tree.model_dump(mode="json")}, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            log.error("Rendu distant échoué (%s) : %s", self.url, e)
            raise MarkupRenderError(f"service de rendu injoignable ou en erreur : {e}") from e

        body = resp.text or ""
        if not body.strip():
            log.error("Rendu distant vide (%s)", self.url)
            raise MarkupRenderError("le service de rendu a renvoyé un document vide")
        return body


def default_service(settings: Optional[Settings] = None) -> MarkupService:
    settings = settings or get_settings()
    if settings.render_url:
        return RemoteMarkupService(settings.render_url, timeout=settings.render_timeout)
    return LocalMarkupService()


def export_html(
    document: EmailDocument,
    design_system: Optional[DesignSystem] = None,
    service: Optional[MarkupService] = None,
) -> str:
    """
    HTML exportable du document, via le service de rendu.

    Raises:
        MarkupRenderError: échec du service (jamais de document vide)
    """
    tree = build_tree(project(document, design_system))
    return (service or default_service()).render(tree)

"""
Codec JSON du document — aller-retour sans perte.

    text = export_json(doc)
    assert import_json(text) == doc

L'import valide tout (catégories de blocs, contenu imbriqué des colonnes,
arbres rich-text) : jamais de document partiellement construit.
"""
import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from .core.document import EmailDocument

log = logging.getLogger(__name__)


class DocumentImportError(ValueError):
    """Import refusé. `errors` : liste de {loc, msg}."""

    def __init__(self, message: str, errors: List[Dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


def export_json(document: EmailDocument) -> str:
    """Document → JSON (clés camelCase, indentation 2)."""
    data = document.model_dump(mode="json", by_alias=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


def import_json(text: str | bytes) -> EmailDocument:
    """
    JSON → document validé.

    Raises:
        DocumentImportError: JSON illisible, champ manquant, catégorie inconnue,
            contenu imbriqué mal typé
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        log.info("Import refusé : JSON illisible (%s)", e)
        raise DocumentImportError(f"JSON illisible : {e}", [{"loc": [], "msg": str(e)}]) from e

    if not isinstance(data, dict):
        raise DocumentImportError("le document doit être un objet JSON", [{"loc": [], "msg": "objet attendu"}])

    try:
        return EmailDocument.model_validate(data)
    except ValidationError as e:
        errors = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
        log.info("Import refusé : %d erreur(s) de validation", len(errors))
        summary = "; ".join(f"{'.'.join(map(str, err['loc'])) or '<racine>'}: {err['msg']}" for err in errors[:5])
        raise DocumentImportError(f"document invalide — {summary}", errors) from e

"""
Historique linéaire undo/redo avec classification explicite des éditions.

  - "structural" (ajout, suppression, déplacement…) → snapshot immédiat
  - "content" (frappe dans un bloc) → snapshot en attente, remplacé à chaque
    frappe, validé par commit() (perte de focus, changement de sélection)

L'appelant passe le type d'édition avec chaque mutation : rien n'est déduit
du site d'appel.
"""
from typing import List, Literal, Optional

from .document import EmailDocument

EditKind = Literal["structural", "content"]


class EditHistory:
    """
    Pile de snapshots de documents.

    Usage:
        >>> history = EditHistory(doc)
        >>> history.record(add_block(doc, "text"), "structural")
        >>> history.undo()
    """

    def __init__(self, initial: EmailDocument):
        self._snapshots: List[EmailDocument] = [initial]
        self._index = 0
        self._pending: Optional[EmailDocument] = None

    @property
    def current(self) -> EmailDocument:
        """Document affiché (snapshot en attente inclus)."""
        return self._pending if self._pending is not None else self._snapshots[self._index]

    @property
    def can_undo(self) -> bool:
        return self._pending is not None or self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._pending is None and self._index < len(self._snapshots) - 1

    def record(self, doc: EmailDocument, kind: EditKind) -> EmailDocument:
        if kind == "content":
            self._pending = doc
            return doc
        if kind != "structural":
            raise ValueError(f"type d'édition inconnu : {kind!r}")
        self.commit()
        self._push(doc)
        return doc

    def commit(self) -> None:
        """Valide l'édition de contenu en attente en un seul snapshot."""
        if self._pending is not None:
            pending, self._pending = self._pending, None
            self._push(pending)

    def undo(self) -> EmailDocument:
        self.commit()
        if self._index > 0:
            self._index -= 1
        return self.current

    def redo(self) -> EmailDocument:
        if self.can_redo:
            self._index += 1
        return self.current

    def _push(self, doc: EmailDocument) -> None:
        # toute nouvelle branche efface le futur
        del self._snapshots[self._index + 1:]
        self._snapshots.append(doc)
        self._index = len(self._snapshots) - 1

"""
Store de design systems — presets (lecture seule) + entrées utilisateur.

Les presets ne sont jamais modifiés : update/delete sur un preset sont des
no-op silencieux, duplicate() est la seule voie pour personnaliser.
Chaque écriture remplace l'entrée par une nouvelle instance immuable, les
instances déjà lues par un rendu en cours restent intactes.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .tokens import DesignSystem, DEFAULT_TOKENS
from .presets import PRESET_DESIGN_SYSTEMS, get_preset, is_preset

log = logging.getLogger(__name__)


class DesignSystemStore:
    """
    Registre des design systems + design system actif.

    Usage:
        >>> store = DesignSystemStore()
        >>> ds = store.duplicate("preset-bold")
        >>> store.update(ds.id, {"button": {"borderRadius": 0}})
        >>> store.set_active(ds.id)
    """

    def __init__(self, user_systems: Optional[List[DesignSystem]] = None, active_id: Optional[str] = None):
        self._user: Dict[str, DesignSystem] = {}
        for ds in user_systems or []:
            if is_preset(ds.id):
                raise ValueError(f"id réservé aux presets : {ds.id!r}")
            self._user[ds.id] = ds
        self._active_id: Optional[str] = None
        if active_id is not None:
            self.set_active(active_id)

    # ── Lecture ─────────────────────────────────────────────────────────────

    def get(self, ds_id: str) -> Optional[DesignSystem]:
        return get_preset(ds_id) or self._user.get(ds_id)

    def list(self) -> List[DesignSystem]:
        """Presets d'abord, puis entrées utilisateur (ordre de création)."""
        return list(PRESET_DESIGN_SYSTEMS) + list(self._user.values())

    def user_systems(self) -> List[DesignSystem]:
        return list(self._user.values())

    @property
    def active_id(self) -> Optional[str]:
        return self._active_id

    @property
    def active(self) -> Optional[DesignSystem]:
        return self.get(self._active_id) if self._active_id else None

    # ── Écriture ────────────────────────────────────────────────────────────

    def create(self, name: str) -> DesignSystem:
        """Nouveau design system utilisateur initialisé sur les tokens par défaut."""
        ds = DesignSystem(id=_new_id(), name=name, tokens=DEFAULT_TOKENS)
        self._user[ds.id] = ds
        log.info("Design system créé : %s (%s)", ds.name, ds.id)
        return ds

    def update(self, ds_id: str, partial_tokens: Optional[Dict[str, Any]] = None, name: Optional[str] = None) -> None:
        """
        Fusionne des tokens partiels (et/ou renomme) une entrée utilisateur.
        No-op pour un preset ou un id inconnu.

        Raises:
            ValueError: catégorie ou valeur de token invalide
        """
        if is_preset(ds_id):
            log.debug("update ignoré : %s est un preset (lecture seule)", ds_id)
            return
        current = self._user.get(ds_id)
        if current is None:
            log.debug("update ignoré : design system %s inconnu", ds_id)
            return
        tokens = current.tokens
        if partial_tokens:
            try:
                tokens = tokens.merged(partial_tokens)
            except ValidationError as e:
                raise ValueError(f"tokens invalides pour {ds_id!r} : {e}") from e
        self._user[ds_id] = current.model_copy(update={"tokens": tokens, "name": name or current.name})

    def duplicate(self, ds_id: str) -> Optional[DesignSystem]:
        """Copie profonde (preset ou utilisateur) sous un nouvel id."""
        source = self.get(ds_id)
        if source is None:
            return None
        tokens = type(source.tokens).model_validate(source.tokens.model_dump(by_alias=True))
        copy = DesignSystem(id=_new_id(), name=f"{source.name} (Copy)", tokens=tokens)
        self._user[copy.id] = copy
        log.info("Design system dupliqué : %s → %s", ds_id, copy.id)
        return copy

    def delete(self, ds_id: str) -> None:
        """Supprime une entrée utilisateur ; no-op pour un preset."""
        if is_preset(ds_id):
            log.debug("delete ignoré : %s est un preset", ds_id)
            return
        if self._user.pop(ds_id, None) is not None:
            log.info("Design system supprimé : %s", ds_id)
            if self._active_id == ds_id:
                self._active_id = None

    def set_active(self, ds_id: Optional[str]) -> None:
        """
        Active un design system (None = aucun).

        Raises:
            KeyError: id inconnu
        """
        if ds_id is not None and self.get(ds_id) is None:
            raise KeyError(ds_id)
        self._active_id = ds_id


def _new_id() -> str:
    return f"ds-{uuid.uuid4().hex[:12]}"

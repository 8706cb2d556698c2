"""
Configuration — lue depuis l'environnement.

  EMAIL_BUILDER_RENDER_URL             service de rendu HTML distant (vide = local)
  EMAIL_BUILDER_RENDER_TIMEOUT         timeout en secondes (défaut 10)
  EMAIL_BUILDER_LOG_LEVEL              niveau de log (défaut INFO)
  EMAIL_BUILDER_DEFAULT_DESIGN_SYSTEM  preset activé au démarrage (optionnel)
"""
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    render_url: Optional[str] = None
    render_timeout: float = Field(default=10.0, gt=0)
    log_level: str = "INFO"
    default_design_system: Optional[str] = None


def get_settings() -> Settings:
    """Settings courants (relus à chaque appel : pratique pour les tests)."""
    return Settings(
        render_url=os.getenv("EMAIL_BUILDER_RENDER_URL") or None,
        render_timeout=float(os.getenv("EMAIL_BUILDER_RENDER_TIMEOUT", "10")),
        log_level=os.getenv("EMAIL_BUILDER_LOG_LEVEL", "INFO").upper(),
        default_design_system=os.getenv("EMAIL_BUILDER_DEFAULT_DESIGN_SYSTEM") or None,
    )

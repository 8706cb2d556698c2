"""
EMAIL_BUILDER — FastAPI app
Démarrer : uvicorn email_builder.app:app --reload --port 8002
"""
import logging
from typing import Optional

from fastapi import FastAPI

from .config import Settings, get_settings
from .design.store import DesignSystemStore
from .renderer.service import MarkupService, default_service
from .router import create_router

log = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DesignSystemStore] = None,
    service: Optional[MarkupService] = None,
) -> FastAPI:
    """App complète : logging, store de design systems, router monté."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s — %(message)s")

    store = store or DesignSystemStore()
    if settings.default_design_system:
        try:
            store.set_active(settings.default_design_system)
            log.info("Design system actif au démarrage : %s", settings.default_design_system)
        except KeyError:
            log.warning("Design system par défaut inconnu : %s (ignoré)", settings.default_design_system)

    service = service or default_service(settings)
    log.info("Rendu HTML : %s", "distant " + settings.render_url if settings.render_url else "local")

    app = FastAPI(title="EMAIL_BUILDER — Éditeur d'emails", version="0.3.0", docs_url="/docs")
    app.state.store = store
    app.include_router(create_router(store, service))

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()

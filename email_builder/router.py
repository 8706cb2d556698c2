"""
Router FastAPI — endpoints email_builder.

GET    /email-builder/blocks/catalog                 → catégories + JSON schemas + instance par défaut
POST   /email-builder/render/html                    → {document, designSystemId?} → HTMLResponse
POST   /email-builder/render/source                  → source TSX (text/plain)
POST   /email-builder/render/preview                 → noeuds preview JSON
POST   /email-builder/export/{fmt}                   → fichier html | tsx | json
POST   /email-builder/import                         → texte JSON → document validé (422 sinon)
GET    /email-builder/design-systems                 → presets + entrées utilisateur + actif
POST   /email-builder/design-systems                 → {name} → nouvelle entrée
PATCH  /email-builder/design-systems/{id}            → {name?, tokens?}
POST   /email-builder/design-systems/{id}/duplicate
DELETE /email-builder/design-systems/{id}
PUT    /email-builder/design-systems/active          → {id | null}
"""
import logging
from typing import Any, Dict, Literal, Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .blocks import BLOCK_REGISTRY
from .codec import DocumentImportError, import_json
from .core.document import EmailDocument
from .design.presets import is_preset
from .design.store import DesignSystemStore
from .design.tokens import DesignSystem
from .exports import MEDIA_TYPES, content_disposition, export_document
from .renderer.preview import render_preview
from .renderer.service import MarkupRenderError, MarkupService, export_html
from .renderer.source import render_source

log = logging.getLogger(__name__)

_REQUEST_CONFIG = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class RenderRequest(BaseModel):
    model_config = _REQUEST_CONFIG

    document: EmailDocument
    design_system_id: Optional[str] = None


class PreviewRequest(RenderRequest):
    editing_block_id: Optional[str] = None
    simulate_mode: Literal["light", "dark"] = "light"


class CreateDesignSystemRequest(BaseModel):
    name: str


class UpdateDesignSystemRequest(BaseModel):
    name: Optional[str] = None
    tokens: Optional[Dict[str, Any]] = None


class ActiveDesignSystemRequest(BaseModel):
    id: Optional[str] = None


def create_router(store: DesignSystemStore, service: Optional[MarkupService] = None) -> APIRouter:
    """
    Router lié à un store de design systems.

    `service` : service de rendu HTML (None = selon la configuration).
    """
    router = APIRouter(prefix="/email-builder", tags=["email_builder"])

    def design_system_for(ds_id: Optional[str]) -> Optional[DesignSystem]:
        if ds_id is None:
            return store.active
        ds = store.get(ds_id)
        if ds is None:
            raise HTTPException(status_code=404, detail=f"Design system '{ds_id}' introuvable")
        return ds

    def dump_design_system(ds: DesignSystem) -> dict:
        return {**ds.model_dump(mode="json", by_alias=True), "preset": is_preset(ds.id)}

    # ── Blocs ───────────────────────────────────────────────────────────────

    @router.get("/blocks/catalog", summary="Catégories de blocs, schemas et valeurs par défaut")
    def catalog() -> JSONResponse:
        blocks = []
        for block_type, cls in BLOCK_REGISTRY.items():
            blocks.append({
                "type":    block_type,
                "schema":  cls.model_json_schema(by_alias=True),
                "default": cls.default().model_dump(mode="json", by_alias=True),
            })
        return JSONResponse({"blocks": blocks})

    # ── Rendu ───────────────────────────────────────────────────────────────

    @router.post("/render/html", response_class=HTMLResponse, summary="HTML email autonome")
    def render_html_route(req: RenderRequest) -> HTMLResponse:
        ds = design_system_for(req.design_system_id)
        try:
            return HTMLResponse(content=export_html(req.document, ds, service))
        except MarkupRenderError as e:
            raise HTTPException(status_code=502, detail=str(e))

    @router.post("/render/source", response_class=PlainTextResponse, summary="Source TSX React Email")
    def render_source_route(req: RenderRequest) -> PlainTextResponse:
        ds = design_system_for(req.design_system_id)
        return PlainTextResponse(content=render_source(req.document, ds))

    @router.post("/render/preview", summary="Noeuds preview de l'éditeur")
    def render_preview_route(req: PreviewRequest) -> JSONResponse:
        ds = design_system_for(req.design_system_id)
        nodes = render_preview(req.document, ds, req.editing_block_id, req.simulate_mode)
        return JSONResponse({"nodes": [n.model_dump(mode="json") for n in nodes]})

    # ── Export / import ─────────────────────────────────────────────────────

    @router.post("/export/{fmt}", summary="Fichier téléchargeable (html, tsx, json)")
    def export_route(fmt: str, req: RenderRequest) -> Response:
        if fmt not in MEDIA_TYPES:
            raise HTTPException(status_code=404, detail=f"Format '{fmt}' non disponible")
        ds = design_system_for(req.design_system_id)
        try:
            artifact = export_document(req.document, fmt, ds, service)
        except MarkupRenderError as e:
            raise HTTPException(status_code=502, detail=str(e))
        return Response(
            content=artifact.content,
            media_type=artifact.media_type,
            headers={"Content-Disposition": content_disposition(artifact.filename)},
        )

    @router.post("/import", summary="Importe un document JSON")
    async def import_route(request: Request) -> JSONResponse:
        body = await request.body()
        try:
            document = import_json(body)
        except DocumentImportError as e:
            raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})
        return JSONResponse(document.model_dump(mode="json", by_alias=True))

    # ── Design systems ──────────────────────────────────────────────────────

    @router.get("/design-systems", summary="Presets + design systems utilisateur")
    def list_design_systems() -> dict:
        return {
            "designSystems": [dump_design_system(ds) for ds in store.list()],
            "activeId": store.active_id,
        }

    @router.post("/design-systems", status_code=201, summary="Crée un design system")
    def create_design_system(req: CreateDesignSystemRequest) -> dict:
        return dump_design_system(store.create(req.name))

    @router.put("/design-systems/active", summary="Active un design system (null = aucun)")
    def set_active_design_system(req: ActiveDesignSystemRequest) -> dict:
        try:
            store.set_active(req.id)
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Design system '{req.id}' introuvable")
        return {"activeId": store.active_id}

    @router.patch("/design-systems/{ds_id}", summary="Met à jour un design system utilisateur")
    def update_design_system(ds_id: str, req: UpdateDesignSystemRequest) -> dict:
        if store.get(ds_id) is None:
            raise HTTPException(status_code=404, detail=f"Design system '{ds_id}' introuvable")
        try:
            store.update(ds_id, req.tokens, name=req.name)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return dump_design_system(store.get(ds_id))

    @router.post("/design-systems/{ds_id}/duplicate", status_code=201, summary="Duplique un design system")
    def duplicate_design_system(ds_id: str) -> dict:
        copy = store.duplicate(ds_id)
        if copy is None:
            raise HTTPException(status_code=404, detail=f"Design system '{ds_id}' introuvable")
        return dump_design_system(copy)

    @router.delete("/design-systems/{ds_id}", summary="Supprime un design system utilisateur")
    def delete_design_system(ds_id: str) -> dict:
        if store.get(ds_id) is None:
            raise HTTPException(status_code=404, detail=f"Design system '{ds_id}' introuvable")
        store.delete(ds_id)
        return {"deleted": not is_preset(ds_id), "activeId": store.active_id}

    return router

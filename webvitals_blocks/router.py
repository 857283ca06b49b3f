"""
Router FastAPI — endpoints webvitals_blocks.

GET  /webvitals-blocks/blocks?lang=                    → blocs enregistrés (libellés localisés) + JSON schema
GET  /webvitals-blocks/editor/controls?lang=           → panneaux de l'éditeur localisés
POST /webvitals-blocks/editor/patch                    → {attributes, patch} → attributs validés
POST /webvitals-blocks/save                            → {attributes, inner_html} → bloc sérialisé
POST /webvitals-blocks/render                          → {content} → HTML rendu (srcset injecté)
GET  /webvitals-blocks/media/{id}                      → métadonnées d'un attachment
GET  /webvitals-blocks/media/{id}/responsive-background → srcset / sizes / src
POST /webvitals-blocks/media                           → crée un attachment (SQLite)
"""
import logging
import os
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from .core.i18n import DEFAULT_LANG, available_langs
from .database import db_create_attachment, get_db
from .editor import apply_patch, editor_controls, inner_blocks_template
from .media import MediaCatalog, RestMediaCatalog, SqlMediaCatalog, resolve_responsive_background
from .models import AttachmentInput
from .registry import BlockRegistry
from .renderer.html import serialize_hero_background
from .renderer.injector import SIZE_LABELS

log = logging.getLogger(__name__)

router = APIRouter(prefix="/webvitals-blocks", tags=["webvitals_blocks"])

MEDIA_API_URL = os.getenv("WEBVITALS_MEDIA_API_URL", "")


# ── Dépendances ─────────────────────────────────────────────────────────────

def get_registry(request: Request) -> BlockRegistry:
    return request.app.state.registry


def get_catalog(db: Session = Depends(get_db)) -> MediaCatalog:
    """WordPress distant si WEBVITALS_MEDIA_API_URL est défini, sinon SQLite local."""
    if MEDIA_API_URL:
        return RestMediaCatalog(MEDIA_API_URL)
    return SqlMediaCatalog(db)


# ── Schemas requête ─────────────────────────────────────────────────────────

class PatchRequest(BaseModel):
    attributes: Dict[str, Any] = Field(default_factory=dict)
    patch: Dict[str, Any]


class SaveRequest(BaseModel):
    attributes: Dict[str, Any] = Field(default_factory=dict)
    inner_html: str = ""


class RenderRequest(BaseModel):
    content: str


# ── Blocs ───────────────────────────────────────────────────────────────────

@router.get("/blocks", summary="Liste les blocs enregistrés et leurs schemas")
def blocks(lang: str = DEFAULT_LANG, registry: BlockRegistry = Depends(get_registry)) -> dict:
    if lang not in available_langs():
        raise HTTPException(404, f"Langue '{lang}' non disponible")
    return {"lang": lang, "blocks": [
        {
            "name":     d.name,
            **d.labels(lang),
            "category": d.category,
            "schema":   d.attributes_model.model_json_schema(by_alias=True),
        }
        for d in (registry.get(n) for n in registry.names())
    ]}


# ── Éditeur ─────────────────────────────────────────────────────────────────

@router.get("/editor/controls", summary="Panneaux de l'éditeur (libellés localisés)")
def controls(lang: str = DEFAULT_LANG) -> dict:
    if lang not in available_langs():
        raise HTTPException(404, f"Langue '{lang}' non disponible")
    return {
        "lang":     lang,
        "panels":   editor_controls(lang=lang),
        "template": inner_blocks_template(lang),
    }


@router.post("/editor/patch", summary="Applique un patch aux attributs")
def patch(body: PatchRequest) -> dict:
    try:
        updated = apply_patch(body.attributes, body.patch)
    except ValueError as e:
        raise HTTPException(422, str(e))
    return updated.model_dump(by_alias=True)


@router.post("/save", summary="Sérialise le bloc (délimiteurs + markup sauvegardé)")
def save(body: SaveRequest) -> dict:
    try:
        markup = serialize_hero_background(body.attributes, body.inner_html)
    except ValueError as e:
        raise HTTPException(422, str(e))
    return {"content": markup}


@router.post("/render", response_class=HTMLResponse, summary="Rend le contenu d'une page")
def render(
    body: RenderRequest,
    registry: BlockRegistry = Depends(get_registry),
    catalog: MediaCatalog = Depends(get_catalog),
) -> HTMLResponse:
    return HTMLResponse(content=registry.render_content(body.content, catalog))


# ── Médiathèque ─────────────────────────────────────────────────────────────

@router.post("/media", status_code=201, summary="Ajoute une image à la médiathèque locale")
def create_media(data: AttachmentInput, db: Session = Depends(get_db)) -> dict:
    obj = db_create_attachment(db, data)
    log.info("Attachment %s créé (%d tailles)", obj.attachment_id, len(obj.sizes))
    return {"id": obj.attachment_id, "url": obj.url}


@router.get("/media/{image_id}", summary="Métadonnées d'une image")
def media(image_id: int, catalog: MediaCatalog = Depends(get_catalog)) -> dict:
    meta = catalog.get_metadata(image_id)
    if meta is None:
        raise HTTPException(404, f"Image {image_id} introuvable")
    return {"id": image_id, "url": catalog.get_url(image_id, "full"), **meta.model_dump()}


@router.get("/media/{image_id}/responsive-background", summary="Calcule srcset / sizes / src")
def responsive_background(
    image_id: int,
    sizes: Optional[str] = Query(default=None, description="Labels séparés par des virgules"),
    catalog: MediaCatalog = Depends(get_catalog),
) -> dict:
    labels = [s.strip() for s in sizes.split(",") if s.strip()] if sizes else list(SIZE_LABELS)
    return resolve_responsive_background(catalog, image_id, labels).model_dump()

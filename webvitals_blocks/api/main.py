"""
WEBVITALS_BLOCKS — FastAPI app
Démarrer : uvicorn webvitals_blocks.api.main:app --reload --port 8002
"""
import logging

from fastapi import FastAPI

from .. import __version__
from ..database import init_db
from ..plugin import register_blocks
from ..registry import BlockRegistry
from ..router import router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)


def create_app(registry: BlockRegistry | None = None) -> FastAPI:
    """Composition root : registry + blocs + routes."""
    app = FastAPI(title="WebVitals Blocks", version=__version__, docs_url="/docs")

    app.state.registry = registry or register_blocks(BlockRegistry())
    app.include_router(router)

    @app.on_event("startup")
    def startup():
        init_db()
        log.info("DB initialisée (SQLite) — blocs : %s", ", ".join(app.state.registry.names()))

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "webvitals_blocks", "version": __version__}

    return app


app = create_app()

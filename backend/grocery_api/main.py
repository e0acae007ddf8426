import logging
from typing import Optional

from fastapi import FastAPI

from grocery_api.config import APP_VERSION, LOG_LEVEL
from grocery_api.errors import register_exception_handlers
from grocery_api.logging_config import setup_logging
from grocery_api.routes.items import router as items_router
from grocery_api.storage import ItemStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[ItemStore] = None) -> FastAPI:
    """
    Build the API around ``store``.

    Without an explicit store the app gets a fresh one loaded with the
    seed catalog. Routes reach it through ``dependencies.get_store``.
    """

    setup_logging(LOG_LEVEL)

    app = FastAPI(title="Grocery Items API", version=APP_VERSION)
    app.state.store = store if store is not None else ItemStore.seeded()
    register_exception_handlers(app)
    app.include_router(items_router)

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "version": APP_VERSION}

    logger.info("Grocery API ready with %d items", len(app.state.store.list()))
    return app


app = create_app()

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from .catalog.connection import CatalogDatabase, build_catalog
from .config import Settings, get_settings
from .errors import WebhookError
from .routes.webhooks import router as webhooks_router
from .services.dispatcher import LineItemDispatcher
from .services.notifier import Notifier, build_notifier
from .utils.logging import configure_logging, logger

def create_app(
    settings: Optional[Settings] = None,
    catalog_db: Optional[CatalogDatabase] = None,
    notifier: Optional[Notifier] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    catalog_db = catalog_db or build_catalog(settings)
    notifier = notifier or build_notifier(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        catalog_db.disconnect()
        logger.info("Catalog disconnected")

    app = FastAPI(title="skuhook",
                  description="Shopify order webhook to fulfillment bridge",
        version="0.1.0",
        docs_url="/docs",          # Swagger UI
        redoc_url="/redoc",        # ReDoc
        openapi_url="/openapi.json",
        lifespan=lifespan)

    app.state.settings = settings
    app.state.dispatcher = LineItemDispatcher(
        catalog_db.connect(), notifier, stop_on_first_match=settings.DISPATCH_STOP_ON_FIRST_MATCH
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(WebhookError)
    async def webhook_error_handler(request: Request, exc: WebhookError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        else:
            logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"ok": False, "error": exc.message})

    app.include_router(webhooks_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/ping", response_class=PlainTextResponse)
    def ping():
        return "pong"

    return app

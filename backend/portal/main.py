"""FastAPI application entrypoint.

`create_app` wires settings, the database engine, CORS and the request
logging middleware around the API router. The module-level `app` is the
instance served by uvicorn; tests build their own with a substitute
engine.

Endpoints implemented:
- GET /
- GET /health
- GET /api/universities
- POST /api/apply
"""

import json
import logging
import time
import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.engine import Engine

from .api import router as api_router
from .config import Settings, settings as default_settings
from .database import build_engine

logger = logging.getLogger("portal.api")
if not logger.handlers:
    logging.basicConfig(level=default_settings.LOG_LEVEL)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the FastAPI application.

    `engine` defaults to one built from `settings`; passing an engine lets
    callers (tests, scripts) point the API at any store.
    """
    settings = settings or default_settings
    app = FastAPI(title="University Portal API")
    app.state.settings = settings
    app.state.engine = engine if engine is not None else build_engine(settings)

    # The frontend is served from a different origin.
    if settings.ALLOW_DEV_CORS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.middleware("http")(request_context_middleware)
    app.include_router(api_router)
    app.add_api_route("/", home, methods=["GET"], response_class=PlainTextResponse)
    app.add_api_route("/health", health, methods=["GET"])
    return app


async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        if request.url.path.startswith("/api"):
            logger.exception(
                "request_failed %s",
                json.dumps(
                    {
                        "request_id": req_id,
                        "path": request.url.path,
                        "method": request.method,
                        "duration_ms": elapsed_ms,
                        "client": request.client.host if request.client else "unknown",
                    },
                    ensure_ascii=True,
                ),
            )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    if request.url.path.startswith("/api"):
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
    return response


def home():
    """Liveness message for quick manual checks."""
    return "University Portal API is live and running!"


def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}


app = create_app()

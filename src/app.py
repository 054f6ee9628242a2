"""Stockroom FastAPI application.

Single-resource inventory service: stocks, retrieves, corrects and unstocks
products. The store adapter is chosen by STOCKROOM_STORE (memory | mongo).

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stockroom.api import register_failure_translator, router
from stockroom.store import get_store
from stockroom.utils.logging import add_context, clear_context, configure_logging


def create_app() -> FastAPI:
    """Build the application: logging, middleware, routes and failure translator."""
    configure_logging()

    app = FastAPI(
        title="Stockroom API",
        description="Product inventory: stock, retrieve, correct and unstock products",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind request identifiers to every log line emitted for this request."""
        clear_context()
        add_context(
            request_id=request.headers.get("x-request-id") or uuid4().hex,
            method=request.method,
            path=request.url.path,
        )
        try:
            return await call_next(request)
        finally:
            clear_context()

    app.include_router(router)
    register_failure_translator(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "store": get_store().name})

    return app


app = create_app()

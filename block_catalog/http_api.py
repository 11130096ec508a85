from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from block_catalog.handlers import BlockCatalogHandlers


def create_app(handlers: BlockCatalogHandlers, version: str = "1.0.0") -> FastAPI:
    """HTTP mirror of the MCP queries, for browsers and curl."""
    app = FastAPI(title="AEM Block Collection API", version=version)

    # (Optional) CORS for local dev tools
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok", "catalog": handlers.info()}

    @app.get("/blocks")
    def blocks():
        payload = handlers.list_blocks()
        if "error" in payload:
            status = 404 if handlers.catalog is None else 500
            return JSONResponse(payload, status_code=status)
        return payload

    @app.get("/metadata")
    def metadata():
        """Same assistant-style message the `aem-blocks-metadata` prompt returns."""
        return handlers.describe_catalog()

    return app

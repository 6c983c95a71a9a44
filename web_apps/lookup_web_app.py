#!/usr/bin/env python3
"""
FastAPI Word Lookup Application
Thin HTTP listener: every request is forwarded to LookupService, whose
status, JSON body and headers are written back unchanged
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response

from lookup_core.config import LookupConfig, configure_logging
from lookup_core.lookup_service import LookupService, build_lookup_service

logger = logging.getLogger(__name__)

FORWARDED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(service: Optional[LookupService] = None,
               config: Optional[LookupConfig] = None) -> FastAPI:
    """Build the application around an existing or freshly wired LookupService"""
    if service is None:
        config = config or LookupConfig.from_env()
        service = build_lookup_service(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Word lookup proxy started")
        yield
        await service.close()

    app = FastAPI(
        title="Word Lookup Proxy",
        description="Swedish dictionary and translation lookups with caching",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.lookup_service = service

    @app.api_route("/{path:path}", methods=FORWARDED_METHODS)
    async def lookup(request: Request):
        """Forward (method, url, User-Agent) to the lookup service"""
        result = await service.handle(
            request.method,
            str(request.url),
            request.headers.get("user-agent", ""),
        )
        return Response(content=result.body, status_code=result.status, headers=result.headers)

    return app


def main():
    import uvicorn

    config = LookupConfig.from_env()
    configure_logging(config)
    app = create_app(config=config)
    logger.info(f"Up and running on port {config.port}")
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()

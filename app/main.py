# app/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.cities import router as cities_router
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.models.cities import ErrorResponse

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]

TAGS_METADATA = [
    {"name": "cities", "description": "States and the cities that belong to them"},
]


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="Read-only HTTP API over a static dataset of states and cities.",
        openapi_tags=TAGS_METADATA,
    )

    # Must be registered before CORSMiddleware so it runs inside it and
    # error responses still carry the CORS headers.
    @app.middleware("http")
    async def catch_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "Unhandled error on %s %s",
                request.method,
                request.url.path,
                exc_info=exc,
            )
            body = ErrorResponse(status_code=500, message="Internal server error", data=[])
            return JSONResponse(status_code=500, content=body.model_dump())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=CORS_METHODS,
        allow_headers=["Content-Type"],
    )

    @app.get("/health", include_in_schema=False)
    def health_check():
        return {"status": "ok"}

    app.include_router(cities_router)

    return app


app = create_app()

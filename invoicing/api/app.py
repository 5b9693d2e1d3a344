"""Invoicing FastAPI application factory

Usage:
    uvicorn api:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from invoicing.api.error import ClientError, ServerError
from invoicing.api.routes import invoices

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            from invoicing.depends import init_db

            await init_db()
            logger.info("Database tables ensured")
        yield

    app = FastAPI(
        title="Invoicing API",
        description="Create, list, retrieve, update, delete and print invoices",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
            )
            return response

    register_exception_handlers(app)

    app.include_router(invoices.router, prefix=config.API_PREFIX)

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServerError)
    async def server_error_handler(request: Request, exc: ServerError):
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{exc.error.code} {exc.error.message} ({exc.error.reason})"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "StatusCode": exc.status_code,
                "Message": exc.error.message,
                "Detail": exc.error.reason,
            },
        )

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"Message": exc.error.message, "Code": exc.error.code},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "Message": "Invoice object is null or malformed",
                "Code": "INVALID_REQUEST",
                "Detail": [
                    {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
                    for error in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "StatusCode": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Message": "An internal server error occurred",
                "Detail": str(exc),
            },
        )

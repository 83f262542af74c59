"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.api.http.routers.books import router as books_router
from src.bookstore.api.http.routers.categories import router as categories_router
from src.bookstore.api.http.routers.health import router as health_router
from src.bookstore.api.utils.app_startup import configure_logging
from src.bookstore.core.services import DbManageService, DbSessionService
from src.bookstore.runtime.context import get_config

__all__ = ["app", "create_app"]


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed input as 400 Bad Request.

    A path parameter of the wrong type means no route matched, so it is a 404.
    """
    request_id = getattr(request.state, "request_id", "-")
    logger.bind(errors=len(exc.errors())).info("request.validation_error")
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in exc.errors()):
        return JSONResponse(
            status_code=404,
            content={"detail": "Not Found", "request_id": request_id},
        )
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors()), "request_id": request_id},
    )


def create_app(database_service: DbSessionService | None = None) -> FastAPI:
    """Build the catalog API.

    Args:
        database_service: Session factory to use; by default one is created on
            startup from the current configuration.
    """
    config = get_config()
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_service = database_service or DbSessionService()
        if get_config().database.create_tables:
            DbManageService(db_service.engine).create_all()
        app.state.app_dependencies = ApplicationDependencies(
            database_service=db_service
        )
        logger.info(
            "Starting up application in {} environment", get_config().app.environment
        )
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if database_service is None:
                db_service.dispose()

    application = FastAPI(
        title="Bookstore Catalog API",
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None if config.app.environment == "production" else "/redoc",
    )

    if config.app.environment == "production" and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    application.middleware("http")(log_requests)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)

    application.include_router(health_router)
    application.include_router(books_router)
    application.include_router(categories_router)

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # the request middleware logs every request
    )

"""FastAPI application entry point.

Run with: uvicorn src.main:app --port 8080
      or: wallet-service   (serves on SERVICE_HOST:SERVICE_PORT)
"""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from src.wallet.api.router import router as wallet_router
from src.wallet.application.schemas import client_error_message
from src.wallet.application.service import WalletApplicationService
from src.wallet_common.database import build_engine, build_session_factory
from src.wallet_common.errors import AppError
from src.wallet_common.logging_config import setup_logging
from src.wallet_common.migrations import upgrade
from src.wallet_common.request_log import RequestLogMiddleware
from src.wallet_common.response import GENERIC_ERROR_MESSAGE, error_response

logger = logging.getLogger("wallet.app")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: migrate, open the pool, wire the service. Shutdown: dispose."""
    setup_logging(settings.LOG_LEVEL)
    if settings.RUN_MIGRATIONS:
        await asyncio.to_thread(upgrade, settings.DATABASE_URL)

    engine = build_engine(settings)
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Postgres connection pool created")

    app.state.wallet_service = WalletApplicationService(build_session_factory(engine))
    yield
    await engine.dispose()
    logger.info("Postgres connection pool closed")


app = FastAPI(
    title=settings.APP_NAME,
    version=VERSION,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error(
            "%s %s failed (%s): %s",
            request.method,
            request.url.path,
            exc.kind.value,
            exc.message,
            exc_info=exc,
        )
        message = GENERIC_ERROR_MESSAGE
    else:
        message = exc.message
    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(message).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=error_response(client_error_message(list(exc.errors()))).model_dump(),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routing errors (unknown path, wrong method) share the {"error": ...} body
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)).model_dump(),
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s crashed", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=error_response(GENERIC_ERROR_MESSAGE).model_dump(),
    )


app.include_router(wallet_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": VERSION}


def run() -> None:
    """Serve the app with uvicorn until SIGINT/SIGTERM."""
    setup_logging(settings.LOG_LEVEL)
    logger.info("Server starting on %s:%d", settings.SERVICE_HOST, settings.SERVICE_PORT)
    uvicorn.run(
        app,
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        loop="uvloop",
        log_config=None,
        timeout_graceful_shutdown=10,
    )
    logger.info("Server was shut down")


if __name__ == "__main__":
    run()

"""
MedCheck — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn medcheck.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py
"""

from contextlib import asynccontextmanager
from typing import Optional
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from medcheck.config import MedCheckConfig
from medcheck.utils import MedCheckError, get_logger, setup_logging
from .config import APIConfig
from .dependencies import AppState
from .models import ApiResponse
from .routes import (
    health_router,
    conditions_router,
    symptoms_router,
    assessments_router,
    sessions_router,
)


logger = get_logger(__name__)


# Код помилки → HTTP статус
ERROR_STATUS = {
    "UNKNOWN_CONDITION": 400,
    "CATALOG_ERROR": 400,
    "NOT_FOUND": 404,
}


def _error_response(status_code: int, error: str, details: Optional[dict] = None) -> JSONResponse:
    body = ApiResponse(success=False, error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def create_app(
    api_config: Optional[APIConfig] = None,
    config: Optional[MedCheckConfig] = None
) -> FastAPI:
    """
    Створити FastAPI додаток.

    Каталог, движок, сховище та sweeper створюються тут один раз
    і передаються роутам через app.state.
    """
    api_config = api_config or APIConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle manager: запуск та зупинка sweeper"""
        state: AppState = app.state.medcheck

        print("=" * 60)
        print("🏥 MedCheck API Starting...")
        print("=" * 60)

        if state.sweeper:
            state.sweeper.start()

        print(f"✅ API ready! ({len(state.catalog)} conditions)")
        print(f"📍 Swagger UI: http://{api_config.host}:{api_config.port}/docs")
        print("=" * 60)

        yield

        # Cleanup при зупинці
        if state.sweeper:
            state.sweeper.stop()
        print("🛑 MedCheck API Stopping...")

    app = FastAPI(
        title=api_config.api_title,
        description=api_config.api_description,
        version=api_config.version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.state.medcheck = AppState.build(api_config, config)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_credentials=api_config.cors_allow_credentials,
        allow_methods=api_config.cors_allow_methods,
        allow_headers=api_config.cors_allow_headers,
    )

    # Middleware для логування запитів
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time

        # Логуємо тільки API запити
        if request.url.path.startswith(api_config.api_prefix):
            logger.info(
                "%s %s → %d (%.1fms)",
                request.method, request.url.path, response.status_code, process_time * 1000
            )

        return response

    @app.exception_handler(MedCheckError)
    async def medcheck_error_handler(request: Request, exc: MedCheckError):
        status_code = ERROR_STATUS.get(exc.code, 400)
        return _error_response(status_code, exc.message, exc.details)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    # Глобальний обробник помилок
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(
            500,
            "Internal server error",
            {"detail": str(exc)} if api_config.debug else None,
        )

    # Підключаємо роутери
    app.include_router(health_router)
    app.include_router(conditions_router, prefix=api_config.api_prefix)
    app.include_router(symptoms_router, prefix=api_config.api_prefix)
    app.include_router(assessments_router, prefix=api_config.api_prefix)
    app.include_router(sessions_router, prefix=api_config.api_prefix)

    return app


_api_config = APIConfig.from_env()
setup_logging(_api_config.log_level)

app = create_app(_api_config)

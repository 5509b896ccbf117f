from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from api.core.config import get_settings
from api.core.logging_config import setup_logging
from api.domain.errors import ValidationError
from api.repositories.json_storage import StorageError, TalkerStore
from api.routers import auth as auth_router
from api.routers import talker as talker_router
from api.services.auth_service import AuthService
from api.services.talker_service import TalkerNotFoundError, TalkerService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers on every JSON response."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation_error(_request: Request, exc: ValidationError):
        return JSONResponse({"message": exc.message}, status_code=exc.status_code)

    @app.exception_handler(TalkerNotFoundError)
    async def _not_found(_request: Request, exc: TalkerNotFoundError):
        return JSONResponse({"message": exc.message}, status_code=404)

    @app.exception_handler(StorageError)
    async def _storage_error(_request: Request, exc: StorageError):
        return JSONResponse({"message": str(exc)}, status_code=500)


def create_app(talker_service: TalkerService | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn; tests pass their own service."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Talker Manager API")
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    _register_error_handlers(app)

    app.state.talker_service = talker_service or TalkerService(store=TalkerStore(settings.talker_file))
    app.state.auth_service = AuthService()

    @app.get("/")
    def liveness():
        return Response(status_code=200)

    app.include_router(auth_router.router)
    app.include_router(talker_router.router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Online na porta %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)

# yorkrealty/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from yorkrealty.api.deps import get_upload_staging
from yorkrealty.api.v1.api import api_router
from yorkrealty.core.config import settings
from yorkrealty.core.errors import InternalError, YorkRealtyError
from yorkrealty.core.logging_config import LoggingConfig
from yorkrealty.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Application startup complete", extra={"project": settings.PROJECT_NAME})
    yield


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(YorkRealtyError)
    async def handle_domain_error(request: Request, exc: YorkRealtyError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        fields = [".".join(str(p) for p in err["loc"][1:]) or str(err["loc"][0]) for err in exc.errors()]
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body.", "fields": fields},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        err = InternalError()
        logger.error(
            "Unhandled error",
            exc_info=exc,
            extra={"path": request.url.path, "incident": err.details},
        )
        return JSONResponse(status_code=err.status_code, content=err.to_payload())


def create_application() -> FastAPI:
    LoggingConfig.setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials="*" not in settings.backend_cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # ---------- STATIC FILES ----------
    # Staged listing images, e.g. /uploads/1718000000000-ab12cd3.jpg
    staging = get_upload_staging()
    staging.provision()
    app.mount(settings.upload_url_prefix, StaticFiles(directory=staging.directory), name="uploads")

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.router import api_router
from app.core.config import Settings, get_settings
from app.core.logging import setup_logging
from app.db.base import Base
from app.db.session import get_engine, session_scope
from app import models as _models  # noqa: F401
from app.repositories import AdminRepository

logger = logging.getLogger(__name__)


def _bootstrap_admin(settings: Settings) -> None:
    with session_scope() as db:
        admins = AdminRepository(db)
        if admins.find_by_email(settings.bootstrap_admin_email):
            return
        admin = admins.create_admin(
            name=settings.bootstrap_admin_name,
            email=settings.bootstrap_admin_email,
            password=settings.bootstrap_admin_password,
        )
        logger.info("Bootstrap admin %s created (%s).", admin.email, admin.id)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("Starting %s (%s), version %s", settings.app_name, settings.app_env, settings.app_version)
        if settings.auto_create_schema:
            Base.metadata.create_all(bind=get_engine())
            logger.info("AUTO_CREATE_SCHEMA enabled: tables created via metadata.")
        if settings.auto_create_admin:
            _bootstrap_admin(settings)
        yield
        logger.info("Shutting down %s", settings.app_name)

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()

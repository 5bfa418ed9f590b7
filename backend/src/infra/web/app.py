from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from infra.config.config import get_config
from infra.db.session import close_engine, create_database_schema
from infra.logging.config import configure_logging
from infra.web.middleware.request_event_log_middleware import RequestEventLogMiddleware
from infra.web.routers.badge_router import router as badge_router
from infra.web.routers.plan_router import router as plan_router
from infra.web.routers.status_page_router import router as status_page_router

logger = structlog.stdlib.get_logger(__name__)


def create_app() -> FastAPI:
    config = get_config()

    configure_logging(
        log_level=config.LOGGING_CONFIG.LEVEL,
        json_logs=config.LOGGING_CONFIG.JSON_FORMAT,
        service_name=config.APP_NAME,
        environment=config.ENVIRONMENT,
        library_log_levels=config.LOGGING_CONFIG.LIBRARY_LOG_LEVELS,
        version=config.VERSION,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if config.ENVIRONMENT in ("loc", "dev"):
            await create_database_schema()

        logger.info("Status presentation service started", public_origin=config.PUBLIC_ORIGIN)

        yield

        await close_engine()

    app = FastAPI(
        title=config.APP_NAME,
        version=config.VERSION,
        root_path=config.ROOT_PATH,
        docs_url="/apidocs",
        lifespan=lifespan,
    )

    app.state.host = config.HOST
    app.state.port = config.PORT

    app.add_middleware(RequestEventLogMiddleware, request_id_header="x-request-id")

    app.include_router(status_page_router)
    app.include_router(badge_router)
    app.include_router(plan_router)

    return app

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from zoneinfo import ZoneInfo

from fastapi import FastAPI

from snatched.analytics.service import AnalyticsService
from snatched.api.routes.analytics import router as analytics_router
from snatched.api.routes.workouts import router as workouts_router
from snatched.config import get_settings
from snatched.database import async_session, create_tables, engine
from snatched.store.sql import SqlRecordStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    await create_tables()

    store = SqlRecordStore(async_session)
    analytics = AnalyticsService(
        store,
        tz=ZoneInfo(settings.timezone),
        recent_limit=settings.recent_records_limit,
    )
    app.state.record_store = store
    app.state.analytics = analytics
    await analytics.start()
    logger.info("Analytics service started (timezone=%s)", settings.timezone)
    yield
    analytics.stop()
    await engine.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    app = FastAPI(
        title="Snatched",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.include_router(workouts_router)
    app.include_router(analytics_router)

    @app.get("/api/system/status")
    async def system_status() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()

from fastapi import FastAPI

from concierge.api.v1.sessions import router as sessions_router
from concierge.core.config import settings
from concierge.core.log_config import configure_logging


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    application = FastAPI(title=settings.ASSISTANT_NAME, version="1.0.0")
    application.include_router(sessions_router, prefix="/api/v1", tags=["sessions"])

    @application.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()

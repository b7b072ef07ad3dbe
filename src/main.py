import logging

from fastapi import FastAPI
import uvicorn

from src.api.routes.routes import router
from src.config import get_settings


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.app_title)

app.include_router(router)
logger = logging.getLogger(__name__)


@app.on_event("startup")
def on_startup() -> None:
    logger.info(
        "Ticket purchases limited to %s non-infant tickets per request.",
        settings.max_tickets_allowed,
    )


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

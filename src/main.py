import logging

from fastapi import FastAPI

from src.api.routes.routes import router
from src.infrastructure.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Ticket Purchase Engine")

app.include_router(router)

import logging

from fastapi import FastAPI

from .api import alerts, cooling, health
from .config import get_settings

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Typewise Alert")

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(cooling.router, prefix="/cooling", tags=["cooling"])
app.include_router(alerts.router, prefix="/alerts", tags=["alerts"])

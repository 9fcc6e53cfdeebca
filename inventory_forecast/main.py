import logging

from fastapi import FastAPI

from inventory_forecast.api.v1.router import api_router
from inventory_forecast.core.config import get_log_level


app = FastAPI(title="Inventory Forecast")
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def _startup_event() -> None:
    logging.getLogger("inventory_forecast").setLevel(get_log_level())


@app.get("/")
def root():
    return {"status": "ok", "message": "Inventory forecast backend running"}

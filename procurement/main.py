import logging

from fastapi import FastAPI

from procurement.api.v1.router import api_router
from procurement.core.config import get_settings


logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Procurement Forecast")
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def root():
    return {"status": "ok", "message": "Procurement forecast backend running"}

from fastapi import APIRouter

from procurement.api.v1.endpoints import (
    material_forecast,
    quotation,
)

api_router = APIRouter()

api_router.include_router(material_forecast.router, prefix="/material-forecast", tags=["material-forecast"])
api_router.include_router(quotation.router, prefix="/quotation", tags=["quotation"])

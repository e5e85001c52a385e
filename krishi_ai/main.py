import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from krishi_ai.api.rest_routes.advisory import router as advisory_router
from krishi_ai.api.rest_routes.cost_savings import router as cost_savings_router
from krishi_ai.api.rest_routes.crop_calendar import router as crop_calendar_router
from krishi_ai.api.rest_routes.market import router as market_router
from krishi_ai.api.rest_routes.soil_analysis import router as soil_analysis_router
from krishi_ai.api.rest_routes.verification import router as verification_router
from krishi_ai.api.rest_routes.weather_alerts import router as weather_alerts_router
from krishi_ai.core.config import settings

load_dotenv()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Krishi AI")

app.include_router(verification_router)
app.include_router(advisory_router)
app.include_router(market_router)
app.include_router(soil_analysis_router)
app.include_router(weather_alerts_router)
app.include_router(crop_calendar_router)
app.include_router(cost_savings_router)


@app.get("/")
async def root():
    return {"message": "Welcome to Krishi AI advisory!"}

from fastapi import APIRouter

from .endpoints.discover import router as discover_router
from .endpoints.favourites import router as favourites_router
from .endpoints.health import router as health_router
from .endpoints.planets import router as planets_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "SWPlanets API is running"}


api_router.include_router(health_router)
api_router.include_router(planets_router)
api_router.include_router(favourites_router)
api_router.include_router(discover_router)

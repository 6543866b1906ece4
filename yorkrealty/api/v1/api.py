from fastapi import APIRouter

from yorkrealty.api.v1.routes_auth import router as auth_router
from yorkrealty.api.v1.routes_listings import router as listings_router


api_router = APIRouter()

api_router.include_router(listings_router)
api_router.include_router(auth_router)

# api/v1/router.py
from fastapi import APIRouter

from . import plans

api_router = APIRouter()

api_router.include_router(plans.router, prefix="/plans", tags=["Plans"])

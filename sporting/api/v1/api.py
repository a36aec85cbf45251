from fastapi import APIRouter

from sporting.api.v1.endpoints import teams


api_router = APIRouter()

api_router.include_router(teams.router, prefix="/teams", tags=["Teams"])

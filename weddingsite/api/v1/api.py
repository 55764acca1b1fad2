from fastapi import APIRouter

from weddingsite.api.v1.endpoints import public, wedding_sites

api_router = APIRouter()
api_router.include_router(wedding_sites.router, prefix="/wedding-sites", tags=["wedding-sites"])
api_router.include_router(public.router, prefix="/public", tags=["public"])

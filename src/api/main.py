from fastapi import APIRouter

from src.api.routes import info, web_extraction

api_router = APIRouter()
api_router.include_router(info.info_router)
api_router.include_router(web_extraction.web_extraction_router)

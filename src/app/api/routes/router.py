from fastapi import APIRouter

from src.app.api.routes import generation, projects

api_router = APIRouter(prefix="/api")
api_router.include_router(projects.router)
api_router.include_router(generation.router)

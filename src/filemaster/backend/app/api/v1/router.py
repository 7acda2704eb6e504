# app/api/v1/router.py
from fastapi import APIRouter

from filemaster.backend.app.api.v1.users import router as auth_router
from filemaster.backend.app.api.v1.processing import router as processing_router

api_router = APIRouter()
api_router.include_router(auth_router.router)
api_router.include_router(processing_router.router)

from fastapi import APIRouter
from zoo.handlers import animal

api_router = APIRouter()
api_router.include_router(animal.router, prefix='/animals', tags=['Animals'])

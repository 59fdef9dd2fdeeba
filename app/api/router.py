from fastapi import APIRouter

from app.api import admins, events, feedbacks, registrations, system, volunteers

api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(admins.router)
api_router.include_router(volunteers.router)
api_router.include_router(events.router)
api_router.include_router(registrations.router)
api_router.include_router(feedbacks.router)

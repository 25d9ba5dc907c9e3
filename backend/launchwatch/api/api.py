from fastapi import APIRouter
from launchwatch.api.endpoints import auth, launches, personnel, events, comments, dashboard

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(launches.router, prefix="/launches", tags=["launches"])
api_router.include_router(personnel.router, prefix="/launches", tags=["personnel"])
api_router.include_router(events.router, prefix="/launches", tags=["events"])
api_router.include_router(comments.router, tags=["comments"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

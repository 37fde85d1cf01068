from fastapi import APIRouter

from usermetrics.api.routes import activity, auth, dashboard, users

api_router = APIRouter(prefix="/api")

api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(activity.router, prefix="/users", tags=["activity"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

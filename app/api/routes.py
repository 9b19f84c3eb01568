from fastapi import APIRouter
from app.api.routes_health import router as health_router
from app.api.routes_features import router as features_router
from app.api.routes_sessions import router as sessions_router
from app.api.routes_exports import router as exports_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(features_router, tags=["features"])
router.include_router(sessions_router, tags=["sessions"])
router.include_router(exports_router, tags=["exports"])

"""
API Routes - Combines all route modules into two routers.

api_router is mounted under /api; root_router keeps the paths the
frontend already calls without a prefix.
"""

from fastapi import APIRouter

from app.api.routes.auth_routes import router as auth_router
from app.api.routes.student_routes import router as student_router, root_router as student_root_router
from app.api.routes.placement_routes import router as placement_router
from app.api.routes.college_admin_routes import router as college_admin_router
from app.api.routes.transaction_routes import router as transaction_router
from app.api.routes.file_routes import router as file_router

# Mounted at /api
api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(student_router)
api_router.include_router(placement_router)

# Mounted at /
root_router = APIRouter()
root_router.include_router(student_root_router)
root_router.include_router(college_admin_router)
root_router.include_router(transaction_router)
root_router.include_router(file_router)

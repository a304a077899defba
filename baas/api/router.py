from fastapi import APIRouter

from baas.api.endpoints import apis, health, projects

api_router = APIRouter()

# ==============================================================================
# 1. Projects (registered external databases)
# ==============================================================================
api_router.include_router(projects.router, prefix="/projects", tags=["Projects"])

# ==============================================================================
# 2. APIs attached to a project
# ==============================================================================
api_router.include_router(apis.router, prefix="/projects", tags=["APIs"])

# ==============================================================================
# 3. System
# ==============================================================================
api_router.include_router(health.router, tags=["Health"])

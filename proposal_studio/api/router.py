"""
API router.
Collects the per-feature routers under one router.
"""

from fastapi import APIRouter

from proposal_studio.api.endpoints import (
    health,
    catalog,
    generation,
    proposals,
    account_executives,
    settings,
)

api_router = APIRouter()

# Health check (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# Static catalog for the intake form (/catalog)
api_router.include_router(
    catalog.router,
    prefix="/catalog",
    tags=["catalog"]
)

# Proposal generation (/generate)
api_router.include_router(
    generation.router,
    prefix="/generate",
    tags=["generation"]
)

# Saved proposals (/proposals) - remote store wire format
api_router.include_router(
    proposals.router,
    prefix="/proposals",
    tags=["proposals"]
)

# Sales team (/account-executives) - remote store wire format
api_router.include_router(
    account_executives.router,
    prefix="/account-executives",
    tags=["account-executives"]
)

# Shared settings (/settings/prompt) - remote store wire format
api_router.include_router(
    settings.router,
    prefix="/settings",
    tags=["settings"]
)

"""
Health check endpoints.
Used to confirm the server is up and to inspect the active configuration.
"""

from fastapi import APIRouter, Depends

from proposal_studio.api.deps import get_sync_manager
from proposal_studio.config import get_settings
from proposal_studio.services import ProposalSyncManager

router = APIRouter()


@router.get("")
async def health_check():
    """Returns {"status": "healthy"} while the server is running."""
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail(manager: ProposalSyncManager = Depends(get_sync_manager)):
    """Also reports the active storage mode and generation settings."""
    settings = get_settings()
    return {
        "status": "healthy",
        "config": {
            "storage_mode": manager.store.mode.value,
            "claude_model": settings.claude_model,
            "proposal_retention_days": settings.proposal_retention_days,
            "custom_prompt": manager.prompt_template is not None,
        },
    }

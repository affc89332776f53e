"""
Shared settings API (currently only the prompt template).

GET /settings/prompt returns 404 when no custom prompt was set, which the
remote store reads as "use the default template".
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from proposal_studio.api.deps import get_sync_manager
from proposal_studio.services import ProposalSyncManager

router = APIRouter()


class PromptValue(BaseModel):
    """Prompt setting body."""
    value: str


@router.get("/prompt")
async def get_prompt(manager: ProposalSyncManager = Depends(get_sync_manager)) -> dict:
    value = await manager.get_prompt_template()
    if value is None:
        raise HTTPException(status_code=404, detail="No custom prompt set")
    return {"value": value}


@router.put("/prompt")
async def set_prompt(
    body: PromptValue,
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> dict:
    await manager.set_prompt_template(body.value)
    return {"value": manager.prompt_template}


@router.delete("/prompt")
async def reset_prompt(manager: ProposalSyncManager = Depends(get_sync_manager)) -> dict:
    """Reset the shared prompt to the built-in default."""
    await manager.reset_prompt_template()
    return {"value": manager.prompt_template}

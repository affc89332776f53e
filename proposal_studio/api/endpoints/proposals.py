"""
Saved proposal API.

Speaks the same wire format the remote store expects, so one instance can act
as the remote backend of another:
    GET /proposals, POST /proposals, DELETE /proposals/{id}

The listing body is a plain JSON list; whether the underlying store was
reachable is reported in the X-Store-Reachable header.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from proposal_studio.api.deps import get_sync_manager
from proposal_studio.models import SavedProposal
from proposal_studio.services import ProposalSyncManager

router = APIRouter()


@router.get("")
async def list_proposals(
    response: Response,
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> list[dict]:
    """Non-expired proposals, most recently modified first."""
    listing = await manager.list_proposals()
    response.headers["X-Store-Reachable"] = "true" if listing.store_reachable else "false"
    return [proposal.to_wire() for proposal in listing.proposals]


@router.get("/{proposal_id}")
async def get_proposal(
    proposal_id: str,
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> dict:
    """One proposal by id (expired proposals are not found)."""
    proposal = await manager.get_proposal(proposal_id)
    if not proposal:
        raise HTTPException(status_code=404, detail="Proposal not found")
    return proposal.to_wire()


@router.post("")
async def save_proposal(
    proposal: SavedProposal,
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> dict:
    """Create or update a proposal; returns it with id and timestamps filled in."""
    saved = await manager.save_proposal(proposal)
    return saved.to_wire()


@router.delete("/{proposal_id}")
async def delete_proposal(
    proposal_id: str,
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> dict:
    """Delete a proposal."""
    deleted = await manager.delete_proposal(proposal_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Proposal not found")
    return {"message": "Proposal deleted", "id": proposal_id}

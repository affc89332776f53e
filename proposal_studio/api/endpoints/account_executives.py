"""
Account executive (sales team) API.
GET/PUT operate on the whole list, matching the remote store wire format.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from proposal_studio.api.deps import get_sync_manager
from proposal_studio.models import AccountExecutive
from proposal_studio.services import ProposalSyncManager

router = APIRouter()


class NewAccountExecutive(BaseModel):
    """Fields for adding one account executive."""
    name: str
    email: str


@router.get("")
async def list_account_executives(
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> list[dict]:
    account_executives = await manager.list_account_executives()
    return [ae.to_wire() for ae in account_executives]


@router.put("")
async def replace_account_executives(
    account_executives: list[AccountExecutive],
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> list[dict]:
    """Replace the whole list (must not be empty)."""
    await manager.save_account_executives(account_executives)
    return [ae.to_wire() for ae in manager.account_executives]


@router.post("")
async def add_account_executive(
    body: NewAccountExecutive,
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> dict:
    new_ae = await manager.add_account_executive(body.name, body.email)
    return new_ae.to_wire()


@router.delete("/{ae_id}")
async def remove_account_executive(
    ae_id: str,
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> list[dict]:
    """Remove one account executive; the last one cannot be removed."""
    remaining = await manager.remove_account_executive(ae_id)
    return [ae.to_wire() for ae in remaining]

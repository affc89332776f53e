"""
Proposal generation API.
Takes the collected firm data and returns generated proposal content.
"""

from fastapi import APIRouter, Depends

from proposal_studio.api.deps import get_generator, get_sync_manager
from proposal_studio.models import FirmData
from proposal_studio.services import ProposalGenerator, ProposalSyncManager
from proposal_studio.utils import validate_firm_data

router = APIRouter()


@router.post("")
async def generate_proposal(
    firm_data: FirmData,
    generator: ProposalGenerator = Depends(get_generator),
    manager: ProposalSyncManager = Depends(get_sync_manager),
) -> dict:
    """
    Generate a proposal with the shared prompt template.

    Returns the (possibly plan-corrected) firm data together with the content,
    so the caller can save both as a proposal after editing.
    Failures surface as ERR_GEN_001 ("try again").
    """
    validate_firm_data(firm_data)
    content = await generator.generate(firm_data, manager.effective_prompt_template)
    return {
        "firmData": firm_data.to_wire(),
        "content": content.to_wire(),
    }

"""Demo store: process-lifetime, in-memory collections. Always succeeds."""

import logging
from typing import Iterable, Optional

from proposal_studio.config import StorageMode
from proposal_studio.models import AccountExecutive, DEFAULT_ACCOUNT_EXECUTIVES, SavedProposal

from .base import ProposalStore

logger = logging.getLogger(__name__)


class DemoStore(ProposalStore):
    """In-memory store. Data is lost when the process exits."""

    mode = StorageMode.DEMO

    def __init__(self, account_executives: Optional[Iterable[AccountExecutive]] = None):
        self._proposals: dict[str, SavedProposal] = {}
        self._account_executives: list[AccountExecutive] = list(
            DEFAULT_ACCOUNT_EXECUTIVES if account_executives is None else account_executives
        )
        self._prompt: Optional[str] = None
        logger.info("[DemoStore] in-memory store ready")

    async def list_proposals(self) -> list[SavedProposal]:
        return [p.model_copy(deep=True) for p in self._proposals.values()]

    async def save_proposal(self, proposal: SavedProposal) -> None:
        self._proposals[proposal.id] = proposal.model_copy(deep=True)

    async def delete_proposal(self, proposal_id: str) -> bool:
        return self._proposals.pop(proposal_id, None) is not None

    async def list_account_executives(self) -> list[AccountExecutive]:
        return [ae.model_copy() for ae in self._account_executives]

    async def save_account_executives(self, account_executives: list[AccountExecutive]) -> None:
        self._account_executives = [ae.model_copy() for ae in account_executives]

    async def get_prompt(self) -> Optional[str]:
        return self._prompt

    async def set_prompt(self, value: str) -> None:
        self._prompt = value

"""Backing store interface.

All three storage modes (demo, local, remote) implement the same small set
of operations. Writes are whole-resource replaces (AE list, prompt value) or
single-record upserts (proposals); there is no locking and the last writer wins.

Failures are reported by raising StorageError; an implementation never
silently falls back to another store.
"""

from abc import ABC, abstractmethod
from typing import Optional

from proposal_studio.config import StorageMode
from proposal_studio.models import AccountExecutive, SavedProposal


class ProposalStore(ABC):
    """Abstract backing store for proposals, account executives and the shared prompt."""

    mode: StorageMode

    # ==================== Proposals ====================

    @abstractmethod
    async def list_proposals(self) -> list[SavedProposal]:
        """Fetch every stored proposal (unfiltered, unsorted)."""

    @abstractmethod
    async def save_proposal(self, proposal: SavedProposal) -> None:
        """Insert or replace a proposal keyed by its id."""

    @abstractmethod
    async def delete_proposal(self, proposal_id: str) -> bool:
        """Delete a proposal. Returns False when no such proposal existed."""

    # ==================== Account executives ====================

    @abstractmethod
    async def list_account_executives(self) -> list[AccountExecutive]:
        """Fetch the whole AE list (may be empty)."""

    @abstractmethod
    async def save_account_executives(self, account_executives: list[AccountExecutive]) -> None:
        """Replace the whole AE list."""

    # ==================== Shared prompt ====================

    @abstractmethod
    async def get_prompt(self) -> Optional[str]:
        """Custom prompt template, or None when none was ever set."""

    @abstractmethod
    async def set_prompt(self, value: str) -> None:
        """Replace the custom prompt template."""

    async def close(self) -> None:
        """Release resources (connections, handles)."""

"""Proposal / team / prompt sync manager.

The facade the rest of the application talks to. It wraps the active
backing store and:

- runs every proposal listing through the ExpirationSweeper
- degrades failed reads to an empty (or last known) result instead of raising
- lets failed writes propagate as StorageError so callers can tell the user
- keeps the AE list and the custom prompt as process-wide state owned by this
  instance, updated optimistically before the store write resolves

Optimistic update contract:
    The in-memory value changes first, then the store write is awaited.
    If the write fails the error propagates and the in-memory value is NOT
    rolled back; a caller that wants to reconcile calls reconcile(), which
    re-fetches from the store. There is no conflict detection (last writer wins).
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from proposal_studio.exceptions import InputValidationError
from proposal_studio.models import AccountExecutive, DEFAULT_ACCOUNT_EXECUTIVES, SavedProposal
from proposal_studio.prompts import DEFAULT_PROMPT_TEMPLATE
from proposal_studio.services.expiration import ExpirationSweeper, now_ms
from proposal_studio.services.stores import ProposalStore
from proposal_studio.utils.validation import (
    validate_account_executive,
    validate_account_executive_list,
    validate_prompt_template,
)

logger = logging.getLogger(__name__)

STORE_UNREACHABLE_MESSAGE = "Could not reach the proposal store"


@dataclass
class ProposalListing:
    """Result of listing proposals."""
    proposals: list[SavedProposal]
    store_reachable: bool = True
    message: Optional[str] = None


def generate_proposal_id() -> str:
    """
    Proposal id in the format PROP-{YYYYMMDD}-{6 hex chars}.
    e.g. PROP-20240115-a1b2c3
    """
    date_part = datetime.now().strftime("%Y%m%d")
    return f"PROP-{date_part}-{uuid.uuid4().hex[:6]}"


class ProposalSyncManager:
    """
    Keeps proposals, account executives and the shared prompt in sync with the active store.

    Attributes:
        store: Active backing store (chosen once at start-up)
        sweeper: Expiration sweeper applied to proposal reads
    """

    def __init__(self, store: ProposalStore, sweeper: Optional[ExpirationSweeper] = None):
        self.store = store
        self.sweeper = sweeper or ExpirationSweeper(store)
        self._account_executives: list[AccountExecutive] = list(DEFAULT_ACCOUNT_EXECUTIVES)
        self._prompt_template: Optional[str] = None

    # ==================== Lifecycle ====================

    async def load(self) -> None:
        """Load AE list and prompt at start-up."""
        logger.info(f"[SyncManager] loading shared state from {self.store.mode.value} store")
        await self.reconcile()

    async def reconcile(self) -> None:
        """Re-fetch the AE list and prompt, replacing optimistic in-memory values."""
        await self.list_account_executives()
        await self.get_prompt_template()

    # ==================== Proposals ====================

    async def list_proposals(self) -> ProposalListing:
        """
        List saved proposals, most recently modified first.

        Expired proposals are excluded and their deletion is scheduled.
        Never raises: a store failure yields an empty listing flagged as unreachable.
        """
        try:
            proposals = await self.store.list_proposals()
        except Exception as e:
            logger.warning(f"[SyncManager] proposal listing degraded to empty: {e}")
            return ProposalListing(
                proposals=[], store_reachable=False, message=STORE_UNREACHABLE_MESSAGE
            )

        return ProposalListing(proposals=self.sweeper.sweep(proposals))

    async def get_proposal(self, proposal_id: str) -> Optional[SavedProposal]:
        """Find one non-expired proposal by id."""
        listing = await self.list_proposals()
        for proposal in listing.proposals:
            if proposal.id == proposal_id:
                return proposal
        return None

    async def save_proposal(self, proposal: SavedProposal) -> SavedProposal:
        """
        Save (create or update) a proposal.

        - id is assigned on first save
        - created_at is assigned when absent and otherwise preserved
        - last_modified is always refreshed

        Args:
            proposal: Proposal to save

        Returns:
            The proposal as stored

        Raises:
            StorageError: the save did not happen
        """
        timestamp = now_ms()
        updates: dict = {"last_modified": timestamp}
        if not proposal.id:
            updates["id"] = generate_proposal_id()
        if proposal.created_at is None:
            updates["created_at"] = timestamp

        saved = proposal.model_copy(update=updates)
        await self.store.save_proposal(saved)
        logger.info(f"[SyncManager] proposal saved: {saved.id}")
        return saved

    async def delete_proposal(self, proposal_id: str) -> bool:
        """
        Delete a proposal.

        Returns:
            False when the store had no such proposal

        Raises:
            StorageError: the delete did not happen
        """
        deleted = await self.store.delete_proposal(proposal_id)
        logger.info(f"[SyncManager] proposal delete {proposal_id}: {'done' if deleted else 'not found'}")
        return deleted

    # ==================== Account executives ====================

    @property
    def account_executives(self) -> list[AccountExecutive]:
        """Caller-visible AE list (includes optimistic changes)."""
        return list(self._account_executives)

    async def list_account_executives(self) -> list[AccountExecutive]:
        """
        Fetch the AE list from the store.

        An empty stored list is re-seeded with the defaults. A failed read keeps
        the current in-memory list.
        """
        try:
            fetched = await self.store.list_account_executives()
        except Exception as e:
            logger.warning(f"[SyncManager] AE listing degraded to in-memory list: {e}")
            return self.account_executives

        if not fetched:
            logger.info("[SyncManager] no account executives stored, seeding defaults")
            fetched = list(DEFAULT_ACCOUNT_EXECUTIVES)
            self._account_executives = fetched
            try:
                await self.store.save_account_executives(fetched)
            except Exception as e:
                logger.warning(f"[SyncManager] failed to persist default AEs: {e}")
            return self.account_executives

        self._account_executives = fetched
        return self.account_executives

    async def save_account_executives(self, account_executives: list[AccountExecutive]) -> None:
        """
        Replace the AE list (optimistic).

        Raises:
            InputValidationError: empty list or duplicate ids (nothing changed)
            StorageError: the store write failed (in-memory list keeps the new value)
        """
        validate_account_executive_list(account_executives)
        self._account_executives = list(account_executives)
        await self.store.save_account_executives(self._account_executives)

    async def add_account_executive(self, name: str, email: str) -> AccountExecutive:
        """Append a new AE and persist the whole list."""
        name, email = validate_account_executive(name, email)
        new_ae = AccountExecutive(id=f"ae_{uuid.uuid4().hex[:8]}", name=name, email=email)
        await self.save_account_executives([*self._account_executives, new_ae])
        logger.info(f"[SyncManager] account executive added: {new_ae.id}")
        return new_ae

    async def remove_account_executive(self, ae_id: str) -> list[AccountExecutive]:
        """
        Remove one AE and persist the whole list.

        Raises:
            InputValidationError: removing the last AE or an unknown id
        """
        if len(self._account_executives) <= 1:
            raise InputValidationError("You must have at least one Account Executive.")

        updated = [ae for ae in self._account_executives if ae.id != ae_id]
        if len(updated) == len(self._account_executives):
            raise InputValidationError(
                "Account executive not found",
                details={"id": ae_id},
            )

        await self.save_account_executives(updated)
        logger.info(f"[SyncManager] account executive removed: {ae_id}")
        return self.account_executives

    # ==================== Shared prompt ====================

    @property
    def prompt_template(self) -> Optional[str]:
        """Custom prompt (None when the default is in use)."""
        return self._prompt_template

    @property
    def effective_prompt_template(self) -> str:
        """Template actually used for generation."""
        return self._prompt_template or DEFAULT_PROMPT_TEMPLATE

    async def get_prompt_template(self) -> Optional[str]:
        """Fetch the custom prompt; a failed read keeps the in-memory value."""
        try:
            value = await self.store.get_prompt()
        except Exception as e:
            logger.warning(f"[SyncManager] prompt read degraded to in-memory value: {e}")
            return self._prompt_template

        self._prompt_template = value
        return value

    async def set_prompt_template(self, template: str) -> None:
        """
        Replace the shared prompt (optimistic).

        Raises:
            InputValidationError: blank template (nothing changed)
            StorageError: the store write failed (in-memory value keeps the new text)
        """
        validate_prompt_template(template)
        self._prompt_template = template
        await self.store.set_prompt(template)
        logger.info(f"[SyncManager] prompt template updated ({len(template)} chars)")

    async def reset_prompt_template(self) -> None:
        """Store the built-in default template as the shared prompt."""
        await self.set_prompt_template(DEFAULT_PROMPT_TEMPLATE)

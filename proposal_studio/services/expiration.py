"""Read-triggered expiration of saved proposals.

There is no background timer. Each time the proposal collection is listed,
the sweeper splits it into valid and expired entries, returns the valid ones
(most recently modified first) and fires one deletion task per expired id.
Deletions run alongside the read and never block or fail it.

Age is measured from created_at, falling back to last_modified for legacy
records without created_at. Editing a proposal does not extend its life.

Usage:
    sweeper = ExpirationSweeper(store, retention_days=30)
    valid = sweeper.sweep(await store.list_proposals())
    ...
    await sweeper.drain()  # at shutdown
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from proposal_studio.models import SavedProposal
from proposal_studio.services.stores import ProposalStore

logger = logging.getLogger(__name__)

DAY_MS = 24 * 60 * 60 * 1000
DEFAULT_RETENTION_DAYS = 30


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def partition_proposals(
    proposals: Iterable[SavedProposal],
    now: int,
    retention_ms: int,
) -> tuple[list[SavedProposal], list[SavedProposal]]:
    """
    Split proposals by age.

    Args:
        proposals: Proposals as fetched from the store
        now: Current time (epoch ms)
        retention_ms: Retention window; age >= window means expired

    Returns:
        (valid, expired)
    """
    valid: list[SavedProposal] = []
    expired: list[SavedProposal] = []
    for proposal in proposals:
        if now - proposal.age_reference >= retention_ms:
            expired.append(proposal)
        else:
            valid.append(proposal)
    return valid, expired


@dataclass
class SweepStats:
    """Expired-deletion counters."""
    scheduled: int = 0
    deleted: int = 0
    failed: int = 0


class ExpirationSweeper:
    """
    Filters expired proposals out of reads and deletes them lazily.

    Attributes:
        store: Store the deletions go to
        retention_ms: Retention window in milliseconds
    """

    def __init__(self, store: ProposalStore, retention_days: int = DEFAULT_RETENTION_DAYS):
        self.store = store
        self.retention_ms = retention_days * DAY_MS
        self._pending: set[asyncio.Task] = set()
        self._pending_ids: set[str] = set()
        self._stats = SweepStats()

    def sweep(
        self,
        proposals: Iterable[SavedProposal],
        now: Optional[int] = None,
    ) -> list[SavedProposal]:
        """
        Return valid proposals, newest last_modified first, and schedule
        deletion of the expired ones.

        Must be called from a running event loop.
        """
        current = now_ms() if now is None else now
        valid, expired = partition_proposals(proposals, current, self.retention_ms)

        for proposal in expired:
            # Already being deleted by an earlier sweep
            if proposal.id is None or proposal.id in self._pending_ids:
                continue
            self._schedule_delete(proposal.id)

        if expired:
            logger.info(f"[ExpirationSweeper] {len(expired)} expired proposals scheduled for deletion")

        return sorted(valid, key=lambda p: p.last_modified, reverse=True)

    def _schedule_delete(self, proposal_id: str) -> None:
        task = asyncio.get_running_loop().create_task(self._delete_expired(proposal_id))
        self._pending.add(task)
        self._pending_ids.add(proposal_id)
        task.add_done_callback(self._pending.discard)
        task.add_done_callback(lambda _: self._pending_ids.discard(proposal_id))
        self._stats.scheduled += 1

    async def _delete_expired(self, proposal_id: str) -> None:
        try:
            await self.store.delete_proposal(proposal_id)
            self._stats.deleted += 1
            logger.debug(f"[ExpirationSweeper] deleted expired proposal: {proposal_id}")
        except Exception as e:
            # Logged only; the read that triggered the sweep has already returned.
            self._stats.failed += 1
            logger.error(f"[ExpirationSweeper] failed to delete expired proposal {proposal_id}: {e}")

    async def drain(self) -> None:
        """Wait for every scheduled deletion to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending))

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def stats(self) -> SweepStats:
        return self._stats

"""Selects the backing store once, at start-up, from configuration."""

import logging
from typing import Optional

from proposal_studio.config import Settings, StorageMode, get_settings

from .base import ProposalStore
from .demo import DemoStore
from .local import LocalStore
from .remote import RemoteStore

logger = logging.getLogger(__name__)


def create_store(settings: Optional[Settings] = None) -> ProposalStore:
    """
    Build the store for the configured storage mode.

    Remote mode without a base URL falls back to the demo store.

    Args:
        settings: Settings to use (cached settings by default)

    Returns:
        The active ProposalStore
    """
    settings = settings or get_settings()
    mode = settings.resolved_storage_mode

    if mode != settings.storage_mode:
        logger.warning(
            f"[StoreFactory] storage_mode={settings.storage_mode.value} is incomplete "
            f"(no remote_base_url), falling back to {mode.value}"
        )

    if mode == StorageMode.REMOTE:
        store: ProposalStore = RemoteStore(
            settings.remote_base_url, timeout=settings.remote_timeout_seconds
        )
    elif mode == StorageMode.LOCAL:
        store = LocalStore(base_path=settings.local_store_path)
    else:
        store = DemoStore()

    logger.info(f"[StoreFactory] active storage mode: {mode.value}")
    return store

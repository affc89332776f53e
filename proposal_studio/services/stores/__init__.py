"""Interchangeable backing stores (demo, local, remote)."""

from .base import ProposalStore
from .demo import DemoStore
from .local import LocalStore, PROPOSALS_KEY, ACCOUNT_EXECUTIVES_KEY, PROMPT_KEY
from .remote import RemoteStore
from .factory import create_store

__all__ = [
    "ProposalStore",
    "DemoStore",
    "LocalStore",
    "RemoteStore",
    "create_store",
    "PROPOSALS_KEY",
    "ACCOUNT_EXECUTIVES_KEY",
    "PROMPT_KEY",
]

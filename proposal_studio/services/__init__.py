"""Services for Proposal Studio."""

from .stores import ProposalStore, DemoStore, LocalStore, RemoteStore, create_store
from .hydrator import hydrate_template, find_placeholders, KNOWN_PLACEHOLDERS
from .claude_client import ClaudeClient
from .proposal_generator import ProposalGenerator, parse_proposal_response, strip_code_fences
from .expiration import ExpirationSweeper, partition_proposals
from .sync_manager import ProposalSyncManager, ProposalListing

__all__ = [
    "ProposalStore",
    "DemoStore",
    "LocalStore",
    "RemoteStore",
    "create_store",
    "hydrate_template",
    "find_placeholders",
    "KNOWN_PLACEHOLDERS",
    "ClaudeClient",
    "ProposalGenerator",
    "parse_proposal_response",
    "strip_code_fences",
    "ExpirationSweeper",
    "partition_proposals",
    "ProposalSyncManager",
    "ProposalListing",
]

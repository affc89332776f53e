"""
Request dependencies.
Services are created in the application lifespan and kept on app.state.
"""

from fastapi import Request

from proposal_studio.services import ProposalGenerator, ProposalSyncManager


def get_sync_manager(request: Request) -> ProposalSyncManager:
    return request.app.state.sync_manager


def get_generator(request: Request) -> ProposalGenerator:
    return request.app.state.generator

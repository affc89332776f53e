"""API test fixtures.

ASGITransport does not run the lifespan, so services are placed on
app.state directly: a demo store and a generator with a mocked transport.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from proposal_studio.main import app
from proposal_studio.services import DemoStore, ExpirationSweeper, ProposalGenerator, ProposalSyncManager


@pytest.fixture
def api_store(two_aes):
    return DemoStore(account_executives=two_aes)


@pytest.fixture
def api_manager(api_store):
    return ProposalSyncManager(api_store, ExpirationSweeper(api_store))


@pytest.fixture
async def client(api_manager, mock_claude_client):
    await api_manager.load()
    app.state.sync_manager = api_manager
    app.state.generator = ProposalGenerator(claude_client=mock_claude_client)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await api_manager.sweeper.drain()

"""Shared pytest fixtures."""

import json

import pytest
from unittest.mock import AsyncMock

from proposal_studio.models import (
    AccountExecutive,
    FirmData,
    Language,
    PlanType,
    ProposalContent,
    SavedProposal,
    ONBOARDING_PACKAGES,
)
from proposal_studio.services import DemoStore, ExpirationSweeper, ProposalSyncManager

SAMPLE_CONTENT = {
    "executiveSummary": {
        "title": "Reclaim Your Busy Season",
        "body": "Acme spends hours chasing documents. TaxDome automates the follow-up.",
        "keyBenefits": ["Automatic reminders", "Secure client portal"],
    },
    "quote": {
        "planName": "TaxDome Pro",
        "pricePerUser": "$800",
        "billingFrequency": "billed annually",
        "softwareTotal": "$4,000",
        "onboarding": {
            "name": "Guided Onboarding",
            "price": "$999",
            "features": ["1 hr kickoff + 5 consultations"],
        },
        "totalAnnualCost": "$4,999",
        "featuresList": ["Client Portal", "Workflow Automation"],
        "closingStatement": "Let's get you live before tax season.",
    },
}


@pytest.fixture
def sample_content_json():
    """Valid generation reply (no code fences)."""
    return json.dumps(SAMPLE_CONTENT)


@pytest.fixture
def sample_content():
    """ProposalContent fixture."""
    return ProposalContent.model_validate(SAMPLE_CONTENT)


@pytest.fixture
def sample_firm():
    """FirmData fixture."""
    return FirmData(
        firm_name="Acme",
        contact_name="Jane Doe",
        firm_size=5,
        language=Language.ENGLISH,
        selected_plan=PlanType.PRO,
        selected_onboarding=ONBOARDING_PACKAGES[1],
        features=["Client Portal", "Workflow Automation"],
        transcript="We chase clients for documents every week.",
        additional_context="Price sensitive.",
        account_executive=AccountExecutive(id="ae_1", name="Niko Witt", email="niko@example.com"),
    )


@pytest.fixture
def make_proposal(sample_firm, sample_content):
    """Factory for SavedProposal with explicit timestamps."""

    def _make(proposal_id="PROP-1", created_at=None, last_modified=0):
        return SavedProposal(
            id=proposal_id,
            created_at=created_at,
            last_modified=last_modified,
            firm_data=sample_firm,
            content=sample_content,
        )

    return _make


@pytest.fixture
def two_aes():
    return [
        AccountExecutive(id="ae_1", name="Niko Witt", email="niko@example.com"),
        AccountExecutive(id="ae_2", name="Troy Stell", email="troy@example.com"),
    ]


@pytest.fixture
def demo_store():
    """Empty-proposal demo store with the default AE list."""
    return DemoStore()


@pytest.fixture
def sync_manager(demo_store):
    """ProposalSyncManager over a demo store."""
    return ProposalSyncManager(demo_store, ExpirationSweeper(demo_store))


@pytest.fixture
def mock_claude_client(sample_content_json):
    """ClaudeClient mock fixture."""
    client = AsyncMock()
    client.complete = AsyncMock(return_value=sample_content_json)
    return client


@pytest.fixture
def temp_local_store(tmp_path):
    """LocalStore in a temporary directory."""
    from proposal_studio.services import LocalStore
    return LocalStore(base_path=str(tmp_path / "store"))

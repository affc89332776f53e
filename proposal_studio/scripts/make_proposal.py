#!/usr/bin/env python3
"""Proposal maker script.

Usage:
    python -m proposal_studio.scripts.make_proposal --sample
    python -m proposal_studio.scripts.make_proposal --input firm.json --save
    python -m proposal_studio.scripts.make_proposal --input firm.json --output out/
"""

import argparse
import asyncio
import json
import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from proposal_studio.config import get_settings
from proposal_studio.exceptions import ProposalStudioError
from proposal_studio.models import (
    AccountExecutive,
    FirmData,
    Language,
    PlanType,
    SavedProposal,
    DEFAULT_ACCOUNT_EXECUTIVES,
    ONBOARDING_PACKAGES,
)
from proposal_studio.services import (
    ExpirationSweeper,
    ProposalGenerator,
    ProposalSyncManager,
    create_store,
)
from proposal_studio.utils import validate_firm_data

logger = logging.getLogger(__name__)


def sample_firm_data(account_executive: Optional[AccountExecutive] = None) -> FirmData:
    """Quick-test prospect, owned by the given AE (default AE when omitted)."""
    return FirmData(
        firm_name="Summit Tax & Accounting",
        contact_name="David Williams",
        firm_size=5,
        language=Language.ENGLISH,
        selected_plan=PlanType.BUSINESS,
        selected_onboarding=ONBOARDING_PACKAGES[1],
        features=[
            "Workflow Automation",
            "Client Portal",
            "Unlimited e-Signatures",
            "Auto-reminders",
        ],
        transcript=(
            "We are spending too much time chasing clients for documents. "
            "We need a system that sends automatic reminders. "
            "We also want a secure portal for clients to upload files."
        ),
        additional_context="Client values time-saving automation above all else.",
        account_executive=account_executive or DEFAULT_ACCOUNT_EXECUTIVES[0],
    )


def load_firm_data(path: Path) -> FirmData:
    with open(path, "r", encoding="utf-8") as f:
        return FirmData.model_validate(json.load(f))


async def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate a pricing proposal")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=Path, help="FirmData JSON file")
    source.add_argument("--sample", action="store_true", help="Use the built-in sample firm")
    parser.add_argument("--output", type=Path, default=Path("workspace/outputs/proposals"), help="Output directory")
    parser.add_argument("--save", action="store_true", help="Also save through the configured store")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    firm_data = None if args.sample else load_firm_data(args.input)

    store = create_store(settings)
    sweeper = ExpirationSweeper(store, retention_days=settings.proposal_retention_days)
    manager = ProposalSyncManager(store, sweeper)
    await manager.load()

    if firm_data is None:
        # Quick test: owned by the first AE of the team
        firm_data = sample_firm_data(manager.account_executives[0])

    print("\n" + "=" * 70)
    print("Proposal generation started")
    print(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 70)
    print(f"  Firm: {firm_data.firm_name} ({firm_data.firm_size} users)")
    print(f"  Plan: {firm_data.selected_plan.value}")
    print(f"  Onboarding: {firm_data.selected_onboarding.name}")

    try:
        validate_firm_data(firm_data)

        total_start = time.time()
        generator = ProposalGenerator()
        content = await generator.generate(firm_data, manager.effective_prompt_template)
        total_time = time.time() - total_start

        proposal = SavedProposal(firm_data=firm_data, content=content)
        if args.save:
            proposal = await manager.save_proposal(proposal)
            print(f"\n  Saved as: {proposal.id} ({store.mode.value} store)")
    except ProposalStudioError as e:
        print(f"\nFailed: {e.message}", file=sys.stderr)
        return 1
    finally:
        await sweeper.drain()
        await store.close()

    print("\n" + "=" * 70)
    print("Proposal generation finished")
    print("=" * 70)
    print(f"\n  Title: {content.executive_summary.title}")
    print(f"  Total: {content.quote.total_annual_cost}")
    print(f"  Elapsed: {total_time:.1f}s")

    args.output.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    json_path = args.output / f"PROP-{timestamp}.json"
    json_path.write_text(json.dumps(proposal.to_wire(), ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"\nJSON saved: {json_path}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

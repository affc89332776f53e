"""
Firm (prospect) data models and the fixed sales catalog.

The catalog (plans, onboarding packages, feature names) is static: it is
never created or mutated at runtime.
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field, model_validator

from proposal_studio.models.common import CamelModel

logger = logging.getLogger(__name__)


class PlanType(str, Enum):
    """Subscription plans. Essentials is for solo practitioners only."""

    ESSENTIALS = "TaxDome Essentials"
    PRO = "TaxDome Pro"
    BUSINESS = "TaxDome Business"


class Language(str, Enum):
    """Output language of the generated proposal."""

    ENGLISH = "English"
    SPANISH = "Spanish"


class OnboardingPackage(CamelModel):
    """Immutable onboarding catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Catalog id")
    name: str = Field(..., description="Display name")
    price: float = Field(..., description="Numeric price")
    price_display: str = Field(..., description="Formatted price, e.g. $999")
    ideal_for: str = Field("", description="Target audience label")
    features: list[str] = Field(default_factory=list, description="Ordered feature descriptions")


ONBOARDING_PACKAGES: tuple[OnboardingPackage, ...] = (
    OnboardingPackage(
        id="group",
        name="Group Onboarding",
        price=0,
        price_display="Free",
        ideal_for="Self-starters",
        features=["Live 1-hour sessions (Mon-Thu)", "Group-led by Customer Success"],
    ),
    OnboardingPackage(
        id="guided",
        name="Guided Onboarding",
        price=999,
        price_display="$999",
        ideal_for="Growing firms",
        features=[
            "1 hr kickoff + 5 consultations",
            "1 custom workflow setup",
            "Dedicated Manager (90 days)",
        ],
    ),
    OnboardingPackage(
        id="enhanced",
        name="Enhanced",
        price=1999,
        price_display="$1,999",
        ideal_for="Firms needing strategy",
        features=[
            "1 hr kickoff + 8 consultations",
            "Up to 2 workflows setup",
            "Senior Manager (120 days)",
        ],
    ),
    OnboardingPackage(
        id="premium",
        name="Premium",
        price=3499,
        price_display="$3,499",
        ideal_for="Enterprise speed",
        features=[
            "Done-for-you setup (full)",
            "Private Slack Channel",
            "Senior Manager (60-90 days)",
            "Go live within 3 weeks",
        ],
    ),
)

FEATURE_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Client Experience": (
        "Client Portal",
        "Mobile App (White-labeled)",
        "Secure Client Chats",
        "Organizers & Intake Forms",
        "Multi-language Support",
    ),
    "Workflow & Automation": (
        "Workflow Automation",
        "Kanban Project Management",
        "Auto-reminders",
        "Task Management",
        "Job Statuses & Templates",
    ),
    "Documents & Signatures": (
        "Unlimited Document Storage",
        "Unlimited e-Signatures",
        "PDF Editor",
        "KBA (Knowledge-Based Auth)",
        "Smart Categorization",
    ),
    "Billing & Revenue": (
        "Proposals & Engagement Letters",
        "Invoicing & Payments",
        "Time Tracking & WIP",
        "Recurring Invoices",
    ),
    "Integrations & Tech": (
        "QuickBooks Online Integration",
        "IRS Transcripts Integration",
        "Email Sync",
        "Zapier Integration",
        "AI-Powered Reporting",
    ),
}

FEATURE_CATALOG: frozenset[str] = frozenset(
    feature for features in FEATURE_CATEGORIES.values() for feature in features
)


def get_onboarding_package(package_id: str) -> Optional[OnboardingPackage]:
    """Look up an onboarding package by catalog id."""
    for package in ONBOARDING_PACKAGES:
        if package.id == package_id:
            return package
    return None


class AccountExecutive(CamelModel):
    """Sales team member who owns a proposal."""

    id: str = Field(..., description="Unique id")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact email")


DEFAULT_ACCOUNT_EXECUTIVES: tuple[AccountExecutive, ...] = (
    AccountExecutive(id="ae_default", name="Sales Team", email="sales@example.com"),
)


class FirmData(CamelModel):
    """Everything collected about the prospect firm."""

    firm_name: str = Field(..., description="Firm name")
    contact_name: str = Field(..., description="Contact person")
    firm_size: int = Field(..., ge=1, description="Number of users")
    language: Language = Field(Language.ENGLISH, description="Proposal language")
    selected_plan: PlanType = Field(PlanType.PRO, description="Selected plan")
    selected_onboarding: OnboardingPackage = Field(
        default_factory=lambda: ONBOARDING_PACKAGES[0],
        description="Selected onboarding package (snapshot)",
    )
    features: list[str] = Field(default_factory=list, description="Desired features")
    transcript: str = Field("", description="Discovery call transcript")
    additional_context: str = Field("", description="Private notes for the generator")
    account_executive: Optional[AccountExecutive] = Field(None, description="Owning AE")

    @model_validator(mode="after")
    def _essentials_is_solo_only(self) -> "FirmData":
        # Essentials is only valid for a single user; fall back to Pro.
        if self.selected_plan == PlanType.ESSENTIALS and self.firm_size > 1:
            logger.info(
                f"[FirmData] Essentials is solo only ({self.firm_size} users), switching to Pro"
            )
            self.selected_plan = PlanType.PRO
        return self

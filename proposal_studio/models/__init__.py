"""Data models for Proposal Studio."""

from .common import CamelModel
from .firm import (
    PlanType,
    Language,
    OnboardingPackage,
    ONBOARDING_PACKAGES,
    FEATURE_CATEGORIES,
    FEATURE_CATALOG,
    get_onboarding_package,
    AccountExecutive,
    DEFAULT_ACCOUNT_EXECUTIVES,
    FirmData,
)
from .proposal import (
    ExecutiveSummary,
    OnboardingQuote,
    Quote,
    ProposalContent,
    SavedProposal,
)
from .error import ErrorResponse

__all__ = [
    "CamelModel",
    # Firm / catalog models
    "PlanType",
    "Language",
    "OnboardingPackage",
    "ONBOARDING_PACKAGES",
    "FEATURE_CATEGORIES",
    "FEATURE_CATALOG",
    "get_onboarding_package",
    "AccountExecutive",
    "DEFAULT_ACCOUNT_EXECUTIVES",
    "FirmData",
    # Proposal models
    "ExecutiveSummary",
    "OnboardingQuote",
    "Quote",
    "ProposalContent",
    "SavedProposal",
    # Errors
    "ErrorResponse",
]

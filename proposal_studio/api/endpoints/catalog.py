"""Static sales catalog: plans, languages, onboarding packages and features."""

from fastapi import APIRouter

from proposal_studio.models import FEATURE_CATEGORIES, ONBOARDING_PACKAGES, Language, PlanType
from proposal_studio.prompts import DEFAULT_PROMPT_TEMPLATE
from proposal_studio.services import KNOWN_PLACEHOLDERS

router = APIRouter()


@router.get("")
async def get_catalog() -> dict:
    """Everything the intake form needs to render its choices."""
    return {
        "plans": [plan.value for plan in PlanType],
        "languages": [language.value for language in Language],
        "onboardingPackages": [package.to_wire() for package in ONBOARDING_PACKAGES],
        "featureCategories": {name: list(features) for name, features in FEATURE_CATEGORIES.items()},
        "placeholders": [f"{{{{{name}}}}}" for name in KNOWN_PLACEHOLDERS],
        "defaultPromptTemplate": DEFAULT_PROMPT_TEMPLATE,
    }

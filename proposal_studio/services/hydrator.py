"""Prompt template hydration.

Replaces `{{placeholder}}` tokens in a user-editable prompt template with
values taken from FirmData, producing the literal request text.

- Only the known placeholders below are substituted; anything else is left as is.
- Substitution is a single pass: a substituted value is never scanned again,
  so firm data containing `{{...}}` cannot trigger further replacement.
- Empty transcript/context become an explicit "None provided." marker.
"""

import re
from typing import Callable

from proposal_studio.models import FirmData

NONE_PROVIDED = "None provided."

# {{name}} with optional inner whitespace
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def _or_none_provided(value: str) -> str:
    return value if value and value.strip() else NONE_PROVIDED


_RESOLVERS: dict[str, Callable[[FirmData], str]] = {
    "firmName": lambda data: data.firm_name,
    "contactName": lambda data: data.contact_name,
    "firmSize": lambda data: str(data.firm_size),
    "selectedPlan": lambda data: data.selected_plan.value,
    "onboardingName": lambda data: data.selected_onboarding.name,
    "onboardingPrice": lambda data: data.selected_onboarding.price_display,
    "onboardingFeatures": lambda data: ", ".join(data.selected_onboarding.features),
    "features": lambda data: ", ".join(data.features),
    "language": lambda data: data.language.value,
    "transcript": lambda data: _or_none_provided(data.transcript),
    "additionalContext": lambda data: _or_none_provided(data.additional_context),
}

KNOWN_PLACEHOLDERS: tuple[str, ...] = tuple(_RESOLVERS)


def hydrate_template(template: str, firm_data: FirmData) -> str:
    """
    Substitute every known placeholder in the template.

    Args:
        template: Prompt template containing `{{placeholder}}` tokens
        firm_data: Values to substitute

    Returns:
        Hydrated request text. Unknown placeholders are kept verbatim.
    """
    values = {name: resolve(firm_data) for name, resolve in _RESOLVERS.items()}

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in values:
            return values[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def find_placeholders(template: str) -> list[str]:
    """Placeholder names used in the template, in order of first appearance."""
    seen: list[str] = []
    for match in PLACEHOLDER_PATTERN.finditer(template):
        name = match.group(1)
        if name not in seen:
            seen.append(name)
    return seen


def find_unknown_placeholders(template: str) -> list[str]:
    """Placeholder names that hydration will leave untouched."""
    return [name for name in find_placeholders(template) if name not in _RESOLVERS]

"""Input validation utilities.

Checks run before any generation or store call; failures raise
InputValidationError with a user-facing message.
"""

import re

from proposal_studio.exceptions import InputValidationError
from proposal_studio.models import (
    AccountExecutive,
    FEATURE_CATALOG,
    FirmData,
    get_onboarding_package,
)

# Loose shape check only: something@something.tld
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MAX_NAME_LENGTH = 200


def validate_firm_data(firm_data: FirmData) -> FirmData:
    """
    Validate a firm before generating a proposal for it.

    - firm and contact names are required
    - an account executive must own the proposal
    - the onboarding package must come from the catalog
    - at least one feature, all taken from the feature catalog

    Args:
        firm_data: Collected firm data

    Returns:
        The same FirmData

    Raises:
        InputValidationError: invalid input
    """
    if not firm_data.firm_name.strip():
        raise InputValidationError("Firm name is required")
    if not firm_data.contact_name.strip():
        raise InputValidationError("Contact name is required")
    if len(firm_data.firm_name) > MAX_NAME_LENGTH:
        raise InputValidationError(
            f"Firm name is too long (max {MAX_NAME_LENGTH} characters)",
            details={"length": len(firm_data.firm_name)},
        )
    if firm_data.account_executive is None:
        raise InputValidationError("Select an account executive")

    package = get_onboarding_package(firm_data.selected_onboarding.id)
    if package is None:
        raise InputValidationError(
            f"Unknown onboarding package: {firm_data.selected_onboarding.id}",
            details={"onboarding_id": firm_data.selected_onboarding.id},
        )

    if not firm_data.features:
        raise InputValidationError("Select at least one feature")

    unknown = [feature for feature in firm_data.features if feature not in FEATURE_CATALOG]
    if unknown:
        raise InputValidationError(
            "Unknown features selected",
            details={"unknown_features": unknown},
        )

    return firm_data


def validate_account_executive(name: str, email: str) -> tuple[str, str]:
    """
    Validate a new account executive's fields.

    Returns:
        (name, email) stripped of surrounding whitespace

    Raises:
        InputValidationError: blank name or malformed email
    """
    name = (name or "").strip()
    email = (email or "").strip()

    if not name:
        raise InputValidationError("Account executive name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise InputValidationError(f"Account executive name is too long (max {MAX_NAME_LENGTH} characters)")
    if not EMAIL_PATTERN.match(email):
        raise InputValidationError(
            "Account executive email is invalid",
            details={"email": email},
        )
    return name, email


def validate_account_executive_list(account_executives: list[AccountExecutive]) -> None:
    """
    Validate a whole AE list before it replaces the stored one.

    Raises:
        InputValidationError: empty list or duplicate ids
    """
    if not account_executives:
        raise InputValidationError("You must have at least one Account Executive.")

    ids = [ae.id for ae in account_executives]
    duplicates = sorted({ae_id for ae_id in ids if ids.count(ae_id) > 1})
    if duplicates:
        raise InputValidationError(
            "Account executive ids must be unique",
            details={"duplicate_ids": duplicates},
        )


def validate_prompt_template(template: str) -> str:
    """
    Validate a custom prompt template.

    Raises:
        InputValidationError: blank template
    """
    if not template or not template.strip():
        raise InputValidationError("Prompt template must not be empty")
    return template

"""Utility modules."""

from .validation import (
    validate_firm_data,
    validate_account_executive,
    validate_account_executive_list,
    validate_prompt_template,
)

__all__ = [
    "validate_firm_data",
    "validate_account_executive",
    "validate_account_executive_list",
    "validate_prompt_template",
]

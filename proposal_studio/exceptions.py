"""
Custom exception hierarchy for Proposal Studio.
Each error carries a structured error code, a user-facing message and optional details.
"""

from typing import Optional, Any


class ProposalStudioError(Exception):
    """Base exception for Proposal Studio."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class GenerationError(ProposalStudioError):
    """Proposal generation failed (transport, empty reply or unparseable reply)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_GEN_001", details=details)


class StorageError(ProposalStudioError):
    """Backing store read or write failed."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_STORE_001", details=details)


class ClaudeClientError(ProposalStudioError):
    """Claude CLI communication error."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_CLAUDE_001", details=details)


class InputValidationError(ProposalStudioError):
    """Rejected input (400 response); raised before any store call."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)

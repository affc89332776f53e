"""Proposal generator - turns FirmData into structured ProposalContent.

Flow:
1. Hydrate the prompt template with the firm's data
2. Send it with the fixed system instruction to the generation transport
3. Strip code-fence markers from the reply and parse the JSON
4. Validate the JSON into ProposalContent

Every failure along the way surfaces as one GenerationError with a generic
"try again" message. There is no retry and no best-effort recovery of a
partially valid reply.
"""

import json
import logging
import re
from datetime import datetime
from typing import Optional

from pydantic import ValidationError

from proposal_studio.exceptions import GenerationError
from proposal_studio.models import FirmData, ProposalContent
from proposal_studio.prompts import SYSTEM_INSTRUCTION, DEFAULT_PROMPT_TEMPLATE
from proposal_studio.services.claude_client import ClaudeClient
from proposal_studio.services.hydrator import hydrate_template

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to generate proposal. Please try again."

_LEADING_FENCE = re.compile(r"^```[A-Za-z]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```$")


def strip_code_fences(text: str) -> str:
    """
    Remove a leading ```json / ``` marker and a trailing ``` marker.

    Examples:
        '```json\\n{"a": 1}\\n```' -> '{"a": 1}'
        '{"a": 1}'                -> '{"a": 1}'
    """
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_proposal_response(text: Optional[str]) -> ProposalContent:
    """
    Parse a raw generation reply into ProposalContent.

    Args:
        text: Raw reply, optionally wrapped in code fences

    Returns:
        ProposalContent

    Raises:
        GenerationError: empty reply, invalid JSON or unexpected shape
    """
    if not text or not text.strip():
        logger.error("[ProposalGenerator] empty response")
        raise GenerationError(GENERATION_FAILED_MESSAGE, details={"reason": "empty_response"})

    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"[ProposalGenerator] JSON parsing failed: {e}")
        raise GenerationError(GENERATION_FAILED_MESSAGE, details={"reason": "invalid_json"}) from e

    try:
        return ProposalContent.model_validate(data)
    except ValidationError as e:
        logger.error(f"[ProposalGenerator] unexpected response shape: {e.error_count()} errors")
        raise GenerationError(GENERATION_FAILED_MESSAGE, details={"reason": "invalid_shape"}) from e


class ProposalGenerator:
    """Generates proposal content from firm data."""

    def __init__(self, claude_client: Optional[ClaudeClient] = None):
        self.claude_client = claude_client or ClaudeClient()

    def build_request(self, firm_data: FirmData, template: Optional[str] = None) -> str:
        """Hydrated request text (default template when none is set)."""
        return hydrate_template(template or DEFAULT_PROMPT_TEMPLATE, firm_data)

    async def generate(
        self,
        firm_data: FirmData,
        template: Optional[str] = None,
    ) -> ProposalContent:
        """
        Generate proposal content.

        Args:
            firm_data: Prospect firm data
            template: Custom prompt template; the default one is used when empty

        Returns:
            ProposalContent

        Raises:
            GenerationError: on any transport or parsing failure
        """
        logger.info(f"[ProposalGenerator] generating proposal for: {firm_data.firm_name}")
        start_time = datetime.now()

        request_text = self.build_request(firm_data, template)

        try:
            response = await self.claude_client.complete(
                system_prompt=SYSTEM_INSTRUCTION,
                user_prompt=request_text,
            )
        except Exception as e:
            logger.error(f"[ProposalGenerator] generation call failed: {type(e).__name__}: {e}")
            raise GenerationError(
                GENERATION_FAILED_MESSAGE, details={"reason": "service_error"}
            ) from e

        content = parse_proposal_response(response)

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[ProposalGenerator] proposal generated: {elapsed:.1f}s")
        return content

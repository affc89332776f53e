"""ProposalGenerator unit tests.

- code fences are stripped before parsing
- every failure mode becomes one GenerationError
- the system instruction and hydrated template reach the transport
"""

import json

import pytest
from unittest.mock import AsyncMock

from proposal_studio.exceptions import ClaudeClientError, GenerationError
from proposal_studio.prompts import DEFAULT_PROMPT_TEMPLATE, SYSTEM_INSTRUCTION
from proposal_studio.services.proposal_generator import (
    GENERATION_FAILED_MESSAGE,
    ProposalGenerator,
    parse_proposal_response,
    strip_code_fences,
)


class TestStripCodeFences:
    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'

    def test_inner_backticks_kept(self):
        text = '{"body": "use ``` carefully"}'
        assert strip_code_fences(text) == text


class TestParseProposalResponse:
    def test_fenced_and_plain_parse_identically(self, sample_content_json):
        fenced = f"```json\n{sample_content_json}\n```"
        assert parse_proposal_response(fenced) == parse_proposal_response(sample_content_json)

    def test_fields_mapped(self, sample_content_json):
        content = parse_proposal_response(sample_content_json)
        assert content.executive_summary.title == "Reclaim Your Busy Season"
        assert content.quote.onboarding.price == "$999"
        assert content.quote.total_annual_cost == "$4,999"

    @pytest.mark.parametrize("text", [None, "", "   \n"])
    def test_empty_response_fails(self, text):
        with pytest.raises(GenerationError) as exc_info:
            parse_proposal_response(text)
        assert exc_info.value.message == GENERATION_FAILED_MESSAGE

    def test_invalid_json_fails(self):
        with pytest.raises(GenerationError):
            parse_proposal_response("Here is your proposal: {broken")

    def test_no_partial_recovery_from_leading_text(self, sample_content_json):
        with pytest.raises(GenerationError):
            parse_proposal_response(f"Sure! {sample_content_json}")

    def test_wrong_shape_fails(self):
        with pytest.raises(GenerationError):
            parse_proposal_response(json.dumps({"executiveSummary": {"title": "only"}}))


class TestGenerate:
    async def test_generate_success(self, mock_claude_client, sample_firm):
        generator = ProposalGenerator(claude_client=mock_claude_client)
        content = await generator.generate(sample_firm)

        assert content.quote.plan_name == "TaxDome Pro"
        mock_claude_client.complete.assert_awaited_once()
        kwargs = mock_claude_client.complete.await_args.kwargs
        assert kwargs["system_prompt"] == SYSTEM_INSTRUCTION
        assert "Firm Name: Acme" in kwargs["user_prompt"]

    async def test_custom_template_used(self, mock_claude_client, sample_firm):
        generator = ProposalGenerator(claude_client=mock_claude_client)
        await generator.generate(sample_firm, template="Quote {{firmName}} for {{firmSize}} users")

        kwargs = mock_claude_client.complete.await_args.kwargs
        assert kwargs["user_prompt"] == "Quote Acme for 5 users"

    async def test_empty_template_falls_back_to_default(self, mock_claude_client, sample_firm):
        generator = ProposalGenerator(claude_client=mock_claude_client)
        assert generator.build_request(sample_firm, "") == generator.build_request(
            sample_firm, DEFAULT_PROMPT_TEMPLATE
        )

    async def test_transport_failure_is_generation_error(self, sample_firm):
        client = AsyncMock()
        client.complete = AsyncMock(side_effect=ClaudeClientError("CLI exploded"))
        generator = ProposalGenerator(claude_client=client)

        with pytest.raises(GenerationError) as exc_info:
            await generator.generate(sample_firm)
        assert exc_info.value.message == GENERATION_FAILED_MESSAGE
        # no retry
        assert client.complete.await_count == 1

    async def test_fenced_reply_accepted(self, sample_firm, sample_content_json):
        client = AsyncMock()
        client.complete = AsyncMock(return_value=f"```json\n{sample_content_json}\n```")
        generator = ProposalGenerator(claude_client=client)

        content = await generator.generate(sample_firm)
        assert content.executive_summary.key_benefits == ["Automatic reminders", "Secure client portal"]

    async def test_empty_reply_is_generation_error(self, sample_firm):
        client = AsyncMock()
        client.complete = AsyncMock(return_value="")
        generator = ProposalGenerator(claude_client=client)

        with pytest.raises(GenerationError):
            await generator.generate(sample_firm)

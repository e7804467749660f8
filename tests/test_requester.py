"""Tests for requesting and decoding AI plans."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from chefly.errors import AIRateLimitError, AIServiceError, MalformedPlanError
from chefly.planner.models import MalformedPlan, ParsedPlan
from chefly.planner.requester import parse_plan_text, request_plan, strip_code_fences
from conftest import run


class TestStripCodeFences:
    def test_plain_json_unchanged(self):
        assert strip_code_fences('{"a": 1}') == '{"a": 1}'

    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self):
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_prose_around_object(self):
        text = 'Here is your plan:\n{"a": {"b": 2}}\nEnjoy!'
        assert strip_code_fences(text) == '{"a": {"b": 2}}'

    def test_single_line_fence(self):
        assert strip_code_fences('```json {"a": 1} ```') == '{"a": 1}'

    def test_prose_before_fence(self):
        assert strip_code_fences('Here you go:\n```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_top_level_array_left_alone(self):
        assert strip_code_fences('[{"a": 1}]') == '[{"a": 1}]'


class TestParsePlanText:
    def test_fenced_plan_decodes(self, plan_text, plan_payload):
        candidate = parse_plan_text(plan_text)
        assert isinstance(candidate, ParsedPlan)
        assert candidate.payload == plan_payload

    def test_single_line_fenced_plan_decodes(self, plan_payload):
        candidate = parse_plan_text("```json " + json.dumps(plan_payload) + " ```")
        assert isinstance(candidate, ParsedPlan)
        assert len(candidate.payload["meals"]) == 21

    def test_invalid_json_is_malformed(self):
        candidate = parse_plan_text("```json\n{not json at all\n```")
        assert isinstance(candidate, MalformedPlan)
        assert "invalid JSON" in candidate.reason

    def test_empty_is_malformed(self):
        assert isinstance(parse_plan_text(""), MalformedPlan)
        assert isinstance(parse_plan_text("   \n"), MalformedPlan)

    def test_non_object_json_still_parses(self):
        # Shape is the validator's job
        candidate = parse_plan_text("[1, 2, 3]")
        assert isinstance(candidate, ParsedPlan)
        assert candidate.payload == [1, 2, 3]


class TestRequestPlan:
    def test_returns_parsed_plan(self, plan_text, plan_payload):
        with patch("chefly.planner.requester.generate_text", new=AsyncMock(return_value=plan_text)) as mock:
            plan = run(request_plan("prompt", system_prompt="system"))

        assert plan.payload == plan_payload
        mock.assert_awaited_once()
        assert mock.await_args.kwargs["system_prompt"] == "system"

    def test_malformed_answer_raises(self):
        with patch("chefly.planner.requester.generate_text", new=AsyncMock(return_value="Sorry, I can't.")):
            with pytest.raises(MalformedPlanError):
                run(request_plan("prompt"))

    def test_rate_limit_propagates(self):
        mock = AsyncMock(side_effect=AIRateLimitError())
        with patch("chefly.planner.requester.generate_text", new=mock):
            with pytest.raises(AIRateLimitError):
                run(request_plan("prompt"))

    def test_service_error_propagates_without_retry(self):
        mock = AsyncMock(side_effect=AIServiceError("boom", status_code=503))
        with patch("chefly.planner.requester.generate_text", new=mock):
            with pytest.raises(AIServiceError) as exc_info:
                run(request_plan("prompt"))

        assert exc_info.value.status_code == 503
        assert mock.await_count == 1

    def test_prose_wrapped_answer(self, plan_payload):
        text = "Sure! " + json.dumps(plan_payload) + " Let me know."
        with patch("chefly.planner.requester.generate_text", new=AsyncMock(return_value=text)):
            plan = run(request_plan("prompt"))
        assert len(plan.payload["meals"]) == 21

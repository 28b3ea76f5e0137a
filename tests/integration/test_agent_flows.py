"""Integration tests for the AgeInfo agent end-to-end flows.

These tests construct a real ``strands.Agent`` instance (via ``create_agent``)
but replace the ``BedrockModel`` with a ``MagicMock`` so that no AWS API calls
are made and no credentials are required.

What is tested here (not in unit tests)
---------------------------------------
- ``create_agent`` wires the model, system prompt, and tools together correctly.
- The agent's ``tool_names`` list exposes exactly the three tools declared in
  ``agent.py`` and nothing else.
- Direct tool invocation via ``agent.tool.<name>()`` routes to the real tool
  implementation (tools are deterministic, no AWS involved).
- Validation errors raised inside tools come back as error results rather
  than crashing the agent.
"""

import datetime
from unittest.mock import MagicMock, patch

import pytest
from strands import Agent

from ageinfo.agent import SYSTEM_PROMPT, create_agent

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _build_agent() -> Agent:
    """Return a create_agent() instance with BedrockModel replaced by a MagicMock."""
    with patch("ageinfo.agent.BedrockModel") as mock_cls:
        mock_cls.return_value = MagicMock()
        return create_agent()


def _tool_result_is_error(result) -> bool:
    """Return True when the Strands SDK wraps a tool exception as an error dict."""
    return isinstance(result, dict) and result.get("status") == "error"


# ---------------------------------------------------------------------------
# Agent construction
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestAgentConstruction:
    def test_returns_strands_agent_instance(self, agent_runner: Agent) -> None:
        assert isinstance(agent_runner, Agent)

    def test_agent_messages_empty_on_creation(self, agent_runner: Agent) -> None:
        assert agent_runner.messages == []

    def test_agent_system_prompt_matches_module_constant(self, agent_runner: Agent) -> None:
        assert agent_runner.system_prompt == SYSTEM_PROMPT

    def test_agent_has_exactly_three_tools(self, agent_runner: Agent) -> None:
        assert sorted(agent_runner.tool_names) == ["calculate_age", "detect_locale", "get_current_datetime"]

    def test_two_independent_agent_instances_do_not_share_messages(self) -> None:
        agent_a = _build_agent()
        agent_b = _build_agent()
        agent_a.messages.append({"role": "user", "content": [{"text": "hi"}]})
        assert agent_b.messages == []

    def test_bedrock_model_not_called_at_import_time(self) -> None:
        with patch("ageinfo.agent.BedrockModel") as mock_cls:
            import ageinfo.agent  # noqa: F401
            mock_cls.assert_not_called()


# ---------------------------------------------------------------------------
# Direct tool invocation via agent.tool.<name>()
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestDirectToolInvocationThroughAgent:
    def test_calculate_age_via_agent_tool(self, agent_runner: Agent, frozen_clock) -> None:
        result = agent_runner.tool.calculate_age(birth_date="1990-05-15", locale="id")
        text = result if isinstance(result, str) else str(result)
        assert "12.450" in text, f"Expected Indonesian-grouped total days in: {text!r}"

    def test_calculate_age_default_locale_is_english(self, agent_runner: Agent, frozen_clock) -> None:
        result = agent_runner.tool.calculate_age(birth_date="1990-05-15")
        assert "12,450" in str(result)

    def test_get_current_datetime_via_agent_tool(self, agent_runner: Agent) -> None:
        import re
        text = str(agent_runner.tool.get_current_datetime())
        match = re.search(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", text)
        assert match, f"No ISO datetime found in tool result: {text!r}"
        assert datetime.datetime.fromisoformat(match.group()).year >= 2020

    def test_detect_locale_via_agent_tool(self, agent_runner: Agent) -> None:
        result = agent_runner.tool.detect_locale(accept_language="id-ID,id;q=0.9,en-US;q=0.8")
        import re
        assert re.search(r"['\"]id['\"]", str(result)), f"Expected locale 'id' in: {result!r}"


# ---------------------------------------------------------------------------
# Tool validation branches via direct invocation
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestToolValidationBranchesIntegration:
    """The Strands SDK catches tool exceptions and wraps them in a
    ``{'status': 'error', ...}`` dict rather than propagating them.
    """

    def test_invalid_birth_date_returns_error(self, agent_runner: Agent) -> None:
        result = agent_runner.tool.calculate_age(birth_date="not-a-date")
        assert _tool_result_is_error(result)

    def test_future_birth_date_returns_error(self, agent_runner: Agent) -> None:
        result = agent_runner.tool.calculate_age(birth_date="9999-12-31")
        assert _tool_result_is_error(result)

    def test_invalid_birth_time_returns_error(self, agent_runner: Agent) -> None:
        result = agent_runner.tool.calculate_age(birth_date="1990-05-15", birth_time="99:99")
        assert _tool_result_is_error(result)

    def test_unsupported_locale_returns_error(self, agent_runner: Agent) -> None:
        result = agent_runner.tool.calculate_age(birth_date="1990-05-15", locale="fr")
        assert _tool_result_is_error(result)


# ---------------------------------------------------------------------------
# Package public API
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestPackagePublicAPI:
    @pytest.mark.parametrize(
        "name",
        ["create_agent", "compute_age", "format_breakdown", "format_locale_number",
         "parse_accept_language", "parse_birth_input"],
    )
    def test_public_names_exported(self, name: str) -> None:
        import ageinfo
        assert name in ageinfo.__all__
        assert callable(getattr(ageinfo, name))

    def test_dunder_all_is_a_list(self) -> None:
        import ageinfo
        assert isinstance(ageinfo.__all__, list)


# ---------------------------------------------------------------------------
# Library flow without the agent
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestValidateComputeFormatFlow:
    def test_form_input_to_wire_payload(self, fixed_now) -> None:
        from ageinfo import compute_age, format_breakdown, parse_accept_language, parse_birth_input

        locale = parse_accept_language("id-ID,id;q=0.9,en-US;q=0.8")
        birth = parse_birth_input("1945-08-17", "10:00", name="Merdeka", now=fixed_now)
        wire = format_breakdown(compute_age(birth.birth, fixed_now), locale).to_wire()

        assert locale == "id"
        assert (wire["years"], wire["months"], wire["days"]) == (78, 9, 29)
        assert (wire["hours"], wire["minutes"], wire["seconds"]) == (2, 30, 45)
        assert wire["totalDays"] == "28.792"

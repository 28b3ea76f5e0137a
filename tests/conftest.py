"""Shared pytest fixtures for the ageinfo test suite.

Fixtures defined here are available to all test modules (unit and
integration) without any import.

No AWS credentials are required — the ``agent_runner`` fixture patches
``BedrockModel`` before any SDK initialisation can attempt a network call.
"""

import datetime
import os

import pytest
from unittest.mock import MagicMock, patch

# ---------------------------------------------------------------------------
# Ensure MODEL_ARN is set before any test module is collected.
# ``create_agent`` refuses to build an agent without it, and the module-level
# ``settings = Settings()`` call in config.py runs at collection time.
# ---------------------------------------------------------------------------
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1::foundation-model/test-model")
os.environ.setdefault("AGEINFO_TIMEZONE", "UTC")

UTC = datetime.timezone.utc


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel`` — no AWS credentials needed."""
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out.

    The agent's tool registry, system prompt, and message list are live, but
    the underlying model never makes a Bedrock API call.
    """
    with patch("ageinfo.agent.BedrockModel", return_value=mock_bedrock_model):
        from ageinfo import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Clock fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_now() -> datetime.datetime:
    """A fixed evaluation instant: 2024-06-15 12:30:45 UTC."""
    return datetime.datetime(2024, 6, 15, 12, 30, 45, tzinfo=UTC)


@pytest.fixture
def frozen_clock(fixed_now: datetime.datetime):
    """Patch every module-level ``system_clock`` reference to return ``fixed_now``."""
    clock = MagicMock(return_value=fixed_now)
    with patch("ageinfo.tools.system_clock", clock), patch("main.system_clock", clock):
        yield clock


@pytest.fixture
def leap_day_birth() -> datetime.datetime:
    """A leap-day birth instant (1996 is a leap year)."""
    return datetime.datetime(1996, 2, 29, tzinfo=UTC)

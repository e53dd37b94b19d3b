"""Shared test fixtures and configuration."""

import itertools
from unittest.mock import MagicMock

import pytest

from workflow_engine.config import Settings
from workflow_engine.engine import WorkflowEngine
from workflow_engine.gateway import ProviderGateway
from workflow_engine.registry import AgentRegistry
from workflow_engine.types import (
    Agent,
    Provider,
    ProviderResponse,
    StepStatus,
    WorkflowContext,
    WorkflowStep,
)


@pytest.fixture
def settings():
    """Settings isolated from the developer's .env file."""
    return Settings(
        _env_file=None,
        gemini_api_key="test-gemini-key",
        step_timeout=5.0,
        max_sessions=50,
        session_ttl=None,
        default_debate_rounds=2,
        integrator_agent_id="integrator-finalizer",
    )


@pytest.fixture
def mock_gateway():
    """A gateway whose responses name the agent and a running call number."""
    gateway = MagicMock(spec=ProviderGateway)
    counter = itertools.count(1)

    def respond(agent, prompt):
        return ProviderResponse(text=f"{agent.id} output {next(counter)}")

    gateway.send.side_effect = respond
    return gateway


@pytest.fixture
def registry():
    """A registry with the default agents."""
    return AgentRegistry()


@pytest.fixture
def engine(settings, registry, mock_gateway):
    """An engine wired to the mock gateway."""
    return WorkflowEngine(settings=settings, registry=registry, gateway=mock_gateway)


@pytest.fixture
def sample_agent():
    """A custom agent on a non-default provider."""
    return Agent(
        id="test-agent",
        name="Test Agent",
        role="Testing",
        system_prompt="You test things.",
        temperature=0.5,
        max_tokens=1000,
        model="gpt-4o",
        provider=Provider.OPENAI,
    )


@pytest.fixture
def sample_context():
    """A typical workflow context."""
    return WorkflowContext(
        project_path="/repo",
        selected_code="function f(x){return x}",
        file_path="src/f.js",
        user_goal="add input validation",
        additional_context="runs in the browser",
    )


@pytest.fixture
def make_step():
    """Factory for terminal steps with a given output and status."""

    def _make(output: str | None, status: StepStatus = StepStatus.COMPLETED) -> WorkflowStep:
        step = WorkflowStep(agent_id="primary-coder", input="prompt")
        step.start()
        if status == StepStatus.COMPLETED:
            step.complete(output or "")
        else:
            step.fail(output or "boom")
        return step

    return _make

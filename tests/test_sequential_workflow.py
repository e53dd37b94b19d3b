"""Tests for the sequential workflow driver."""

from unittest.mock import MagicMock

import pytest

from workflow_engine.credentials import CredentialStore
from workflow_engine.engine import WorkflowEngine
from workflow_engine.exceptions import AgentNotFoundError, AuthenticationError
from workflow_engine.gateway import ProviderGateway
from workflow_engine.types import (
    Provider,
    ProviderResponse,
    SessionStatus,
    StepStatus,
    WorkflowContext,
    WorkflowType,
)
from workflow_engine.workflows import DEFAULT_AGENT_SEQUENCE


def test_default_team(engine, mock_gateway, sample_context):
    session = engine.run_sequential_workflow(sample_context)

    assert session.type == WorkflowType.SEQUENTIAL
    assert session.title == "AI Team: src/f.js"
    assert [s.agent_id for s in session.steps] == list(DEFAULT_AGENT_SEQUENCE)
    assert mock_gateway.send.call_count == 5


def test_three_agent_pipeline(engine, sample_context):
    agents = ["planner-architect", "primary-coder", "critic-reviewer"]
    session = engine.run_sequential_workflow(sample_context, agents)

    assert session.status == SessionStatus.COMPLETED
    assert len(session.steps) == 3
    assert session.result.final_output == "critic-reviewer output 3"
    assert session.result.confidence == 100.0

    third = session.steps[2].input
    assert "Sequential Workflow Step 3/3" in third
    assert "planner-architect output 1" in third
    assert "primary-coder output 2" in third
    assert "```\nprimary-coder output 2\n```" in third


def test_every_step_sees_all_prior_outputs(engine, sample_context):
    session = engine.run_sequential_workflow(sample_context)

    for index, step in enumerate(session.steps):
        for earlier in session.steps[:index]:
            assert earlier.output in step.input
        assert f"Step {index + 1}/5" in step.input


def test_narrative_uses_agent_names(engine, sample_context):
    session = engine.run_sequential_workflow(sample_context, ["planner-architect", "primary-coder"])
    assert "\nSystem Architect: planner-architect output 1\n" in session.steps[1].input


def test_first_step_uses_original_code(engine, sample_context):
    session = engine.run_sequential_workflow(sample_context, ["security-auditor"])
    assert f"```\n{sample_context.selected_code}\n```" in session.steps[0].input


def test_empty_agent_list(engine, mock_gateway, sample_context):
    session = engine.run_sequential_workflow(sample_context, [])

    assert session.status == SessionStatus.COMPLETED
    assert session.steps == []
    assert session.result.final_output == sample_context.selected_code
    assert session.result.confidence == 0.0
    mock_gateway.send.assert_not_called()


def test_unknown_agent(engine, mock_gateway, sample_context):
    with pytest.raises(AgentNotFoundError) as exc_info:
        engine.run_sequential_workflow(sample_context, ["planner-architect", "ghost", "primary-coder"])

    session = engine.get_session(exc_info.value.session_id)
    assert session.status == SessionStatus.FAILED
    assert [s.agent_id for s in session.steps] == ["planner-architect", "ghost"]
    assert session.steps[1].status == StepStatus.FAILED
    assert mock_gateway.send.call_count == 1


def test_missing_credential_fails_first_step(settings, registry, sample_context):
    credentials = CredentialStore(settings)
    credentials.set(Provider.GEMINI, "")
    client_factory = MagicMock()
    gateway = ProviderGateway(credentials, timeout=5.0, client_factory=client_factory)
    engine = WorkflowEngine(
        settings=settings, registry=registry, credentials=credentials, gateway=gateway
    )

    with pytest.raises(AuthenticationError, match="API key not found for provider: gemini") as exc_info:
        engine.run_sequential_workflow(sample_context, ["planner-architect", "primary-coder"])

    session = engine.get_session(exc_info.value.session_id)
    assert session.status == SessionStatus.FAILED
    assert session.result is None
    assert len(session.steps) == 1
    assert session.steps[0].status == StepStatus.FAILED
    assert "API key not found" in session.steps[0].output
    client_factory.assert_not_called()


def test_degraded_step_does_not_abort(engine, mock_gateway, sample_context):
    responses = iter([
        ProviderResponse(text="No response generated", degraded=True, detail="bad shape"),
        ProviderResponse(text="real code"),
    ])
    mock_gateway.send.side_effect = lambda agent, prompt: next(responses)

    session = engine.run_sequential_workflow(sample_context, ["planner-architect", "primary-coder"])

    assert session.status == SessionStatus.COMPLETED
    assert session.steps[0].metadata["degraded"] is True
    assert "degraded" not in session.steps[1].metadata
    assert session.result.final_output == "real code"


def test_no_selected_code(engine):
    session = engine.run_sequential_workflow(WorkflowContext(user_goal="write a parser"), ["primary-coder"])

    assert session.title == "AI Team: Code Analysis"
    assert session.result.final_output == "primary-coder output 1"
    assert session.result.changes == []

"""Tests for the WorkflowEngine façade."""

from concurrent.futures import ThreadPoolExecutor

from workflow_engine import WorkflowEngine
from workflow_engine.registry import AgentRegistry
from workflow_engine.sessions import SessionStore
from workflow_engine.types import Provider, SessionStatus, WorkflowContext


class TestSessions:
    """Session access through the engine."""

    def test_get_session_is_idempotent(self, engine, sample_context):
        session = engine.run_sequential_workflow(sample_context, ["primary-coder"])

        first = engine.get_session(session.id)
        second = engine.get_session(session.id)
        assert first is second is session
        assert first.to_dict() == second.to_dict()

    def test_get_unknown_session(self, engine):
        assert engine.get_session("debate-missing") is None

    def test_list_and_delete(self, engine, sample_context):
        a = engine.run_sequential_workflow(sample_context, ["primary-coder"])
        b = engine.run_debate_workflow(sample_context, rounds=1)

        ids = {s.id for s in engine.list_sessions()}
        assert ids == {a.id, b.id}

        assert engine.delete_session(a.id) is True
        assert engine.delete_session(a.id) is False
        assert [s.id for s in engine.list_sessions()] == [b.id]

    def test_retention_from_settings(self, settings, mock_gateway, sample_context):
        settings.max_sessions = 2
        engine = WorkflowEngine(settings=settings, gateway=mock_gateway)
        assert engine.store._max_sessions == 2

        for _ in range(3):
            engine.run_sequential_workflow(sample_context, ["primary-coder"])
        assert len(engine.list_sessions()) == 2

    def test_cleanup_sessions(self, settings, registry, mock_gateway):
        engine = WorkflowEngine(
            settings=settings,
            registry=registry,
            store=SessionStore(session_ttl=1),
            gateway=mock_gateway,
        )
        session = engine.run_sequential_workflow(WorkflowContext(), ["primary-coder"])
        session.updated_at -= 10
        assert engine.cleanup_sessions() == 1
        assert engine.get_session(session.id) is None


class TestAgents:
    """Agent management through the engine."""

    def test_list_defaults(self, engine):
        assert len(engine.list_agents()) == 5

    def test_add_update_delete(self, engine, sample_agent):
        engine.add_agent(sample_agent)
        assert engine.get_agent("test-agent") is sample_agent

        assert engine.update_agent("test-agent", max_tokens=2048) is True
        assert engine.get_agent("test-agent").max_tokens == 2048

        assert engine.delete_agent("test-agent") is True
        assert engine.get_agent("test-agent") is None
        assert engine.update_agent("test-agent", max_tokens=1) is False

    def test_empty_registry_is_kept(self, settings, mock_gateway):
        engine = WorkflowEngine(settings=settings, registry=AgentRegistry(agents=[]), gateway=mock_gateway)
        assert engine.list_agents() == []


def test_set_credential(settings):
    engine = WorkflowEngine(settings=settings)
    engine.set_credential("openai", "sk-new")
    assert engine.credentials.get(Provider.OPENAI) == "sk-new"
    assert engine.gateway.credentials is engine.credentials


def test_concurrent_workflows(engine, sample_context):
    def run(index):
        if index % 2:
            return engine.run_debate_workflow(sample_context, rounds=1)
        return engine.run_sequential_workflow(sample_context, ["planner-architect", "primary-coder"])

    with ThreadPoolExecutor(max_workers=4) as pool:
        sessions = list(pool.map(run, range(8)))

    assert len({s.id for s in sessions}) == 8
    assert all(s.status == SessionStatus.COMPLETED for s in sessions)
    for session in sessions:
        expected = 3 if session.type.value == "debate" else 2
        assert len(session.steps) == expected
    assert len(engine.list_sessions()) == 8

"""Workflow engine façade.

The WorkflowEngine owns the agent registry, the session store, the
credential store and the provider gateway, and exposes the in-process API
used by callers to run workflows and manage agents and sessions.
"""

from typing import Any

from .cancellation import CancellationToken
from .config import Settings, get_settings
from .credentials import CredentialStore
from .gateway import ProviderGateway
from .logging import get_logger
from .registry import AgentRegistry
from .sessions import SessionStore
from .types import Agent, Provider, WorkflowContext, WorkflowSession
from .workflows import DEFAULT_AGENT_SEQUENCE, DebateWorkflow, SequentialWorkflow
from .workflows.debate import DEFAULT_CRITIC_ID, DEFAULT_PROPOSER_ID

logger = get_logger(__name__)


class WorkflowEngine:
    """Runs debate and sequential workflows over a shared agent registry.

    Several workflows may run concurrently on different threads; they share
    only the registry and the session store, both of which lock around
    individual operations rather than whole runs.

    Example:
        engine = WorkflowEngine()
        engine.set_credential("gemini", "...")
        session = engine.run_sequential_workflow(
            WorkflowContext(selected_code="def f(x): return x", user_goal="add validation"),
            ["planner-architect", "primary-coder"],
        )
        print(session.result.final_output)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: AgentRegistry | None = None,
        store: SessionStore | None = None,
        credentials: CredentialStore | None = None,
        gateway: ProviderGateway | None = None,
    ):
        """Initialize the engine.

        Args:
            settings: Engine settings (loaded from the environment if omitted).
            registry: Agent registry (defaults to the built-in roster).
            store: Session store (retention taken from settings if omitted).
            credentials: API key lookup (seeded from settings if omitted).
            gateway: Provider gateway (built from credentials if omitted).
        """
        self.settings = settings or get_settings()
        self.registry = registry if registry is not None else AgentRegistry()
        self.store = store or SessionStore(
            max_sessions=self.settings.max_sessions,
            session_ttl=self.settings.session_ttl,
        )
        self.credentials = credentials or CredentialStore(self.settings)
        self.gateway = gateway or ProviderGateway(
            self.credentials,
            timeout=self.settings.step_timeout,
        )

        self._debate = DebateWorkflow(
            self.registry,
            self.gateway,
            self.store,
            integrator_id=self.settings.integrator_agent_id,
        )
        self._sequential = SequentialWorkflow(self.registry, self.gateway, self.store)

    # ==================== workflows ====================

    def run_debate_workflow(
        self,
        context: WorkflowContext,
        proposer_id: str = DEFAULT_PROPOSER_ID,
        critic_id: str = DEFAULT_CRITIC_ID,
        rounds: int | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> WorkflowSession:
        """Run an adversarial debate between a proposer and a critic.

        Args:
            context: Task description.
            proposer_id: Agent proposing code.
            critic_id: Agent reviewing each proposal.
            rounds: Number of rounds (settings default if omitted).
            cancel_token: Optional cancellation signal checked before each step.

        Returns:
            The completed session. On failure the error is raised with its
            ``session_id`` set; the failed session stays retrievable.
        """
        if rounds is None:
            rounds = self.settings.default_debate_rounds
        return self._debate.run(context, proposer_id, critic_id, rounds, cancel_token)

    def run_sequential_workflow(
        self,
        context: WorkflowContext,
        agent_ids: list[str] | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> WorkflowSession:
        """Run agents one after another, each building on the previous output.

        Args:
            context: Task description.
            agent_ids: Agents in order (default team if omitted).
            cancel_token: Optional cancellation signal checked before each step.

        Returns:
            The completed session. On failure the error is raised with its
            ``session_id`` set; the failed session stays retrievable.
        """
        if agent_ids is None:
            agent_ids = list(DEFAULT_AGENT_SEQUENCE)
        return self._sequential.run(context, agent_ids, cancel_token)

    # ==================== sessions ====================

    def get_session(self, session_id: str) -> WorkflowSession | None:
        return self.store.get(session_id)

    def list_sessions(self) -> list[WorkflowSession]:
        """All stored sessions, newest first."""
        return self.store.list()

    def delete_session(self, session_id: str) -> bool:
        return self.store.delete(session_id)

    def cleanup_sessions(self) -> int:
        """Apply the retention policy; returns the number of evicted sessions."""
        return self.store.cleanup_expired()

    # ==================== agents ====================

    def get_agent(self, agent_id: str) -> Agent | None:
        return self.registry.get(agent_id)

    def list_agents(self) -> list[Agent]:
        return self.registry.list()

    def add_agent(self, agent: Agent) -> None:
        self.registry.register(agent)

    def update_agent(self, agent_id: str, **patch: Any) -> bool:
        return self.registry.update(agent_id, **patch)

    def delete_agent(self, agent_id: str) -> bool:
        return self.registry.remove(agent_id)

    # ==================== credentials ====================

    def set_credential(self, provider: Provider | str, api_key: str) -> None:
        """Replace the API key used for a provider."""
        self.credentials.set(provider, api_key)
        logger.info(f"credential updated for {Provider(provider).value}")

"""Shared step execution for workflow drivers.

A driver opens a session, executes steps one at a time through the provider
gateway and, once all steps have finished, synthesizes the session result.
Any failure marks the triggering step and the session as failed and is
re-raised to the caller with the session id attached.
"""

from typing import Callable

from ..cancellation import CancellationToken
from ..exceptions import AgentNotFoundError, WorkflowEngineError
from ..gateway import ProviderGateway
from ..logging import get_logger
from ..prompts import compose_full_prompt
from ..registry import AgentRegistry
from ..sessions import SessionStore
from ..synthesis import synthesize
from ..types import Agent, WorkflowContext, WorkflowSession, WorkflowStep, WorkflowType

logger = get_logger(__name__)


class WorkflowRunner:
    """Base class for the debate and sequential drivers."""

    workflow_type: WorkflowType

    def __init__(
        self,
        registry: AgentRegistry,
        gateway: ProviderGateway,
        store: SessionStore,
    ):
        self.registry = registry
        self.gateway = gateway
        self.store = store

    def _open_session(
        self,
        title: str,
        description: str,
        context: WorkflowContext,
    ) -> WorkflowSession:
        """Create a running session and make it visible in the store."""
        session = WorkflowSession.create(self.workflow_type, title, description, context)
        session.start()
        self.store.add(session)
        logger.info(f"started {self.workflow_type.value} session {session.id}: {description}")
        return session

    def _resolve_agent(self, session: WorkflowSession, agent_id: str) -> Agent:
        """Look up an agent, failing a placeholder step if it is unknown.

        The gateway is never called for an unknown agent.
        """
        agent = self.registry.get(agent_id)
        if agent is None:
            error = AgentNotFoundError(agent_id)
            step = WorkflowStep(agent_id=agent_id, input="")
            session.add_step(step)
            step.fail(str(error))
            raise error
        return agent

    def _execute_step(
        self,
        session: WorkflowSession,
        agent: Agent,
        prompt: str,
        cancel_token: CancellationToken | None = None,
    ) -> WorkflowStep:
        """Run one request/response exchange and append it to the session.

        The step is appended as running before the provider call and is
        mutated in place to its terminal state.

        Raises:
            WorkflowCancelledError: If the token was cancelled before the step.
            AuthenticationError: If the provider has no usable credential.
            ProviderCallError: If the provider call failed.
        """
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        step = WorkflowStep(agent_id=agent.id, input=compose_full_prompt(agent, prompt))
        session.add_step(step)
        step.start()

        try:
            response = self.gateway.send(agent, step.input)
        except Exception as e:
            step.fail(str(e))
            session.touch()
            logger.warning(f"step {step.id} on {agent.id} failed: {e}")
            raise

        metadata = {"provider": agent.provider.value, "model": agent.model}
        if response.degraded:
            metadata["degraded"] = True
            metadata["degraded_reason"] = response.detail
        step.complete(response.text, **metadata)
        session.touch()
        logger.debug(f"step {step.id} on {agent.id} completed in {step.duration:.2f}s")
        return step

    def _run(self, session: WorkflowSession, body: Callable[[], str]) -> WorkflowSession:
        """Drive ``body`` to completion and synthesize the result.

        Args:
            session: Running session the body appends steps to.
            body: Executes all steps and returns the final output.

        Returns:
            The completed session.
        """
        try:
            final_output = body()
        except Exception as e:
            session.fail()
            if isinstance(e, WorkflowEngineError):
                e.session_id = session.id
            logger.error(f"{self.workflow_type.value} session {session.id} failed: {e}")
            raise

        original_code = session.context.selected_code or ""
        session.complete(synthesize(final_output, session.steps, original_code))
        logger.info(
            f"{self.workflow_type.value} session {session.id} completed with "
            f"{len(session.steps)} step(s)"
        )
        return session

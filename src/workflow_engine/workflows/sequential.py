"""Sequential workflow driver.

A straight-line pipeline: each agent receives the previous agent's output
plus the running narrative of everything said so far.
"""

from ..cancellation import CancellationToken
from ..prompts import build_sequential_prompt
from ..types import WorkflowContext, WorkflowSession, WorkflowType
from .base import WorkflowRunner

DEFAULT_AGENT_SEQUENCE = (
    "planner-architect",
    "primary-coder",
    "critic-reviewer",
    "security-auditor",
    "integrator-finalizer",
)


class SequentialWorkflow(WorkflowRunner):
    """Runs an ordered list of agents, each building on the last."""

    workflow_type = WorkflowType.SEQUENTIAL

    def run(
        self,
        context: WorkflowContext,
        agent_ids: list[str] | tuple[str, ...] = DEFAULT_AGENT_SEQUENCE,
        cancel_token: CancellationToken | None = None,
    ) -> WorkflowSession:
        """Run the pipeline.

        Args:
            context: Task description seeding every prompt.
            agent_ids: Agents in execution order.
            cancel_token: Optional cooperative cancellation signal.

        Returns:
            The completed session.

        Raises:
            ConfigurationError: If an agent id is not registered.
            AuthenticationError: If an agent's provider has no credential.
            ProviderCallError: If a provider call fails.
            WorkflowCancelledError: If cancelled between steps.
        """
        agent_ids = list(agent_ids)
        session = self._open_session(
            title=f"AI Team: {context.file_path or 'Code Analysis'}",
            description=f"Sequential workflow with {len(agent_ids)} agents",
            context=context,
        )

        def body() -> str:
            current_output = context.selected_code or ""
            workflow_context = ""

            for index, agent_id in enumerate(agent_ids):
                agent = self._resolve_agent(session, agent_id)
                previous_steps = [(s.agent_id, s.output) for s in session.steps]

                prompt = build_sequential_prompt(
                    step_number=index + 1,
                    total_steps=len(agent_ids),
                    agent_role=agent.role,
                    current_code=current_output,
                    user_goal=context.user_goal,
                    workflow_context=workflow_context,
                    previous_steps=previous_steps,
                )
                step = self._execute_step(session, agent, prompt, cancel_token)

                current_output = step.output or current_output
                workflow_context += f"\n{agent.name}: {step.output}\n"

            return current_output

        return self._run(session, body)

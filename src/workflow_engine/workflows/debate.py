"""Debate workflow driver.

A proposer and a critic exchange a fixed number of rounds; after the final
round an integrator merges the last proposal with the last review.
"""

from ..cancellation import CancellationToken
from ..gateway import ProviderGateway
from ..prompts import build_finalize_prompt, build_proposal_prompt, build_review_prompt
from ..registry import AgentRegistry
from ..sessions import SessionStore
from ..types import WorkflowContext, WorkflowSession, WorkflowType
from .base import WorkflowRunner

DEFAULT_PROPOSER_ID = "primary-coder"
DEFAULT_CRITIC_ID = "critic-reviewer"
DEFAULT_INTEGRATOR_ID = "integrator-finalizer"


def format_round(round_number: int, proposal: str | None, review: str | None) -> str:
    """Render one round for the debate history transcript."""
    return f"\n--- Round {round_number} ---\nProposal: {proposal}\nReview: {review}\n"


class DebateWorkflow(WorkflowRunner):
    """Runs adversarial proposer/critic rounds followed by integration."""

    workflow_type = WorkflowType.DEBATE

    def __init__(
        self,
        registry: AgentRegistry,
        gateway: ProviderGateway,
        store: SessionStore,
        integrator_id: str = DEFAULT_INTEGRATOR_ID,
    ):
        super().__init__(registry, gateway, store)
        self.integrator_id = integrator_id

    def run(
        self,
        context: WorkflowContext,
        proposer_id: str = DEFAULT_PROPOSER_ID,
        critic_id: str = DEFAULT_CRITIC_ID,
        rounds: int = 5,
        cancel_token: CancellationToken | None = None,
    ) -> WorkflowSession:
        """Run a debate.

        With ``rounds <= 0`` no step runs and the session completes with the
        original code as its output.

        Args:
            context: Task description seeding every prompt.
            proposer_id: Agent proposing improved code each round.
            critic_id: Agent reviewing each proposal.
            rounds: Number of proposal/review rounds.
            cancel_token: Optional cooperative cancellation signal.

        Returns:
            The completed session.

        Raises:
            ConfigurationError: If a participant is not registered.
            AuthenticationError: If a participant's provider has no credential.
            ProviderCallError: If a provider call fails.
            WorkflowCancelledError: If cancelled between steps.
        """
        session = self._open_session(
            title=f"AI Debate: {context.file_path or 'Code Analysis'}",
            description=f"{rounds}-round debate between {proposer_id} and {critic_id}",
            context=context,
        )

        def body() -> str:
            current_proposal = context.selected_code or ""
            debate_history = ""

            for round_number in range(1, rounds + 1):
                proposer = self._resolve_agent(session, proposer_id)
                proposal_step = self._execute_step(
                    session,
                    proposer,
                    build_proposal_prompt(
                        round_number,
                        current_proposal,
                        context.user_goal,
                        debate_history,
                        context.additional_context,
                    ),
                    cancel_token,
                )
                current_proposal = proposal_step.output or current_proposal

                critic = self._resolve_agent(session, critic_id)
                review_step = self._execute_step(
                    session,
                    critic,
                    build_review_prompt(
                        round_number,
                        current_proposal,
                        context.user_goal,
                        debate_history,
                        context.additional_context,
                    ),
                    cancel_token,
                )

                debate_history += format_round(
                    round_number, proposal_step.output, review_step.output
                )

                if round_number == rounds:
                    integrator = self._resolve_agent(session, self.integrator_id)
                    final_step = self._execute_step(
                        session,
                        integrator,
                        build_finalize_prompt(
                            current_proposal,
                            review_step.output,
                            debate_history,
                            context.user_goal,
                        ),
                        cancel_token,
                    )
                    current_proposal = final_step.output or current_proposal

            return current_proposal

        return self._run(session, body)

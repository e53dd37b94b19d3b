"""Custom exception hierarchy for the workflow engine.

This module defines all custom exceptions used throughout the engine,
organized into logical categories: configuration errors, client errors,
and workflow control errors.
"""


class WorkflowEngineError(Exception):
    """Base exception for all workflow engine errors.

    Attributes:
        session_id: ID of the workflow session that was aborted by this
            error, set by the workflow driver before the error propagates.
    """

    session_id: str | None = None


# =============================================================================
# Configuration Errors - Invalid agents, unknown ids, bad settings
# =============================================================================

class ConfigurationError(WorkflowEngineError):
    """Invalid configuration or reference to an unknown agent."""


class AgentNotFoundError(ConfigurationError):
    """Requested agent id is not registered."""

    def __init__(self, agent_id: str):
        self.agent_id = agent_id
        super().__init__(f"Agent not found: {agent_id}")


# =============================================================================
# Client Errors - Issues with LLM API interactions
# =============================================================================

class ClientError(WorkflowEngineError):
    """Base class for LLM provider errors."""


class AuthenticationError(ClientError):
    """API key is invalid or missing."""


class ProviderCallError(ClientError):
    """Provider returned a non-success response or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (status {status_code})"
        super().__init__(message)


class RateLimitError(ProviderCallError):
    """Rate limit exceeded."""

    def __init__(self, message: str = "Rate limit exceeded", retry_after: float | None = None):
        self.retry_after = retry_after
        if retry_after:
            message = f"{message}. Retry after: {retry_after}s"
        super().__init__(message, status_code=429)


class ProviderUnavailableError(ProviderCallError):
    """Provider API is temporarily unavailable."""


class StepTimeoutError(ProviderCallError):
    """Provider call exceeded the per-step deadline."""

    def __init__(self, provider: str, timeout: float | None):
        self.provider = provider
        self.timeout = timeout
        super().__init__(f"{provider} call timed out after {timeout}s")


# =============================================================================
# Workflow Errors - State machine and control flow
# =============================================================================

class StateTransitionError(WorkflowEngineError):
    """A step or session was moved through an illegal status transition."""

    def __init__(self, kind: str, current: str, target: str):
        self.kind = kind
        self.current = current
        self.target = target
        super().__init__(f"Illegal {kind} transition: {current} -> {target}")


class WorkflowCancelledError(WorkflowEngineError):
    """Raised when a running workflow observes its cancellation token."""


# =============================================================================
# Warnings - Non-fatal conditions
# =============================================================================

class ResponseShapeWarning(UserWarning):
    """Provider response did not have the expected shape.

    The call is treated as successful and a placeholder output is used, so
    a multi-step workflow is not aborted by a parse hiccup alone.
    """

"""Workflow Engine - multi-agent workflow orchestration.

This package drives several independently configured LLM agents through
structured multi-step conversations (adversarial debates and sequential
pipelines) and synthesizes a final result from the step history.
"""

from .cancellation import CancellationToken
from .engine import WorkflowEngine
from .exceptions import (
    AgentNotFoundError,
    AuthenticationError,
    ClientError,
    ConfigurationError,
    ProviderCallError,
    ProviderUnavailableError,
    RateLimitError,
    ResponseShapeWarning,
    StateTransitionError,
    StepTimeoutError,
    WorkflowCancelledError,
    WorkflowEngineError,
)
from .types import (
    Agent,
    FileChange,
    Provider,
    ProviderResponse,
    SessionStatus,
    StepStatus,
    WorkflowContext,
    WorkflowResult,
    WorkflowSession,
    WorkflowStep,
    WorkflowType,
)

__all__ = [
    # engine
    "WorkflowEngine",
    "CancellationToken",
    # types
    "Agent",
    "FileChange",
    "Provider",
    "ProviderResponse",
    "SessionStatus",
    "StepStatus",
    "WorkflowContext",
    "WorkflowResult",
    "WorkflowSession",
    "WorkflowStep",
    "WorkflowType",
    # exceptions
    "WorkflowEngineError",
    "ConfigurationError",
    "AgentNotFoundError",
    "ClientError",
    "AuthenticationError",
    "ProviderCallError",
    "RateLimitError",
    "ProviderUnavailableError",
    "StepTimeoutError",
    "StateTransitionError",
    "WorkflowCancelledError",
    "ResponseShapeWarning",
]

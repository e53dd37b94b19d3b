"""Core types for the workflow engine.

These types describe agents, workflow sessions and their steps. Sessions
and steps carry their own lifecycle transitions so that the drivers cannot
move them backwards.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from .exceptions import ConfigurationError, StateTransitionError


class Provider(Enum):
    """Backend vendor an agent is dispatched to."""
    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    TOGETHER = "together"


class StepStatus(Enum):
    """Status of a single workflow step."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


# sessions share the step lifecycle
SessionStatus = StepStatus


class WorkflowType(Enum):
    """Topology of a workflow session."""
    DEBATE = "debate"
    SEQUENTIAL = "sequential"


_TRANSITIONS: dict[StepStatus, set[StepStatus]] = {
    StepStatus.PENDING: {StepStatus.RUNNING, StepStatus.FAILED},
    StepStatus.RUNNING: {StepStatus.COMPLETED, StepStatus.FAILED},
    StepStatus.COMPLETED: set(),
    StepStatus.FAILED: set(),
}


def _check_transition(kind: str, current: StepStatus, target: StepStatus) -> None:
    if target not in _TRANSITIONS[current]:
        raise StateTransitionError(kind, current.value, target.value)


@dataclass
class Agent:
    """A named AI persona.

    Attributes:
        id: Unique, stable identifier used by workflows to reference the agent
        name: Human readable name
        role: Short label of the agent's specialty
        system_prompt: Text prefixed to every prompt sent under this agent
        temperature: Sampling looseness (0.0-1.0)
        max_tokens: Output token budget
        model: Vendor model identifier
        provider: Backend vendor
    """
    id: str
    name: str
    role: str
    system_prompt: str
    temperature: float
    max_tokens: int
    model: str
    provider: Provider

    def __post_init__(self) -> None:
        if not self.id:
            raise ConfigurationError("Agent id must not be empty")
        if not isinstance(self.provider, Provider):
            try:
                self.provider = Provider(self.provider)
            except ValueError as e:
                raise ConfigurationError(f"Unknown provider: {self.provider}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary representation."""
        result = asdict(self)
        result["provider"] = self.provider.value
        return result


@dataclass(frozen=True)
class WorkflowContext:
    """Caller-supplied task description that seeds every prompt."""
    project_path: str | None = None
    selected_code: str | None = None
    file_path: str | None = None
    user_goal: str | None = None
    additional_context: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary, dropping unset fields."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class ProviderResponse:
    """Text returned by a provider call.

    Attributes:
        text: Generated text, or a placeholder when none could be extracted
        degraded: True when the response shape was unexpected and the text
            is a placeholder rather than model output
        detail: Why the response was degraded or empty
    """
    text: str
    degraded: bool = False
    detail: str | None = None


@dataclass
class WorkflowStep:
    """One request/response exchange with one agent."""
    agent_id: str
    input: str
    id: str = field(default_factory=lambda: f"step-{uuid.uuid4().hex}")
    output: str | None = None
    status: StepStatus = StepStatus.PENDING
    timestamp: float = field(default_factory=time.time)
    duration: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    _started_at: float | None = field(default=None, init=False, repr=False, compare=False)

    def start(self) -> None:
        """Mark the step as running, right before the provider call."""
        _check_transition("step", self.status, StepStatus.RUNNING)
        self.status = StepStatus.RUNNING
        self._started_at = time.monotonic()

    def complete(self, output: str, **metadata: Any) -> None:
        """Record the response and mark the step completed."""
        _check_transition("step", self.status, StepStatus.COMPLETED)
        self.output = output
        self.metadata.update(metadata)
        self.status = StepStatus.COMPLETED
        self._stop_clock()

    def fail(self, message: str) -> None:
        """Record an error description and mark the step failed."""
        _check_transition("step", self.status, StepStatus.FAILED)
        self.output = f"Error: {message}"
        self.status = StepStatus.FAILED
        self._stop_clock()

    def _stop_clock(self) -> None:
        if self._started_at is None:
            self.duration = 0.0
        else:
            self.duration = time.monotonic() - self._started_at

    @property
    def is_terminal(self) -> bool:
        return self.status in (StepStatus.COMPLETED, StepStatus.FAILED)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary representation."""
        result: dict[str, Any] = {
            "id": self.id,
            "agent_id": self.agent_id,
            "input": self.input,
            "status": self.status.value,
            "timestamp": self.timestamp,
        }
        if self.output is not None:
            result["output"] = self.output
        if self.duration is not None:
            result["duration"] = self.duration
        if self.metadata:
            result["metadata"] = dict(self.metadata)
        return result


@dataclass
class FileChange:
    """Before/after record of a single file."""
    file_path: str
    original_code: str
    modified_code: str
    explanation: str


@dataclass
class WorkflowResult:
    """Synthesized outcome of a completed session."""
    final_output: str
    confidence: float
    recommendations: list[str] = field(default_factory=list)
    changes: list[FileChange] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class WorkflowSession:
    """One end-to-end workflow execution.

    The result is populated if and only if the session completed. A failed
    session keeps the steps recorded before the failure.
    """
    id: str
    type: WorkflowType
    title: str
    description: str
    context: WorkflowContext
    status: SessionStatus = SessionStatus.PENDING
    steps: list[WorkflowStep] = field(default_factory=list)
    result: WorkflowResult | None = None
    created_at: float = field(default_factory=time.time)
    updated_at: float = field(default_factory=time.time)

    @classmethod
    def create(
        cls,
        workflow_type: WorkflowType,
        title: str,
        description: str,
        context: WorkflowContext,
    ) -> "WorkflowSession":
        """Create a new pending session with a fresh id."""
        return cls(
            id=f"{workflow_type.value}-{uuid.uuid4()}",
            type=workflow_type,
            title=title,
            description=description,
            context=context,
        )

    @property
    def is_terminal(self) -> bool:
        return self.status in (SessionStatus.COMPLETED, SessionStatus.FAILED)

    def touch(self) -> None:
        """Update the modification time."""
        self.updated_at = time.time()

    def start(self) -> None:
        _check_transition("session", self.status, SessionStatus.RUNNING)
        self.status = SessionStatus.RUNNING
        self.touch()

    def add_step(self, step: WorkflowStep) -> None:
        """Append a step; the step list is append-only."""
        if self.is_terminal:
            raise StateTransitionError("session", self.status.value, "add_step")
        self.steps.append(step)
        self.touch()

    def complete(self, result: WorkflowResult) -> None:
        _check_transition("session", self.status, SessionStatus.COMPLETED)
        self.result = result
        self.status = SessionStatus.COMPLETED
        self.touch()

    def fail(self) -> None:
        _check_transition("session", self.status, SessionStatus.FAILED)
        self.result = None
        self.status = SessionStatus.FAILED
        self.touch()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary representation."""
        return {
            "id": self.id,
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "steps": [step.to_dict() for step in self.steps],
            "context": self.context.to_dict(),
            "result": self.result.to_dict() if self.result else None,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

"""Agent registry.

Holds the named agent configurations available to workflows. The registry
is shared by every session of an engine; each individual read or write is
guarded by a lock so updates are visible to the next dispatched step.
"""

import threading
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .logging import get_logger
from .prompts import (
    CRITIC_REVIEWER_PROMPT,
    INTEGRATOR_FINALIZER_PROMPT,
    PLANNER_ARCHITECT_PROMPT,
    PRIMARY_CODER_PROMPT,
    SECURITY_AUDITOR_PROMPT,
)
from .types import Agent, Provider

logger = get_logger(__name__)

DEFAULT_MODEL = "gemini-flash-latest"

_AGENT_FIELDS = {f.name for f in fields(Agent)}


def default_agents() -> list[Agent]:
    """Build the default agent roster.

    Returns:
        Fresh Agent instances, safe to mutate.
    """
    return [
        Agent(
            id="primary-coder",
            name="Primary Coder",
            role="Code Generation and Refactoring",
            system_prompt=PRIMARY_CODER_PROMPT,
            temperature=0.3,
            max_tokens=4000,
            model=DEFAULT_MODEL,
            provider=Provider.GEMINI,
        ),
        Agent(
            id="critic-reviewer",
            name="Code Critic",
            role="Code Review and Quality Assurance",
            system_prompt=CRITIC_REVIEWER_PROMPT,
            temperature=0.2,
            max_tokens=3000,
            model=DEFAULT_MODEL,
            provider=Provider.GEMINI,
        ),
        Agent(
            id="planner-architect",
            name="System Architect",
            role="Planning and Architecture",
            system_prompt=PLANNER_ARCHITECT_PROMPT,
            temperature=0.4,
            max_tokens=3500,
            model=DEFAULT_MODEL,
            provider=Provider.GEMINI,
        ),
        Agent(
            id="integrator-finalizer",
            name="Code Integrator",
            role="Integration and Finalization",
            system_prompt=INTEGRATOR_FINALIZER_PROMPT,
            temperature=0.2,
            max_tokens=4000,
            model=DEFAULT_MODEL,
            provider=Provider.GEMINI,
        ),
        Agent(
            id="security-auditor",
            name="Security Auditor",
            role="Security Analysis and Hardening",
            system_prompt=SECURITY_AUDITOR_PROMPT,
            temperature=0.1,
            max_tokens=2500,
            model=DEFAULT_MODEL,
            provider=Provider.GEMINI,
        ),
    ]


class AgentRegistry:
    """Thread-safe map of agent id to agent configuration."""

    def __init__(self, agents: list[Agent] | None = None):
        """Initialize the registry.

        Args:
            agents: Initial agents. Defaults to the built-in roster.
        """
        self._lock = threading.Lock()
        self._agents: dict[str, Agent] = {}
        for agent in default_agents() if agents is None else agents:
            self._agents[agent.id] = agent

    def register(self, agent: Agent) -> None:
        """Insert or overwrite an agent by id."""
        with self._lock:
            self._agents[agent.id] = agent
        logger.debug(f"registered agent {agent.id} ({agent.provider.value}/{agent.model})")

    def get(self, agent_id: str) -> Agent | None:
        """Get an agent by id, or None if it is not registered."""
        with self._lock:
            return self._agents.get(agent_id)

    def list(self) -> list[Agent]:
        """Get all registered agents."""
        with self._lock:
            return list(self._agents.values())

    def update(self, agent_id: str, **patch: Any) -> bool:
        """Merge fields into a stored agent.

        The agent id itself is never changed.

        Args:
            agent_id: Agent to update.
            **patch: Agent fields to overwrite.

        Returns:
            True if the agent was updated, False if it was not found.

        Raises:
            ConfigurationError: If the patch names unknown fields.
        """
        unknown = set(patch) - _AGENT_FIELDS
        if unknown:
            raise ConfigurationError(f"Unknown agent fields: {sorted(unknown)}")
        patch.pop("id", None)

        with self._lock:
            agent = self._agents.get(agent_id)
            if agent is None:
                return False
            self._agents[agent_id] = replace(agent, **patch)
        return True

    def remove(self, agent_id: str) -> bool:
        """Delete an agent.

        Returns:
            True if an entry existed.
        """
        with self._lock:
            return self._agents.pop(agent_id, None) is not None

    def __contains__(self, agent_id: object) -> bool:
        with self._lock:
            return agent_id in self._agents

    def __len__(self) -> int:
        with self._lock:
            return len(self._agents)


def agent_from_dict(data: dict[str, Any]) -> Agent:
    """Build an agent from a config mapping.

    Missing fields fall back to the primary coder's settings, except id,
    which is required.
    """
    if not data.get("id"):
        raise ConfigurationError("Agent config requires an 'id'")
    unknown = set(data) - _AGENT_FIELDS
    if unknown:
        raise ConfigurationError(f"Unknown agent fields: {sorted(unknown)}")

    base = default_agents()[0]
    return Agent(
        id=data["id"],
        name=data.get("name", data["id"]),
        role=data.get("role", base.role),
        system_prompt=data.get("system_prompt", base.system_prompt),
        temperature=float(data.get("temperature", base.temperature)),
        max_tokens=int(data.get("max_tokens", base.max_tokens)),
        model=data.get("model", base.model),
        provider=data.get("provider", base.provider),
    )


def load_agents_from_config(path: str | Path = "config.yaml") -> list[Agent]:
    """Load extra agents from the ``agents`` list of a YAML config file.

    Args:
        path: Config file location.

    Returns:
        Parsed agents; empty if the file does not exist.
    """
    try:
        with open(path, "r") as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return []

    entries = config.get("agents") or []
    if not isinstance(entries, list):
        raise ConfigurationError(f"'agents' in {path} must be a list")
    return [agent_from_dict(entry) for entry in entries]

"""Workflow drivers.

Two topologies are supported:

    DebateWorkflow
        proposer -> critic (x N rounds) -> integrator

    SequentialWorkflow
        agent 1 -> agent 2 -> ... -> agent M

Both append steps to a session in strict execution order and synthesize a
result only when every step completed.
"""

from .base import WorkflowRunner
from .debate import DebateWorkflow
from .sequential import DEFAULT_AGENT_SEQUENCE, SequentialWorkflow

__all__ = [
    "WorkflowRunner",
    "DebateWorkflow",
    "SequentialWorkflow",
    "DEFAULT_AGENT_SEQUENCE",
]

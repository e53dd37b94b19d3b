"""Main entry point for the workflow engine CLI.

Runs a debate or sequential workflow over a code file and prints the
session, or lists the configured agents.
"""

import argparse
import json
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .config import get_settings
from .engine import WorkflowEngine
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    ProviderCallError,
    WorkflowEngineError,
)
from .logging import setup_logging
from .registry import load_agents_from_config
from .types import WorkflowContext, WorkflowSession
from .workflows import DEFAULT_AGENT_SEQUENCE
from .workflows.debate import DEFAULT_CRITIC_ID, DEFAULT_PROPOSER_ID


def load_yaml_config(path: str = "config.yaml") -> dict:
    """Load configuration from config.yaml if it exists."""
    try:
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with debate / sequential / agents subcommands."""
    parser = argparse.ArgumentParser(description="Multi-agent workflow engine")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (also settable via WORKFLOW_ENGINE_LOG_LEVEL env var)"
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="YAML file with extra agents and workflow defaults (default: config.yaml)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full session as JSON"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_context_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--code-file", help="File whose contents are the selected code")
        sub.add_argument("--goal", help="What the agents should achieve")
        sub.add_argument("--context", help="Additional free-text context")
        sub.add_argument("--project-path", help="Project the code belongs to")

    debate = subparsers.add_parser("debate", help="Run a proposer/critic debate")
    add_context_args(debate)
    debate.add_argument("--proposer", help=f"Proposer agent id (default: {DEFAULT_PROPOSER_ID})")
    debate.add_argument("--critic", help=f"Critic agent id (default: {DEFAULT_CRITIC_ID})")
    debate.add_argument("--rounds", type=int, help="Number of debate rounds")

    sequential = subparsers.add_parser("sequential", help="Run agents as a pipeline")
    add_context_args(sequential)
    sequential.add_argument(
        "--agents",
        nargs="+",
        help=f"Agent ids in order (default: {' '.join(DEFAULT_AGENT_SEQUENCE)})"
    )

    subparsers.add_parser("agents", help="List configured agents")
    return parser


def build_context(args: argparse.Namespace) -> WorkflowContext:
    """Create the workflow context from CLI arguments."""
    selected_code = None
    if args.code_file:
        selected_code = Path(args.code_file).read_text(encoding="utf-8")

    return WorkflowContext(
        project_path=args.project_path,
        selected_code=selected_code,
        file_path=args.code_file,
        user_goal=args.goal,
        additional_context=args.context,
    )


def print_session(session: WorkflowSession, as_json: bool = False) -> None:
    """Print a session summary, or the whole session as JSON."""
    if as_json:
        print(json.dumps(session.to_dict(), indent=2))
        return

    print(f"{session.title} [{session.status.value}]")
    print("-" * 50)
    for step in session.steps:
        duration = f"{step.duration:.1f}s" if step.duration is not None else "-"
        print(f"  {step.agent_id:<24} {step.status.value:<10} {duration}")

    if session.result:
        print("-" * 50)
        print(f"Confidence: {session.result.confidence:.0f}%")
        if session.result.recommendations:
            print("Recommendations:")
            for rec in session.result.recommendations:
                print(f"  - {rec}")
        print("\nFinal output:\n")
        print(session.result.final_output)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the workflow engine CLI."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)

    yaml_config = load_yaml_config(args.config)
    workflow_config = yaml_config.get("workflow", {})

    try:
        engine = WorkflowEngine(get_settings())
        for agent in load_agents_from_config(args.config):
            engine.add_agent(agent)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    if args.command == "agents":
        for agent in engine.list_agents():
            print(f"{agent.id:<24} {agent.provider.value:<10} {agent.model:<24} {agent.role}")
        return 0

    context = build_context(args)

    try:
        if args.command == "debate":
            session = engine.run_debate_workflow(
                context,
                proposer_id=args.proposer or workflow_config.get("proposer", DEFAULT_PROPOSER_ID),
                critic_id=args.critic or workflow_config.get("critic", DEFAULT_CRITIC_ID),
                rounds=args.rounds if args.rounds is not None else workflow_config.get("rounds"),
            )
        else:
            session = engine.run_sequential_workflow(
                context,
                args.agents or workflow_config.get("agents"),
            )
    except WorkflowEngineError as e:
        if isinstance(e, AuthenticationError):
            print(f"Authentication error: {e}")
            print("Please check your API key.")
        elif isinstance(e, ConfigurationError):
            print(f"Configuration error: {e}")
        elif isinstance(e, ProviderCallError):
            print(f"Provider error: {e}")
        else:
            print(f"Workflow error: {e}")

        failed = engine.get_session(e.session_id) if e.session_id else None
        if failed is not None:
            print_session(failed, as_json=args.json)
        return 1

    print_session(session, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())

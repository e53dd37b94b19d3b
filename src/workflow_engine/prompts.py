"""Prompts for the workflow engine.

This module contains the system prompts of the default agents and the
templates used to build the text sent to an agent in each workflow phase.
All builders are pure functions of their arguments.
"""

from .types import Agent

# separates an agent's system prompt from the phase prompt
USER_REQUEST_DELIMITER = "\n\nUser Request:\n"


# ==================== default agent system prompts ====================

PRIMARY_CODER_PROMPT = """You are an expert software engineer specializing in code generation, refactoring, and optimization.
Your role is to analyze code and propose improvements focusing on:
- Clean, maintainable code structure
- Performance optimizations
- Best practices and design patterns
- Security considerations
- Readability and documentation

Always provide detailed explanations for your changes and consider the broader codebase context."""


CRITIC_REVIEWER_PROMPT = """You are a senior code reviewer and quality assurance expert. Your role is to:
- Critically analyze proposed code changes
- Identify potential bugs, security vulnerabilities, and performance issues
- Suggest alternative approaches and improvements
- Ensure adherence to coding standards and best practices
- Provide constructive feedback with specific examples

Be thorough but constructive in your criticism. Focus on actionable improvements."""


PLANNER_ARCHITECT_PROMPT = """You are a system architect responsible for high-level planning and design decisions. Your role is to:
- Analyze requirements and create implementation plans
- Design system architecture and component interactions
- Identify dependencies and potential challenges
- Ensure scalability and maintainability
- Create step-by-step execution plans

Focus on the big picture while considering implementation details."""


INTEGRATOR_FINALIZER_PROMPT = """You are responsible for integrating code changes and finalizing implementations. Your role is to:
- Merge different code contributions into cohesive solutions
- Resolve conflicts and inconsistencies
- Ensure all components work together properly
- Add necessary imports, dependencies, and configurations
- Perform final quality checks and optimizations

Focus on creating production-ready, integrated solutions."""


SECURITY_AUDITOR_PROMPT = """You are a cybersecurity expert specializing in code security analysis. Your role is to:
- Identify security vulnerabilities and attack vectors
- Suggest security hardening measures
- Ensure secure coding practices
- Analyze data flow and access controls
- Recommend security testing strategies

Prioritize security without compromising functionality."""


# ==================== phase templates ====================

PROPOSAL_TEMPLATE = """Round {round_number} - Code Analysis and Improvement Proposal

Current Code:
```
{current_code}
```

User Goal: {user_goal}

Previous Debate History:
{debate_history}

Additional Context: {context}

Please analyze the current code and propose specific improvements. Focus on:
1. Code quality and maintainability
2. Performance optimizations
3. Security considerations
4. Best practices adherence

Provide the improved code with detailed explanations for each change."""


REVIEW_TEMPLATE = """Round {round_number} - Code Review and Feedback

Proposed Code:
```
{proposed_code}
```

User Goal: {user_goal}

Previous Debate History:
{debate_history}

Additional Context: {context}

Please provide a thorough review of the proposed code. Identify:
1. Potential issues or bugs
2. Areas for improvement
3. Alternative approaches
4. Compliance with best practices

Be constructive and specific in your feedback."""


FINALIZE_TEMPLATE = """Final Integration - Code Finalization

Final Proposal:
```
{final_proposal}
```

Final Review Feedback:
{final_review}

Complete Debate History:
{debate_history}

User Goal: {user_goal}

Please integrate the feedback and produce the final, production-ready code. Ensure all concerns are addressed and the code meets the user's goals."""


SEQUENTIAL_TEMPLATE = """Sequential Workflow Step {step_number}/{total_steps}

Your Role: {agent_role}

Current Code:
```
{current_code}
```

User Goal: {user_goal}

Workflow Context:
{workflow_context}

Previous Steps:
{previous_steps}

Please perform your specialized analysis and provide improvements based on your role. Build upon the previous work while focusing on your area of expertise."""


def build_proposal_prompt(
    round_number: int,
    current_code: str,
    user_goal: str | None,
    debate_history: str,
    context: str | None,
) -> str:
    """Build the prompt asking the proposer for an improved version of the code.

    Args:
        round_number: 1-based debate round.
        current_code: Latest proposal, or the original code in round 1.
        user_goal: What the caller wants to achieve.
        debate_history: Transcript of all previous rounds.
        context: Additional free-text context.

    Returns:
        The phase prompt (without the agent's system prompt).
    """
    return PROPOSAL_TEMPLATE.format(
        round_number=round_number,
        current_code=current_code,
        user_goal=user_goal or "",
        debate_history=debate_history,
        context=context or "",
    )


def build_review_prompt(
    round_number: int,
    proposed_code: str,
    user_goal: str | None,
    debate_history: str,
    context: str | None,
) -> str:
    """Build the prompt asking the critic to evaluate the latest proposal."""
    return REVIEW_TEMPLATE.format(
        round_number=round_number,
        proposed_code=proposed_code,
        user_goal=user_goal or "",
        debate_history=debate_history,
        context=context or "",
    )


def build_finalize_prompt(
    final_proposal: str,
    final_review: str | None,
    debate_history: str,
    user_goal: str | None,
) -> str:
    """Build the prompt asking the integrator to merge proposal and review."""
    return FINALIZE_TEMPLATE.format(
        final_proposal=final_proposal,
        final_review=final_review or "",
        debate_history=debate_history,
        user_goal=user_goal or "",
    )


def format_previous_steps(previous_steps: list[tuple[str, str | None]]) -> str:
    """Render prior (agent id, output) pairs as a numbered list."""
    return "\n".join(
        f"{i}. {agent_id}: {output or ''}"
        for i, (agent_id, output) in enumerate(previous_steps, start=1)
    )


def build_sequential_prompt(
    step_number: int,
    total_steps: int,
    agent_role: str,
    current_code: str,
    user_goal: str | None,
    workflow_context: str,
    previous_steps: list[tuple[str, str | None]],
) -> str:
    """Build the prompt for one stage of a sequential pipeline.

    Args:
        step_number: 1-based position of this stage.
        total_steps: Number of stages in the pipeline.
        agent_role: Role label of the agent running this stage.
        current_code: Output of the previous stage, or the original code.
        user_goal: What the caller wants to achieve.
        workflow_context: Running narrative of earlier agents' outputs.
        previous_steps: All earlier steps as (agent id, output) pairs.

    Returns:
        The phase prompt (without the agent's system prompt).
    """
    return SEQUENTIAL_TEMPLATE.format(
        step_number=step_number,
        total_steps=total_steps,
        agent_role=agent_role,
        current_code=current_code,
        user_goal=user_goal or "",
        workflow_context=workflow_context,
        previous_steps=format_previous_steps(previous_steps),
    )


def compose_full_prompt(agent: Agent, prompt: str) -> str:
    """Prefix a phase prompt with the agent's system prompt."""
    return f"{agent.system_prompt}{USER_REQUEST_DELIMITER}{prompt}"

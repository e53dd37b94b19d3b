import sys
import threading

from dotenv import load_dotenv

# Import the necessary components
from workflow_engine import (
    Agent,
    CancellationToken,
    Provider,
    WorkflowContext,
    WorkflowEngine,
    WorkflowEngineError,
)
from workflow_engine.logging import setup_logging

# Load environment variables (API keys)
load_dotenv()


SAMPLE_CODE = """def parse_age(value):
    return int(value)
"""


def main():
    setup_logging("INFO")

    # 1. Initialize the engine
    # Keys are read from GEMINI_API_KEY / OPENAI_API_KEY / ... in the environment
    engine = WorkflowEngine()

    if not engine.credentials.configured_providers():
        print("Please set GEMINI_API_KEY (or another provider key) in .env")
        return 1

    # 2. Optionally add or tweak agents
    # Example: move the critic to OpenAI
    # engine.update_agent("critic-reviewer", provider="openai", model="gpt-4o")
    engine.add_agent(Agent(
        id="test-writer",
        name="Test Writer",
        role="Unit Test Authoring",
        system_prompt="You write focused pytest unit tests for the code you are given.",
        temperature=0.2,
        max_tokens=3000,
        model="gemini-flash-latest",
        provider=Provider.GEMINI,
    ))

    context = WorkflowContext(
        selected_code=SAMPLE_CODE,
        file_path="ages.py",
        user_goal="Reject negative and non-numeric ages with a clear error",
    )

    # 3. Run a short debate
    # A token can be cancelled from another thread; the workflow stops before its next step
    token = CancellationToken()
    timer = threading.Timer(600, token.cancel, args=("took too long",))
    timer.start()
    try:
        session = engine.run_debate_workflow(context, rounds=2, cancel_token=token)
    except WorkflowEngineError as e:
        print(f"Debate failed: {e}")
        failed = engine.get_session(e.session_id)
        if failed is not None:
            for step in failed.steps:
                print(f"  {step.agent_id}: {step.status.value}")
        return 1
    finally:
        timer.cancel()

    print(f"Debate finished with confidence {session.result.confidence:.0f}%")
    for rec in session.result.recommendations:
        print(f"  - {rec}")

    # 4. Feed the debate's output through a custom pipeline
    refined = WorkflowContext(
        selected_code=session.result.final_output,
        file_path="ages.py",
        user_goal="Add tests for the validation rules",
    )
    pipeline = engine.run_sequential_workflow(refined, ["security-auditor", "test-writer"])
    print(pipeline.result.final_output)

    # 5. Sessions stay queryable until deleted or evicted
    for stored in engine.list_sessions():
        print(f"{stored.id} [{stored.status.value}] {len(stored.steps)} steps")
    return 0


if __name__ == "__main__":
    sys.exit(main())

from typing import Awaitable, Callable

from app.agent.planner import make_tool_plan
from app.api.types import GenerateRequest
from app.llm.schemas import ToolPlan

PlanGenerator = Callable[[GenerateRequest], Awaitable[ToolPlan]]


def get_plan_generator() -> PlanGenerator:
    """Dependency to get the plan generator (overridden in tests)."""
    return make_tool_plan

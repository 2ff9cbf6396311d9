"""
UI state for one page render cycle.
What it holds:
- Current phase (input -> loading -> results)
- Selected category and description
- Last fetched plan and the tool opened in the detail view

And, the main purpose:
Keep the UI transitions explicit instead of spreading them over module globals.
"""


from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from app.api.types import Category, DEFAULT_CATEGORY
from app.llm.schemas import Tool, ToolPlan

GENERIC_ALERT = "Something went wrong. Please try again."


class Phase(str, Enum):
    INPUT = "input"
    LOADING = "loading"
    RESULTS = "results"


@dataclass
class UIState:
    phase: Phase = Phase.INPUT
    category: Category = DEFAULT_CATEGORY
    description: str = ""
    plan: Optional[ToolPlan] = None
    alert: Optional[str] = None
    selected_tool: Optional[Tuple[int, int]] = None

    @property
    def input_disabled(self) -> bool:
        return self.phase == Phase.LOADING

    @property
    def can_submit(self) -> bool:
        return self.phase != Phase.LOADING and bool(self.description.strip())


class UIStateError(RuntimeError):
    pass


class UIController:
    def __init__(self, state: UIState | None = None):
        self.state = state or UIState()

    def select_category(self, category: Category | str) -> None:
        if self.state.phase == Phase.LOADING:
            raise UIStateError("category is locked while loading")
        self.state.category = Category(category)

    def fill_suggestion(self, text: str, category: Category | str | None = None) -> None:
        self.state.description = text.replace('"', "").strip()
        if category is not None:
            self.select_category(category)

    def submit(self, description: str | None = None) -> bool:
        """Move to loading. Returns False (no transition) for a blank description."""
        if self.state.phase == Phase.LOADING:
            raise UIStateError("a request is already in flight")
        if description is not None:
            self.state.description = description
        self.state.description = self.state.description.strip()
        if not self.state.description:
            return False
        self.state.phase = Phase.LOADING
        self.state.alert = None
        self.state.selected_tool = None
        return True

    def complete(self, plan: ToolPlan) -> None:
        if self.state.phase != Phase.LOADING:
            raise UIStateError(f"cannot complete from phase {self.state.phase.value}")
        self.state.plan = plan
        self.state.phase = Phase.RESULTS

    def fail(self) -> None:
        self.reset()
        self.state.alert = GENERIC_ALERT

    def open_tool(self, group_index: int, tool_index: int) -> Tool:
        if self.state.phase != Phase.RESULTS or self.state.plan is None:
            raise UIStateError("no results to open")
        if group_index < 0 or tool_index < 0:
            raise IndexError("negative tool position")
        tool = self.state.plan.tool_groups[group_index].tools[tool_index]
        self.state.selected_tool = (group_index, tool_index)
        return tool

    def close_tool(self) -> None:
        self.state.selected_tool = None

    def reset(self) -> None:
        # the selected category survives a reset
        self.state = UIState(category=self.state.category)

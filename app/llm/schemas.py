from pydantic import BaseModel, ConfigDict, Field
from typing import List


class _WireModel(BaseModel):
    # wire names are camelCase; python side may use either
    model_config = ConfigDict(populate_by_name=True)


class ToolInstructions(_WireModel):
    setup_steps: List[str] = Field(..., alias="setupSteps")
    usage_steps: List[str] = Field(..., alias="usageSteps")


class Tool(_WireModel):
    name: str
    role: str = Field(..., description="What the tool does for this project")
    url: str = Field(..., description="Tool home page")
    instructions: ToolInstructions


class ToolGroup(_WireModel):
    group_name: str = Field(..., alias="groupName")
    purpose: str
    tools: List[Tool]


class ToolPlan(_WireModel):
    project_summary: str = Field(..., alias="projectSummary")
    tool_groups: List[ToolGroup] = Field(..., alias="toolGroups")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


def _string_array() -> dict:
    return {"type": "ARRAY", "items": {"type": "STRING"}}


# Provider-facing schema (Gemini responseSchema dialect), mirrors ToolPlan.
TOOL_PLAN_RESPONSE_SCHEMA: dict = {
    "type": "OBJECT",
    "properties": {
        "projectSummary": {"type": "STRING"},
        "toolGroups": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "groupName": {"type": "STRING"},
                    "purpose": {"type": "STRING"},
                    "tools": {
                        "type": "ARRAY",
                        "items": {
                            "type": "OBJECT",
                            "properties": {
                                "name": {"type": "STRING"},
                                "role": {"type": "STRING"},
                                "url": {"type": "STRING"},
                                "instructions": {
                                    "type": "OBJECT",
                                    "properties": {
                                        "setupSteps": _string_array(),
                                        "usageSteps": _string_array(),
                                    },
                                    "required": ["setupSteps", "usageSteps"],
                                },
                            },
                            "required": ["name", "role", "url", "instructions"],
                        },
                    },
                },
                "required": ["groupName", "purpose", "tools"],
            },
        },
    },
    "required": ["projectSummary", "toolGroups"],
}

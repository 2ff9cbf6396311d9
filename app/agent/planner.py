"""
Creates the tool plan.
What it does:
- Builds the advisor prompt from the project description + category
- Sends it to the LLM with the ToolPlan response schema
- Validates the returned JSON against ToolPlan

And, the main purpose:
Convert a project description into grouped tool recommendations.
Upstream detail never leaves this module except through the log.
"""


from pydantic import ValidationError

from app.api.types import GenerateRequest
from app.core.errors import Unconfigured, UpstreamFailure
from app.core.logging import get_logger
from app.llm.prompts import build_tool_plan_prompt
from app.llm.router import LLMError, LLMNotConfigured, ensure_configured, llm_json
from app.llm.schemas import TOOL_PLAN_RESPONSE_SCHEMA, ToolPlan

log = get_logger("agent.planner")


async def make_tool_plan(req: GenerateRequest) -> ToolPlan:
    try:
        ensure_configured()
    except LLMNotConfigured:
        log.warning("Plan requested but the provider credential is missing")
        raise Unconfigured()
    except LLMError as e:
        log.error(f"Provider misconfigured: {e}")
        raise UpstreamFailure() from e

    prompt = build_tool_plan_prompt(req.description, req.category.value)
    try:
        raw = await llm_json(prompt, TOOL_PLAN_RESPONSE_SCHEMA)
        plan = ToolPlan.model_validate(raw)
    except ValidationError as e:
        log.error(f"Model output does not match ToolPlan: {e}")
        raise UpstreamFailure() from e
    except Exception as e:
        log.exception(f"Plan generation failed: {e}")
        raise UpstreamFailure() from e

    log.info(
        f"Plan ready: category={req.category.value} groups={len(plan.tool_groups)} "
        f"tools={sum(len(g.tools) for g in plan.tool_groups)}"
    )
    return plan

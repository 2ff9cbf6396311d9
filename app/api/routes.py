"""
FastAPI routes for the generation proxy.
What it provides:
- POST /generate: description + category in, ToolPlan JSON out

And, the main purpose:
Expose plan generation over HTTP. Method, body and credential checks
happen before anything is sent upstream.
"""


from fastapi import APIRouter, Depends

from app.api.deps import PlanGenerator, get_plan_generator
from app.api.types import ErrorResponse, GenerateRequest

router = APIRouter()

_ERRORS = {code: {"model": ErrorResponse} for code in (400, 405, 500)}


@router.post("/generate", responses=_ERRORS)
async def api_generate(req: GenerateRequest, generate: PlanGenerator = Depends(get_plan_generator)):
    plan = await generate(req)
    return plan.to_wire()

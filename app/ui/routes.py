"""
Browser-facing routes.
What it provides:
- GET /            the advisor page
- POST /ui/results the rendered results fragment for one request

And, the main purpose:
Serve the client UI. Generation goes through the same plan generator as
the JSON API, so errors come back as {"error": ...} with the same status codes.
"""


from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.api.deps import PlanGenerator, get_plan_generator
from app.api.types import GenerateRequest
from app.ui.render import render_page, render_results
from app.ui.state import UIController

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def ui_index():
    return render_page(UIController().state)


@router.post("/ui/results", response_class=HTMLResponse)
async def ui_results(req: GenerateRequest, generate: PlanGenerator = Depends(get_plan_generator)):
    controller = UIController()
    controller.select_category(req.category)
    controller.submit(req.description)
    # errors propagate to the JSON error handlers; the client resets itself
    plan = await generate(req)
    controller.complete(plan)
    return render_results(controller.state)

"""
HTML rendering for the advisor page.
What it renders:
- The full page in its input phase (form, category chips, suggestions)
- The results fragment (group headers, tool cards, one detail dialog per tool)

And, the main purpose:
Turn a UIState into markup. Tool data is rendered as escaped text only;
the client script addresses tools by position, never by serialized payload.
"""


from pathlib import Path
from urllib.parse import urlparse

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.api.types import Category
from app.ui.state import GENERIC_ALERT, UIState

TEMPLATES_DIR = Path(__file__).parent / "templates"

SUGGESTIONS: list[tuple[str, Category]] = [
    ("Launch a podcast", Category.MARKETING),
    ("Build a portfolio website", Category.DEVELOPMENT),
    ("Write and self-publish an ebook", Category.WRITING),
    ("Analyze my sales spreadsheet", Category.DATA_ANALYSIS),
]


def safe_url(value: str) -> str:
    """Only http(s) links make it into href attributes."""
    parsed = urlparse((value or "").strip())
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return parsed.geturl()
    return "#"


def tool_dialog_id(group_index: int, tool_index: int) -> str:
    return f"tool-{group_index}-{tool_index}"


def _build_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["safe_url"] = safe_url
    env.globals["tool_dialog_id"] = tool_dialog_id
    return env


_env = _build_env()


def render_page(state: UIState) -> str:
    return _env.get_template("index.html").render(
        state=state,
        categories=list(Category),
        suggestions=SUGGESTIONS,
        generic_alert=GENERIC_ALERT,
    )


def render_results(state: UIState) -> str:
    if state.plan is None:
        raise ValueError("no plan to render")
    return _env.get_template("_results.html").render(plan=state.plan)

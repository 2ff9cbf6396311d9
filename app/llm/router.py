"""
LLM call wrapper and it does:
- Sends the prompt to the model provider
- Requests output conforming to a response schema
- Parses the returned text into a JSON object

Main purpose:
Central interface for all model calls. Single best-effort pass: no retries.
"""


import httpx

from app.core.config import settings
from app.core.logging import get_logger
from app.llm.json_parse import extract_json

log = get_logger("llm.router")

PROVIDERS_NEEDING_KEY = {"gemini"}


class LLMError(RuntimeError):
    pass


class LLMNotConfigured(LLMError):
    pass


def _safe_snippet(text: str, n: int = 400) -> str:
    return (text or "")[:n].replace("\n", "\\n").replace("\r", "\\r")


def _provider() -> str:
    return (settings.LLM_PROVIDER or "").lower().strip()


def ensure_configured() -> None:
    provider = _provider()
    if provider not in PROVIDERS_NEEDING_KEY | {"mock"}:
        raise LLMError(f"Unsupported LLM_PROVIDER={settings.LLM_PROVIDER}. Use gemini or mock.")
    if provider in PROVIDERS_NEEDING_KEY and not settings.API_KEY:
        raise LLMNotConfigured("Missing API_KEY. Put it in your .env")


def _candidate_text(data: dict) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        raise LLMError(f"Unexpected Gemini response: {_safe_snippet(str(data))}")
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))


async def _gemini_generate(
    prompt: str,
    schema: dict,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    if not settings.API_KEY:
        raise LLMNotConfigured("Missing API_KEY. Put it in your .env")

    url = f"{settings.GEMINI_BASE_URL.rstrip('/')}/models/{settings.LLM_MODEL}:generateContent"
    headers = {"x-goog-api-key": settings.API_KEY}
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": schema,
        },
    }

    timeout = httpx.Timeout(settings.LLM_TIMEOUT_SECONDS, connect=settings.LLM_CONNECT_TIMEOUT_SECONDS)

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        r = await client.post(url, headers=headers, json=payload)

    if r.status_code >= 400:
        raise LLMError(f"Gemini error {r.status_code}: {_safe_snippet(r.text)}")

    text = _candidate_text(r.json())
    if not text.strip():
        raise LLMError("No response text from model")
    return text


def _mock_plan(prompt: str) -> dict:
    return {
        "projectSummary": "Mock plan generated without a provider key.",
        "toolGroups": [
            {
                "groupName": "Project Management",
                "purpose": "Keep the work organised while the real provider is offline.",
                "tools": [
                    {
                        "name": "Trello",
                        "role": "Tracks tasks on a kanban board.",
                        "url": "https://trello.com",
                        "instructions": {
                            "setupSteps": ["Create a free account.", "Create a board for the project."],
                            "usageSteps": [
                                "Add a card per deliverable.",
                                "Move cards across lists as work progresses.",
                                "Review the board weekly.",
                            ],
                        },
                    }
                ],
            }
        ],
    }


async def llm_json(
    prompt: str,
    schema: dict,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict:
    """
    Calls the configured provider and returns a parsed JSON dict.
    Raises LLMError on transport/HTTP/model problems and ValueError
    (json.JSONDecodeError included) when the text is not a JSON object.
    """
    ensure_configured()
    provider = _provider()

    if provider == "mock":
        return _mock_plan(prompt)

    text = await _gemini_generate(prompt, schema, transport=transport)
    try:
        parsed = extract_json(text)
    except ValueError:
        log.warning(f"JSON parse failed. Snippet={_safe_snippet(text)}")
        raise
    if not isinstance(parsed, dict):
        raise LLMError(f"JSON is not an object (got {type(parsed).__name__})")
    return parsed

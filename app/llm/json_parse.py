import json
import re
from typing import Any

def _strip_code_fences(s: str) -> str:
    s = s.strip()
    # remove ```json ... ``` or ``` ... ```
    if s.startswith("```"):
        s = re.sub(r"^```[a-zA-Z0-9]*\s*", "", s)
        s = re.sub(r"\s*```$", "", s)
    return s.strip()


def extract_json(text: str) -> Any:
    """
    Parse model text as JSON. A surrounding markdown code fence is removed;
    anything else around the document (prose, trailing notes) is a parse error.
    """
    candidate = _strip_code_fences(text or "")
    if not candidate:
        raise ValueError("Empty model text")
    return json.loads(candidate)

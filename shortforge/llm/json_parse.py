import json
import re
from typing import Any

from shortforge.core.errors import MalformedCompletion

def _strip_code_fences(s: str) -> str:
    s = s.strip()
    # remove ```json ... ``` or ``` ... ```
    if s.startswith("```"):
        s = re.sub(r"^```[a-zA-Z0-9]*\s*", "", s)
        s = re.sub(r"\s*```$", "", s)
    return s.strip()


def parse_completion(text: str) -> Any:
    """
    Decode the completion as JSON. No brace hunting or trimming: anything
    that is not a JSON document once fences are removed is malformed.
    """
    try:
        return json.loads(_strip_code_fences(text or ""))
    except json.JSONDecodeError:
        raise MalformedCompletion("Failed to parse model response")

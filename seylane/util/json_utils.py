""" JSON helpers for model output... """

# Python Packages
import json
from typing import Any, Dict, Optional





def extract_json_block(text: str) -> Optional[str]:
    """
    Return the outermost {...} block of *text*, or None.
    Tolerates prose or ```json fences around the object.
    """

    if not text:
        return None

    start = text.find("{")
    end   = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None

    return text[start : end + 1]



def safe_json_loads(text: str) -> Optional[Dict[str, Any]]:
    """
    Parse a JSON object out of a model reply.

    Returns:
        The decoded dict, or None when there is no parseable object.
    """

    block = extract_json_block(text)
    if not block:
        return None

    try:
        data = json.loads(block)
    except json.JSONDecodeError:
        return None

    return data if isinstance(data, dict) else None

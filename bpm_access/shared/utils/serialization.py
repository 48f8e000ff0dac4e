"""Log-safe serialization helpers."""

import json
import re
from typing import Any

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_.=\s]")


def escape_special_chars(value: str) -> str:
    """Strip every character outside [a-zA-Z0-9_.=\\s]."""
    return _UNSAFE_CHARS.sub("", value)


def safe_stringify(obj: Any) -> str:
    """JSON-encode obj, replacing containers already being encoded with "[Circular]".

    Values json cannot encode are rendered with str().
    """
    return json.dumps(_strip_cycles(obj, set()), default=str)


def _strip_cycles(obj: Any, seen: set[int]) -> Any:
    if isinstance(obj, (dict, list, tuple)):
        if id(obj) in seen:
            return "[Circular]"
        seen.add(id(obj))
        if isinstance(obj, dict):
            return {str(k): _strip_cycles(v, seen) for k, v in obj.items()}
        return [_strip_cycles(v, seen) for v in obj]
    return obj

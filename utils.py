# utils.py
import re
import time

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.\-_]")

def sanitize_filename(name: str) -> str:
    """Replace every character outside [a-zA-Z0-9.-_] with an underscore."""
    return _UNSAFE_CHARS.sub("_", name or "")

def stored_filename(original: str, ts: int) -> str:
    """On-disk name: millisecond timestamp, underscore, sanitized original name."""
    return f"{ts}_{sanitize_filename(original)}"

def now_ms() -> int:
    """Current epoch time in milliseconds."""
    return int(time.time() * 1000)

def json_object(payload) -> dict:
    """Parsed JSON body as a dict; anything that is not an object reads as empty."""
    return payload if isinstance(payload, dict) else {}

def or_default(value, default):
    """Fall back to default for null, false, zero and empty string, keeping empty lists and objects."""
    if value is None or value is False or value == "" or (isinstance(value, (int, float)) and value == 0):
        return default
    return value

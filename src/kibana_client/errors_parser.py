"""
Flatten decoded JSON error payloads into a single message.

The API reports errors as strings, lists or objects, nested arbitrarily.
Object members are rendered as ``{key: value}`` and sorted, so identical
payloads always produce identical text.
"""

from typing import Any


def parse_error(raw: Any) -> str:
    """
    Render a decoded JSON error value as a human-readable string.

    Args:
        raw: Value produced by ``json.loads``

    Returns:
        The flattened message
    """
    if isinstance(raw, str):
        return raw

    if isinstance(raw, list):
        return "[" + ", ".join(parse_error(item) for item in raw) + "]"

    if isinstance(raw, dict):
        errors = sorted(f"{{{key}: {parse_error(value)}}}" for key, value in raw.items())
        return ", ".join(errors)

    return f"failed to parse unexpected error type: {type(raw).__name__}"


def error_message(raw: Any) -> str:
    """Pick the message field of an error payload, falling back to the whole value."""
    if isinstance(raw, dict) and "message" in raw:
        return parse_error(raw["message"])
    return parse_error(raw)

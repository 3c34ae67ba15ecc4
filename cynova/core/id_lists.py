"""Id List Codec — explicit encode/decode for list fields carried as JSON text.

Invariants:
    - decode_id_list() accepts a JSON array of strings (as text) or an actual list
    - encode_id_list() is compact: [] -> "[]", ["a", "b"] -> '["a","b"]'
    - Anything else raises ValueError (surfaced as a validation message)

Design Decisions:
    - Wire keeps the text form for client compatibility; the store keeps a typed
      JSON array. This module is the only place the two meet.
"""

import json


def decode_id_list(raw: object) -> list[str]:
    """Parse a wire value into a list of strings."""
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError("must be a JSON array of strings") from e
    if not isinstance(raw, list):
        raise ValueError("must be a JSON array of strings")
    if not all(isinstance(item, str) for item in raw):
        raise ValueError("must only contain strings")
    return list(raw)


def encode_id_list(ids: list[str] | None) -> str:
    """Render a stored list back to its wire text."""
    return json.dumps(list(ids or []), ensure_ascii=False, separators=(",", ":"))

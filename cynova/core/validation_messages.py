"""Validation Messages — turn pydantic error dicts into human-readable sentences.

Invariants:
    - One message per error, always prefixed with the quoted field name
    - Field name is the public (alias) name, without the "body"/"query" location
    - Unknown error types fall back to pydantic's own msg

Design Decisions:
    - Message wording kept stable so clients can match on it
      (e.g. '"nom" length must be at least 2 characters long')
    - Float bounds render compactly: gt=0.0 reads "greater than 0"
"""

from typing import Any

_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _field_name(loc: tuple | list) -> str:
    parts = [str(p) for p in loc if str(p) not in _LOCATIONS]
    return ".".join(parts) if parts else "value"


def _template(error_type: str, ctx: dict[str, Any]) -> str | None:
    templates = {
        "missing": "is required",
        "string_too_short": "length must be at least {min_length} characters long",
        "string_too_long": "length must be less than or equal to {max_length} characters long",
        "greater_than": "must be greater than {gt}",
        "greater_than_equal": "must be greater than or equal to {ge}",
        "less_than": "must be less than {lt}",
        "less_than_equal": "must be less than or equal to {le}",
        "int_parsing": "must be an integer",
        "int_from_float": "must be an integer",
        "int_type": "must be an integer",
        "float_parsing": "must be a number",
        "float_type": "must be a number",
        "bool_parsing": "must be a boolean",
        "bool_type": "must be a boolean",
        "string_type": "must be a string",
        "enum": "must be one of [{expected}]",
        "url_parsing": "must be a valid uri",
        "url_type": "must be a valid uri",
        "url_scheme": "must be a valid uri",
    }
    template = templates.get(error_type)
    if template is None:
        return None
    values = {
        key: f"{value:g}" if isinstance(value, float) else value
        for key, value in ctx.items()
    }
    try:
        return template.format(**values)
    except KeyError:
        return None


def format_error(error: dict[str, Any]) -> str:
    """Render one pydantic error dict."""
    name = _field_name(error.get("loc", ()))
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "value_error" and "email" in str(error.get("msg", "")).lower():
        return f'"{name}" must be a valid email'

    text = _template(error_type, ctx)
    if text is None:
        text = str(error.get("msg", "is invalid"))
        if text.startswith("Value error, "):
            text = text[len("Value error, "):]
    return f'"{name}" {text}'


def format_errors(errors: list[dict[str, Any]]) -> list[str]:
    return [format_error(e) for e in errors]

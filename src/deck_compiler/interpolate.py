"""
Template Interpolation

Substitutes ``{{path.to.value}}`` placeholders in the raw text of a JSON
template. Placeholders usually sit inside quoted string fields, so substituted
values are escaped for a JSON string context. Unknown paths are left as-is.
"""

import json
import re
from typing import Any, Mapping, Sequence

PLACEHOLDER_RE = re.compile(r"\{\{(\w+(?:\.\w+)*)\}\}", re.ASCII)

# Two characters, backslash + n: a newline inside a JSON string literal.
ESCAPED_NEWLINE = "\\n"


class _Missing:
    """Marker for a path that does not resolve. Distinct from a present None."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def get_nested_value(data: Any, path: str) -> Any:
    """Walk a dotted path through nested mappings and lists.

    List segments must be decimal indexes. Returns MISSING when any segment
    is absent or an intermediate value is None or a scalar.
    """
    current = data
    for part in path.split("."):
        if current is None:
            return MISSING
        if isinstance(current, Mapping):
            if part not in current:
                return MISSING
            current = current[part]
        elif isinstance(current, list) and part.isdigit():
            index = int(part)
            if index >= len(current):
                return MISSING
            current = current[index]
        else:
            return MISSING
    return current


def escape_json_string(value: str) -> str:
    """Escape text for placement inside a double-quoted JSON string."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def _render_json(value: Any) -> str:
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return escape_json_string(text)


def _render_scalar(value: Any) -> str:
    """JSON literal for null/bool/numbers; escaped ``str()`` for anything else (dates, ...)."""
    if value is None or isinstance(value, bool):
        return json.dumps(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return escape_json_string(str(value))


def _render_item(item: Any) -> str:
    if item is None:
        return ""
    if isinstance(item, str):
        return escape_json_string(item)
    if isinstance(item, (Mapping, list, tuple)):
        return _render_json(item)
    return _render_scalar(item)


def render_value(value: Any) -> str:
    """Render a resolved value as placeholder replacement text."""
    if isinstance(value, str):
        return escape_json_string(value)
    if isinstance(value, Sequence):
        return ESCAPED_NEWLINE.join(_render_item(item) for item in value)
    if isinstance(value, Mapping):
        return _render_json(value)
    return _render_scalar(value)


def interpolate_variables(template: str, data: Mapping[str, Any]) -> str:
    """Replace every resolvable ``{{path}}`` placeholder in ``template``."""

    def _substitute(match: "re.Match[str]") -> str:
        value = get_nested_value(data, match.group(1))
        if value is MISSING:
            return match.group(0)
        return render_value(value)

    return PLACEHOLDER_RE.sub(_substitute, template)

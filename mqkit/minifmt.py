"""Substitution of ``{name}`` placeholders from a mapping."""

import re
from typing import Any, Mapping

_FIELDS = re.compile(r"\{(\w+)\}", re.ASCII)


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def sprintf(template: str, extra: Mapping[str, Any]) -> str:
    """Replace each ``{name}`` in ``template`` with ``extra[name]``.

    Each occurrence found in the template replaces one occurrence in the
    result, left to right. Placeholders whose name is missing from ``extra``
    are left as they are.
    """
    result = template
    for match in _FIELDS.finditer(template):
        name = match.group(1)
        if name in extra:
            result = result.replace(match.group(0), _format_value(extra[name]), 1)
    return result
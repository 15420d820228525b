"""Placeholder interpolation for translated messages."""

import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")


def interpolate(template: str, params: Mapping[str, Any]) -> str:
    """Replace {{name}} placeholders with parameter values.

    Placeholders without a matching parameter are left as they are. Values
    are inserted literally, never parsed as a replacement template.

    Args:
        template: Message with {{name}} placeholders.
        params: Parameter name -> value.

    Returns:
        Message with known placeholders substituted.
    """
    if not params:
        return template

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)

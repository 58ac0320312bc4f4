from __future__ import annotations

import re
from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\{\{([^{}]*)\}\}")


def render_template(template: str, variables: Mapping[str, object] | None = None) -> str:
    """Replace every ``{{key}}`` in ``template`` with ``variables[key]``.

    Unknown placeholders are kept verbatim. Substituted values are not
    scanned again, so a value containing ``{{...}}`` is inserted as-is.
    """
    if not template or not variables:
        return template or ""

    def _substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in variables:
            return match.group(0)
        value = variables[key]
        return "" if value is None else str(value)

    return _PLACEHOLDER.sub(_substitute, template)

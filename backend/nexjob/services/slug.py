from __future__ import annotations

import re

# ECMAScript whitespace; Python's own \s also matches \x1c-\x1f and \x85.
_WHITESPACE_CHARS = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_AMPERSAND = re.compile(r"&")
_DISALLOWED = re.compile(f"[^a-z0-9{_WHITESPACE_CHARS}-]")
_WHITESPACE = re.compile(f"[{_WHITESPACE_CHARS}]+")
_REPEATED_HYPHENS = re.compile(r"-+")


def normalize_slug(name: str) -> str:
    """Turn a display name such as "Food & Beverage" into "food-beverage".

    The steps run in a fixed order because each one relies on the cleanup of
    the previous one. Hyphens already in the name survive, so a slug
    normalizes to itself. Distinct names may collapse to the same slug.
    """
    if not name:
        return ""
    value = name.lower()
    value = _AMPERSAND.sub("", value)
    value = _DISALLOWED.sub("", value)
    value = _WHITESPACE.sub("-", value)
    value = _REPEATED_HYPHENS.sub("-", value)
    return value.strip("-")

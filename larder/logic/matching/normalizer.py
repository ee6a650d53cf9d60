"""Canonical comparison keys for ingredient, item and barcode-label names."""
import re
from typing import Optional

_NON_ALNUM = re.compile(r'[^a-z0-9\s]')
_WHITESPACE = re.compile(r'\s+')

__all__ = ["normalize", "keys_match"]


def normalize(text: Optional[str]) -> str:
    """Return the comparison key for a free-text name.

    Lower-cases, turns every character that is not an ASCII letter, digit or
    whitespace into a space, collapses whitespace runs and trims. The empty
    string means "no usable key"; None is accepted and yields it.

        >>> normalize("Canned-Tomatoes!!")
        'canned tomatoes'
    """
    if text is None:
        return ""
    key = _NON_ALNUM.sub(" ", str(text).lower())
    return _WHITESPACE.sub(" ", key).strip()


def keys_match(ingredient_key: str, candidate_key: str) -> bool:
    """Exact or substring match in either direction.

    Deliberately loose: "egg" matches "eggplant" and "olive oil" matches "oil".
    Empty keys never match.
    """
    if not ingredient_key or not candidate_key:
        return False
    return (
        candidate_key == ingredient_key
        or ingredient_key in candidate_key
        or candidate_key in ingredient_key
    )

"""The wildcard-aware string expression language.

Bundle, context and endpoint patterns in policy keys use this language.
Semantics:

- ``*`` matches any run of characters, including an empty one
- ``?`` matches exactly one character
- every other character matches itself; regex metacharacters have no
  special meaning
- matching is anchored to the whole string and case-sensitive

The compiler stores pattern text as-is. These helpers are for whatever
evaluates the compiled PolicySet.
"""

import re
from functools import lru_cache

WILDCARD_LANGUAGE = "wildcardAwareString"


@lru_cache(maxsize=512)
def compile_wildcard(pattern: str) -> re.Pattern[str]:
    """Translate a wildcard pattern into an anchored regex."""
    parts: list[str] = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.DOTALL)


def matches_wildcard(pattern: str, text: str) -> bool:
    """Check whether text matches the wildcard pattern in full."""
    return compile_wildcard(pattern).fullmatch(text) is not None

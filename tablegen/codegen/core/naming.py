"""
Naming utilities for code generation.

Converts table, column and user supplied identifiers between the
name forms used by generated code: CamelCase for exported identifiers,
snake_case for file paths and columns, and lower-first forms for local
variables and package names.
"""

import re


# Characters treated as word separators by to_camel
DELIMITERS = frozenset("_- ")

_SNAKE_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def to_camel(name: str) -> str:
    """
    Convert a snake_case or delimiter separated name to CamelCase.

    The first letter is upper-cased. A delimiter that follows the first
    letter and precedes a lower-case letter is dropped and the letter is
    upper-cased. Delimiters before the first letter are kept, so
    ``_foo_bar`` becomes ``_FooBar``.

    Args:
        name: Non-empty ASCII identifier

    Returns:
        CamelCase form of the name
    """
    chars = []
    started = False
    upper_next = False
    last = len(name) - 1

    for i, ch in enumerate(name):
        if not started and _is_upper(ch):
            started = True

        if _is_lower(ch) and (upper_next or not started):
            ch = ch.upper()
            upper_next = False
            started = True

        if started and ch in DELIMITERS and i < last and _is_lower(name[i + 1]):
            upper_next = True
            continue

        chars.append(ch)

    return "".join(chars)


def to_snake(name: str) -> str:
    """
    Convert a CamelCase name to snake_case.

    Inserts an underscore before every upper-case letter that follows a
    lower-case letter, then lower-cases the result. Not an exact inverse
    of :func:`to_camel`: acronyms and the original delimiters are lost.
    """
    return _SNAKE_BOUNDARY.sub(r"\1_\2", name).lower()


def lower_first(name: str) -> str:
    """Lower-case the first character of a name."""
    return name[:1].lower() + name[1:]

"""Glob to regex translation.

Basic syntax:

*       - anything, except / or \\
?       - any char, except / or \\
[...]   - char in set
[!...]  - char not in set
\\x      - literal x
{a,b}   - one of alternatives

Recursion syntax (globstar):

**      - anything, including separators

Extended syntax (extglob):

?()     - zero or one of group
*()     - any number occurances of group
+()     - one or more occurances of group
@()     - one occurance of group
|       - separate group elements

Negation groups !() are not handled here, they are resolved
into @() or * variants before translation (see globrx.negation).
"""

import enum
import re
from typing import List

__all__ = ["translate", "escape", "re_escape", "has_magic"]


# special regex symbols
_RXMAGIC = re.compile(r"[][.*+?^${}()|\\]")

# glob magic
_GMAGIC = re.compile(r"[][(){}*?!|\\]")

# extglob group openers
_GROUP_OPEN = "?*+@"

# closing suffix for each extglob marker
_GROUP_CLOSE = {
    "?": ")?",
    "*": ")*",
    "+": ")+",
    "@": ")",
}

# regex-significant chars that are escaped when left over
_LEFTOVER = frozenset(".|+$^(){}\\/-")

_NOT_SEP = r"[^/\\]"


class State(enum.Enum):
    """Scanner state outside extglob groups.
    """
    NORMAL = "normal"
    IN_CLASS = "class"
    IN_BRACE = "brace"


def escape(s: str) -> str:
    """Escape glob meta-characters.

    >>> escape('a*b?.txt')
    'a\\\\*b\\\\?.txt'
    """
    return _GMAGIC.sub(r"\\\g<0>", s)


def re_escape(s: str) -> str:
    """Escape regex meta-characters.
    """
    return _RXMAGIC.sub(r"\\\g<0>", s)


def has_magic(pat: str) -> bool:
    """Contains glob magic chars.
    """
    return _GMAGIC.search(pat) is not None


def translate(glob: str, anchored: bool = False) -> str:
    """Convert glob pattern to regex source.

    The glob must not contain unresolved !() groups, those
    are handled as literal text.

    Returns empty string for empty glob, which means
    pattern that cannot match.
    """
    plen = len(glob)
    pos = 0
    res: List[str] = []
    groups: List[str] = []
    state = State.NORMAL
    brace_depth = 0
    class_start = -1

    while pos < plen:
        c = glob[pos]
        nc = glob[pos + 1] if pos + 1 < plen else ""

        if c == "\\" and nc:
            res.append(re.escape(nc))
            pos += 2
            continue

        if state is State.IN_CLASS:
            if c == "]":
                state = State.IN_BRACE if brace_depth else State.NORMAL
                res.append(c)
            elif c == "!" and pos == class_start + 1:
                res.append("^")
            else:
                res.append(c)
            pos += 1
            continue

        if c in _GROUP_OPEN and nc == "(":
            groups.append(c)
            res.append("(?:")
            pos += 2
            continue

        if c == ")" and groups:
            res.append(_GROUP_CLOSE[groups.pop()])
        elif c == "*" and nc == "*":
            res.append(".*")
            pos += 2
            if pos < plen and glob[pos] == "/":
                pos += 1
            continue
        elif c == "*":
            res.append(_NOT_SEP + "*")
        elif c == "?":
            res.append(_NOT_SEP)
        elif c == "[":
            state = State.IN_CLASS
            class_start = pos
            res.append(c)
        elif c == "{":
            brace_depth += 1
            state = State.IN_BRACE
            res.append("(")
        elif c == "}" and state is State.IN_BRACE:
            brace_depth -= 1
            if not brace_depth:
                state = State.NORMAL
            res.append(")")
        elif c == "," and state is State.IN_BRACE:
            res.append("|")
        elif c == "|" and groups:
            res.append(c)
        elif c in _LEFTOVER:
            res.append("\\" + c)
        else:
            res.append(c)
        pos += 1

    xre = "".join(res)
    if not xre:
        return ""
    if anchored:
        return "^" + xre + "$"
    return xre

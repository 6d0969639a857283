"""Negation groups.

Regex has no cheap way to say "anything except these alternatives"
for a piece of a larger pattern, so !() groups are cut out of the
glob and replaced with simpler variants:

- positive variant: every !() becomes *
- exclusion variant N: group N becomes @(), others become *

Candidate matches the glob when it matches the positive variant
but none of the exclusion variants.
"""

from typing import List, NamedTuple, Sequence

__all__ = ["NegationSpan", "extract_negations", "build_variant"]


class NegationSpan(NamedTuple):
    """Location of one top-level !() group in glob.

    start - index of '!'
    end - index of matching ')'
    inner - text between '!(' and ')'
    """
    start: int
    end: int
    inner: str


def _find_close(glob: str, pos: int) -> int:
    """Return index of ')' that closes paren opened just before pos, or -1.
    """
    depth = 1
    while pos < len(glob):
        c = glob[pos]
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return pos
        pos += 1
    return -1


def extract_negations(glob: str) -> List[NegationSpan]:
    """Find top-level !() groups.

    Unclosed groups are skipped, nested ones belong
    to the outer group.
    """
    res = []
    pos = 0
    while True:
        p1 = glob.find("!(", pos)
        if p1 < 0:
            break
        p2 = _find_close(glob, p1 + 2)
        if p2 < 0:
            pos = p1 + 1
            continue
        res.append(NegationSpan(p1, p2, glob[p1 + 2:p2]))
        pos = p2 + 1
    return res


def build_variant(glob: str, spans: Sequence[NegationSpan], expand_index: int = -1) -> str:
    """Replace negation groups in glob.

    Group at expand_index becomes @(), rest become *.
    With expand_index=-1 all groups become *.
    """
    res = []
    pos = 0
    for i, span in enumerate(spans):
        res.append(glob[pos:span.start])
        if i == expand_index:
            res.append("@(" + span.inner + ")")
        else:
            res.append("*")
        pos = span.end + 1
    res.append(glob[pos:])
    return "".join(res)

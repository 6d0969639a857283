"""Compile globs into matchers.

Globs without !() groups compile into single regex.  Globs with
negation compile into positive regex plus one exclusion regex per
group, see globrx.negation.
"""

import logging
import re
from typing import Iterable, Iterator, List, Optional

from globrx.negation import build_variant, extract_negations
from globrx.translate import translate

__all__ = ["Matcher", "RegexMatcher", "NegationMatcher",
           "compile_glob", "compile_with_negation", "iter_occurrences", "xfilter"]

log = logging.getLogger(__name__)


class Matcher(object):
    """Compiled glob.
    """

    def test(self, candidate: str) -> bool:
        raise NotImplementedError

    def filter(self, names: Iterable[str]) -> Iterator[str]:
        """Yield names that pass test().
        """
        for n in names:
            if self.test(n):
                yield n


class RegexMatcher(Matcher):
    """Glob that maps to single regex.
    """

    def __init__(self, regex: re.Pattern[str]) -> None:
        self.regex = regex

    def test(self, candidate: str) -> bool:
        return self.regex.search(candidate) is not None

    def __repr__(self) -> str:
        return "%s(%r)" % (type(self).__name__, self.regex.pattern)


class NegationMatcher(Matcher):
    """Glob with !() groups.

    Exclusions are always anchored, in unanchored mode they are
    applied to each positive occurrence separately.  So exclusion
    only vetoes the occurrence that it fully matches, it does not
    look at other ways to split the candidate.
    """

    def __init__(self, positive: re.Pattern[str], exclusions: List[re.Pattern[str]], anchored: bool) -> None:
        self.positive = positive
        self.exclusions = exclusions
        self.anchored = anchored

    def _excluded(self, text: str) -> bool:
        for ex in self.exclusions:
            if ex.search(text):
                return True
        return False

    def test(self, candidate: str) -> bool:
        if self.anchored:
            if not self.positive.search(candidate):
                return False
            return not self._excluded(candidate)

        for occ in iter_occurrences(self.positive, candidate):
            if not self._excluded(occ):
                return True
        return False

    def __repr__(self) -> str:
        return "%s(%r, %r)" % (type(self).__name__, self.positive.pattern,
                               [ex.pattern for ex in self.exclusions])


def iter_occurrences(regex: re.Pattern[str], text: str) -> Iterator[str]:
    """Non-overlapping matches of regex in text.

    Search continues from end of previous match, after empty
    match it moves one char forward.
    """
    pos = 0
    tlen = len(text)
    while pos <= tlen:
        m = regex.search(text, pos)
        if not m:
            break
        yield m.group(0)
        if m.end() > m.start():
            pos = m.end()
        else:
            pos = m.end() + 1


def _compile_source(glob: str, anchored: bool) -> Optional[re.Pattern[str]]:
    """Translate and compile, None if result is unusable.

    Anchored pattern uses \\A and \\Z, '$' would also match
    before trailing newline.
    """
    xre = translate(glob)
    if not xre:
        log.debug("empty pattern: %r", glob)
        return None
    if anchored:
        xre = r"\A" + xre + r"\Z"
    try:
        return re.compile(xre)
    except re.error as d:
        log.debug("invalid pattern: %r -> %r: %s", glob, xre, d)
        return None


def compile_with_negation(glob: str, anchored: bool = False) -> Optional[Matcher]:
    """Compile glob that contains !() groups.

    Returns None if there are no negations or positive
    part fails to compile.
    """
    spans = extract_negations(glob)
    if not spans:
        return None

    positive = _compile_source(build_variant(glob, spans, -1), anchored)
    if positive is None:
        return None

    exclusions = []
    for i in range(len(spans)):
        ex = _compile_source(build_variant(glob, spans, i), True)
        if ex is None:
            log.debug("dropping exclusion %d of %r", i, glob)
            continue
        exclusions.append(ex)

    if not exclusions:
        return RegexMatcher(positive)
    return NegationMatcher(positive, exclusions, anchored)


def compile_glob(glob: str, anchored: bool = False) -> Optional[Matcher]:
    """Convert glob pattern to matcher.

    Returns None for invalid pattern.
    """
    matcher = compile_with_negation(glob, anchored)
    if matcher is not None:
        return matcher

    rx = _compile_source(glob, anchored)
    if rx is None:
        return None
    return RegexMatcher(rx)


def xfilter(pat: str, names: Iterable[str], anchored: bool = True) -> Iterator[str]:
    """Filter name list based on glob pattern.
    """
    matcher = compile_glob(pat, anchored)
    if matcher is None:
        return
    for n in matcher.filter(names):
        yield n

"""Glob to regex compiler with extglob negation support.
"""

from globrx.matcher import Matcher, compile_glob, xfilter
from globrx.translate import escape, has_magic, re_escape, translate

__version__ = "1.0.0"

__all__ = ["compile_glob", "translate", "xfilter", "Matcher",
           "escape", "re_escape", "has_magic"]

#! /usr/bin/env python3

"""globrx <command> <command args>

    Compile globs into regexes and match names against them.

Commands:

    translate GLOB          - print regex source
    match GLOB NAME...      - print names that match
    filter [GLOB]           - filter names from stdin
"""

import logging
import sys

from globrx.matcher import NegationMatcher, compile_glob
from globrx.negation import build_variant, extract_negations
from globrx.scripting import CmdScript, UsageError
from globrx.translate import translate

__all__ = ['GlobTool', 'main']


class GlobTool(CmdScript):
    __doc__ = __doc__

    log = logging.getLogger('globrx')

    def init_argparse(self, parser=None):
        p = super(GlobTool, self).init_argparse(parser)
        p.description = __doc__.strip().split('\n')[0]
        p.add_argument("-a", "--anchored", action="store_true",
                       help="pattern must match whole name")
        return p

    @property
    def anchored(self):
        if self.options.anchored:
            return True
        return self.cf.getboolean('anchored', False)

    def get_matcher(self, glob):
        matcher = compile_glob(glob, self.anchored)
        if matcher is None:
            raise UsageError("Invalid glob: %s" % glob)
        self.log.debug("compiled %r: %r", glob, matcher)
        return matcher

    def output(self, line):
        sys.stdout.write(line + '\n')

    def cmd_translate(self, glob):
        """Print regex source for glob."""
        spans = extract_negations(glob)
        if not spans:
            xre = translate(glob, self.anchored)
            if not xre:
                raise UsageError("Invalid glob: %s" % glob)
            self.output(xre)
            return 0

        self.output(translate(build_variant(glob, spans), self.anchored))
        for i in range(len(spans)):
            self.output("!" + translate(build_variant(glob, spans, i), True))
        return 0

    def cmd_match(self, glob, *names):
        """Print names that match glob, exit code 1 if none."""
        matcher = self.get_matcher(glob)
        found = 0
        for n in matcher.filter(names):
            self.output(n)
            found += 1
        if not found:
            self.log.info("No matches for %s", glob)
            return 1
        return 0

    def cmd_filter(self, glob=None):
        """Filter names from stdin."""
        if glob:
            matchers = [self.get_matcher(glob)]
        else:
            patterns = self.cf.getlist('patterns', [])
            if not patterns:
                raise UsageError("No glob given and no patterns configured")
            matchers = [self.get_matcher(p) for p in patterns]

        for ln in sys.stdin:
            name = ln.rstrip('\r\n')
            if not name:
                continue
            for m in matchers:
                if m.test(name):
                    self.output(name)
                    break
        return 0


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    script = GlobTool('globrx', args)
    res = script.start()
    sys.stdout.flush()
    sys.stderr.flush()
    return res


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(1)

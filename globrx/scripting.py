"""Useful functions and classes for Python command-line tools.
"""

import sys
import inspect
import logging
import argparse

from globrx import __version__
from globrx.config import Config

__all__ = ['CmdScript', 'UsageError']


class UsageError(Exception):
    """User induced error."""


class CmdScript(object):
    """Command-line script with subcommands and optional config file.
    """

    service_name = None
    cf = None

    # setup logger here, this allows override by subclass
    log = logging.getLogger('CmdScript')

    def __init__(self, service_name, args):
        """Script setup.

        User class should add cmd_* methods and optionally
        override startup() and init_argparse().

        @param service_name: unique name for script.
            It is also the main section name in config file.
        @param args: cmdline args (sys.argv[1:]), but can be overridden
        """
        self.service_name = service_name
        self.log_level = logging.INFO

        # parse command line
        parser = self.init_argparse()
        self.options = parser.parse_args(args)
        self.args = self.options.args

        # check args
        if self.options.version:
            self.print_version()
            sys.exit(0)
        if self.options.quiet:
            self.log_level = logging.WARNING
        if self.options.verbose:
            self.log_level = logging.DEBUG

        # init logging
        logging.basicConfig(level=self.log_level,
                            format="%(asctime)s %(name)s - %(levelname)s: %(message)s",
                            datefmt="%H:%M:%S")

        self.cf_override = {}
        if self.options.set:
            for a in self.options.set:
                if '=' not in a:
                    parser.error("--set needs PARAM=VAL, got %r" % a)
                k, v = a.split('=', 1)
                self.cf_override[k.strip()] = v.strip()

        # read config file
        self.reload()

    def init_argparse(self, parser=None):
        """Initialize a ArgumentParser() instance that will be used to
        parse command line arguments.

        @param parser: optional ArgumentParser() instance,
               where CmdScript should attach its own arguments.
        @return: initialized ArgumentParser() instance.
        """
        if parser:
            p = parser
        else:
            p = argparse.ArgumentParser(prog=self.service_name)

        # generic options
        p.add_argument("-q", "--quiet", action="store_true",
                       help="log only errors and warnings")
        p.add_argument("-v", "--verbose", action="count",
                       help="log verbosely")
        p.add_argument("-V", "--version", action="store_true",
                       help="print version info and exit")
        p.add_argument("-c", "--config",
                       help="config file")
        p.add_argument("--set", action="append",
                       help="override config setting (--set 'PARAM=VAL')")
        p.add_argument("command", nargs="?", help="command name")
        p.add_argument("args", nargs=argparse.REMAINDER, help="arguments for command")
        return p

    def print_version(self):
        sys.stdout.write("%s %s\n" % (self.service_name, __version__))

    def reload(self):
        """Reload config.
        """
        self.log.debug('reload')
        # avoid double loading on startup
        if not self.cf:
            self.cf = self.load_config()
        else:
            self.cf.reload()
            self.log.info("Config reloaded")

    def load_config(self):
        """Loads config.
        """
        return Config(self.service_name, self.options.config, override=self.cf_override)

    def startup(self):
        pass

    def start(self):
        self.run_func_safely(self.startup)
        return self.run_func_safely(self.work)

    def run_func_safely(self, func):
        "Run users work function, safely."
        try:
            return func()
        except UsageError as d:
            self.log.error(str(d))
        except SystemExit:
            raise
        except KeyboardInterrupt:
            sys.exit(1)
        except Exception:
            self.log.exception('Command failed')
        # done
        sys.exit(1)

    def work(self):
        """Non-looping work function, calls command function."""

        cmd = self.options.command
        cmdargs = self.options.args
        if not cmd:
            raise UsageError('command missing, see --help for usage')

        # find function
        fname = "cmd_" + cmd.replace('-', '_')
        if not hasattr(self, fname):
            raise UsageError('bad subcommand, see --help for usage')
        fn = getattr(self, fname)

        # check if correct number of arguments
        spec = inspect.getfullargspec(fn)
        n_args = len(spec.args) - 1   # drop 'self'
        n_min = n_args - len(spec.defaults or ())
        if len(cmdargs) < n_min or (spec.varargs is None and len(cmdargs) > n_args):
            helpstr = ""
            if n_args:
                helpstr = ": " + " ".join(spec.args[1:])
            if spec.varargs:
                helpstr += " " + spec.varargs + "..."
            raise UsageError("command '%s' got %d args, but expects %d%s"
                             % (cmd, len(cmdargs), n_min, helpstr))

        # run command
        return fn(*cmdargs)

"""Config file for globrx command.

Interpolation is disabled, glob patterns contain '$', '%' and '{'.
"""

import os.path

from configparser import NoOptionError, NoSectionError, Error as ConfigError, ConfigParser


__all__ = ['Config', 'NoOptionError', 'NoSectionError', 'ConfigError']

_UNSET = object()


class Config(object):
    """Bit improved ConfigParser.

    Additional features:
     - Remembers section.
     - Accepts defaults in get() functions.
     - List value support.
    """
    def __init__(self, main_section, filename, override=None):
        """Initialize Config and read from file.
        """
        self.main_section = main_section
        self.filename = filename
        self.override = override or {}
        self.cf = ConfigParser(interpolation=None)

        if filename is None:
            self.cf.add_section(main_section)
        elif not os.path.isfile(filename):
            raise ConfigError('Config file not found: ' + filename)

        self.reload()

    def reload(self):
        """Re-reads config file."""
        if self.filename:
            self.cf.read(self.filename)
        if not self.cf.has_section(self.main_section):
            raise NoSectionError(self.main_section)

        for k, v in self.override.items():
            self.cf.set(self.main_section, k, v)

    def get(self, key, default=_UNSET):
        """Reads string value, if not set then default."""

        if not self.cf.has_option(self.main_section, key):
            if default is _UNSET:
                raise NoOptionError(key, self.main_section)
            return default

        return str(self.cf.get(self.main_section, key))

    def getint(self, key, default=_UNSET):
        """Reads int value, if not set then default."""

        if not self.cf.has_option(self.main_section, key):
            if default is _UNSET:
                raise NoOptionError(key, self.main_section)
            return default

        return self.cf.getint(self.main_section, key)

    def getboolean(self, key, default=_UNSET):
        """Reads boolean value, if not set then default."""

        if not self.cf.has_option(self.main_section, key):
            if default is _UNSET:
                raise NoOptionError(key, self.main_section)
            return default

        return self.cf.getboolean(self.main_section, key)

    def getlist(self, key, default=_UNSET):
        """Reads comma-separated list from key.

        Commas inside {} are part of pattern, not separators.
        """

        if not self.cf.has_option(self.main_section, key):
            if default is _UNSET:
                raise NoOptionError(key, self.main_section)
            return default

        s = self.get(key).strip()
        res = []
        cur = []
        depth = 0
        for c in s:
            if c == ',' and depth == 0:
                res.append(''.join(cur))
                cur = []
                continue
            if c == '{':
                depth += 1
            elif c == '}' and depth > 0:
                depth -= 1
            cur.append(c)
        res.append(''.join(cur))
        return [v.strip() for v in res if v.strip()]

    def has_option(self, opt):
        """Checks if option exists in main section."""
        return self.cf.has_option(self.main_section, opt)

    def set(self, key, val):
        """Sets key value.
        """
        self.cf.set(self.main_section, key, val)

from __future__ import annotations
import collections
import configparser
import logging
import os
import typing as t

from os.path import expanduser, expandvars, isfile

import pytz

from attrcast import release

if t.TYPE_CHECKING:
    from collections.abc import Callable

_logger = logging.getLogger(__name__)


class _Option:
    """ Declaration of one configuration option: its type, its default
        value and the environment variable it is read from.
    """
    __slots__ = ('name', 'type', 'my_default', 'env_name', 'help')

    def __init__(self, name: str, type: str = 'string', my_default: t.Any = None,
                 env_name: str | None = None, help: str = '') -> None:
        self.name = name
        self.type = type
        self.my_default = my_default
        self.env_name = f"{release.PRODUCT_NAME.upper()}_{name.upper()}" if env_name is None else env_name
        self.help = help

    def __repr__(self):
        return f"<_Option {self.name}:{self.type}>"


OPTIONS = [
    _Option('timezone', 'timezone', 'UTC',
            help="timezone used to localize naive datetime values"),
    _Option('log_level', 'loglevel', 'info',
            help="level of the root attrcast logger"),
    _Option('log_handler', 'comma', [],
            help="comma-separated list of LOGGER:LEVEL pairs"),
    _Option('logfile', 'path', None,
            help="file used by the log handler instead of stderr"),
    _Option('date_format', 'string', '%Y-%m-%d',
            help="format of dates rendered as strings"),
    _Option('datetime_format', 'string', '%Y-%m-%d %H:%M:%S',
            help="format of datetimes rendered as strings"),
    _Option('integer_limit', 'int', 4,
            help="default storage size in bytes of integer attributes"),
]

LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')


class configmanager:
    """ Layered option store. Lookups go through runtime values, then the
        environment, then the config file, then the defaults.
    """

    def __init__(self, rcfile: str | None = None) -> None:
        self._default_opts: dict[str, t.Any] = {}
        self._file_opts: dict[str, t.Any] = {}
        self._env_opts: dict[str, t.Any] = {}
        self._runtime_opts: dict[str, t.Any] = {}
        self.opts = collections.ChainMap(self._runtime_opts,
                                         self._env_opts,
                                         self._file_opts,
                                         self._default_opts,)
        self.opts_index: dict[str, _Option] = {opt.name: opt for opt in OPTIONS}
        self.rcfile = rcfile
        self.reset()

    @property
    def TYPE_CHECKER(self) -> dict[str, Callable[[str, str], t.Any]]:
        return {
            'int': lambda _opt, value: int(value),
            'string': lambda _opt, value: str(value),
            'path': self._check_path,
            'comma': self._check_comma,
            'loglevel': self._check_loglevel,
            'timezone': self._check_timezone,
        }

    def reset(self) -> None:
        """ Reload every option from the defaults, the config file and the
            environment. Runtime values are dropped.
        """
        self._default_opts.clear()
        self._default_opts.update({opt_name: opt.my_default
                                   for opt_name, opt in self.opts_index.items()})
        self._runtime_opts.clear()
        rcfile = self.rcfile or os.environ.get('ATTRCAST_RC')
        self._load_file_opts(rcfile)
        self._load_env_opts()

    def load(self, rcfile: str) -> None:
        """ Load the ``[options]`` section of the INI file ``rcfile``. """
        self.rcfile = rcfile
        self._load_file_opts(rcfile)

    def _load_env_opts(self) -> None:
        self._env_opts.clear()
        environ = os.environ
        for opt_name, opt in self.opts_index.items():
            env_name = opt.env_name
            if env_name and env_name in environ:
                self._env_opts[opt_name] = self.parse(opt_name, environ[env_name])

    def _load_file_opts(self, filepath: str | None) -> None:
        self._file_opts.clear()
        if not filepath:
            return
        filepath = self._normalizepath(filepath)
        if not isfile(filepath):
            _logger.warning("config file %s not found, skipped", filepath)
            return
        p = configparser.RawConfigParser()
        try:
            p.read([filepath], encoding='utf-8')
            for (name, value) in p.items('options'):
                if name not in self.opts_index:
                    _logger.warning("unknown option %r in config file %s, skipped", name, filepath)
                    continue
                self._file_opts[name] = self.parse(name, value)
        except configparser.NoSectionError:
            _logger.warning("config file %s has no [options] section", filepath)

    # region: MAPPING

    def __getitem__(self, key) -> t.Any:
        return self.opts[key]

    def __setitem__(self, key: str, value: t.Any) -> None:
        if key not in self.opts_index:
            raise KeyError(f"Unknown option {key!r}")
        if isinstance(value, str):
            value = self.parse(key, value)
        self._runtime_opts[key] = value

    def __contains__(self, key) -> bool:
        return key in self.opts

    def get(self, key: str, default=None):
        return self.opts.get(key, default)

    # endregion

    # region: CHECKER

    @classmethod
    def _normalizepath(cls, path: str) -> str:
        return os.path.normcase(os.path.realpath(os.path.abspath(expanduser(expandvars(path.strip())))))

    def _check_path(self, opt_name, value):
        return self._normalizepath(value)

    def _check_comma(self, opt_name, value):
        return [v for s in value.split(',') if (v := s.strip())]

    def _check_loglevel(self, opt_name, value):
        value = value.strip().lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"option {opt_name}: invalid log level {value!r}")
        return value

    def _check_timezone(self, opt_name, value):
        value = value.strip()
        if value not in pytz.all_timezones_set:
            raise ValueError(f"option {opt_name}: unknown timezone {value!r}")
        return value

    # endregion

    def parse(self, opt_name: str, value: str) -> t.Any:
        if not isinstance(value, str):
            e = "Can only parse string values for option %s, got %s" % (opt_name, type(value))
            raise TypeError(e)
        if value == 'None':
            return None
        opt = self.opts_index[opt_name]
        return self.TYPE_CHECKER[opt.type](opt_name, value)

    @property
    def tz(self) -> pytz.BaseTzInfo:
        return pytz.timezone(self['timezone'])


config = configmanager()

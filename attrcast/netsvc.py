from __future__ import annotations
import logging
import logging.handlers
import os
import sys

from attrcast import release
from attrcast.config import config


_logger = logging.getLogger(__name__)


# region: File Handler
class WatchedFileHandler(logging.handlers.WatchedFileHandler):
    def __init__(self, filename):
        self.errors = None
        super().__init__(filename)
        # Unfix bpo-26789, in case the fix is present
        self._builtin_open = None

    def _open(self):
        return open(self.baseFilename, self.mode, encoding=self.encoding, errors=self.errors)

# endregion

# region: COLOR

RED, GREEN, YELLOW, BLUE, WHITE, DEFAULT = 1, 2, 3, 4, 7, 9
RESET_SEQ = "\033[0m"
COLOR_SEQ = "\033[1;%dm"
COLOR_PATTERN = f"{COLOR_SEQ}{COLOR_SEQ}%s{RESET_SEQ}"
LC_MAP = {logging.DEBUG: (BLUE, DEFAULT),
          logging.INFO: (GREEN, DEFAULT),
          logging.WARNING: (YELLOW, DEFAULT),
          logging.ERROR: (RED, DEFAULT),
          logging.CRITICAL: (WHITE, RED),}


class ColoredFormatter(logging.Formatter):
    default_time_format = '%y/%b/%d %H:%M:%S'
    default_msec_format = '%s.%03d'

    def format(self, record):
        fore, back = LC_MAP.get(record.levelno, (GREEN, DEFAULT))
        record.levelname = COLOR_PATTERN % (30 + fore, 40 + back, record.levelname)
        return super().format(record)

# endregion

LOG_FORMAT = '%(asctime)s %(process)s %(levelname)s %(name)s: %(message)s'
DEFAULT_LOG_CONFIG = ["attrcast:INFO"]

_handler: logging.Handler | None = None


def is_a_tty(stream) -> bool:
    return hasattr(stream, 'fileno') and stream.isatty()


def init_logger() -> logging.Handler:
    """ Install the attrcast log handler on the root logger, then apply the
        ``log_level`` and ``log_handler`` options. Calling it again only
        re-applies the levels.
    """
    global _handler
    if _handler is None:
        handler = logging.StreamHandler()
        if config['logfile']:
            logf = config['logfile']
            try:
                dirname = os.path.dirname(logf)
                if dirname and not os.path.isdir(dirname):
                    os.makedirs(dirname)
                if os.name == 'posix':
                    handler = WatchedFileHandler(logf)
                else:
                    handler = logging.FileHandler(logf)
            except OSError:
                sys.stderr.write("ERROR: couldn't create the logfile directory. Logging to the standard output.\n")

        if not isinstance(handler, logging.FileHandler) and is_a_tty(handler.stream):
            formatter = ColoredFormatter(LOG_FORMAT)
        else:
            formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logging.getLogger().addHandler(handler)
        _handler = handler

    logging_config = [
        *DEFAULT_LOG_CONFIG,
        f"{release.PRODUCT_NAME}:{config['log_level'].upper()}",
        *config['log_handler'],
    ]
    for item in logging_config:
        loggername, _sep, level = item.strip().rpartition(":")
        level = getattr(logging, level.upper(), logging.INFO)
        logger = logging.getLogger(loggername)
        logger.setLevel(level)
        _logger.debug("logger level set: %s %s", loggername or 'root', level)
    return _handler

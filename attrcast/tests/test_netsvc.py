import logging

from attrcast import netsvc
from attrcast.config import config


def test_init_logger(monkeypatch):
    monkeypatch.setattr(netsvc, '_handler', None)
    root = logging.getLogger()
    config['log_handler'] = "attrcast.models:WARNING"
    handler = netsvc.init_logger()
    try:
        assert handler in root.handlers
        assert logging.getLogger('attrcast').level == logging.INFO
        assert logging.getLogger('attrcast.models').level == logging.WARNING
        # a second call only applies the levels again
        config['log_level'] = 'debug'
        assert netsvc.init_logger() is handler
        assert logging.getLogger('attrcast').level == logging.DEBUG
    finally:
        root.removeHandler(handler)
        logging.getLogger('attrcast').setLevel(logging.NOTSET)
        logging.getLogger('attrcast.models').setLevel(logging.NOTSET)


def test_logfile(tmp_path, monkeypatch):
    monkeypatch.setattr(netsvc, '_handler', None)
    logfile = tmp_path / "logs" / "attrcast.log"
    config['logfile'] = str(logfile)
    handler = netsvc.init_logger()
    try:
        assert isinstance(handler, logging.FileHandler)
        logging.getLogger('attrcast.tests').warning("written to file")
        handler.flush()
        assert "written to file" in logfile.read_text()
    finally:
        logging.getLogger().removeHandler(handler)
        handler.close()
        logging.getLogger('attrcast').setLevel(logging.NOTSET)


def test_colored_formatter():
    formatter = netsvc.ColoredFormatter('%(levelname)s %(message)s')
    record = logging.LogRecord('attrcast', logging.WARNING, __file__, 1, "careful", None, None)
    assert formatter.format(record) == "\033[1;33m\033[1;49mWARNING\033[0m careful"

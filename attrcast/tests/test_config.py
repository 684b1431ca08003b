import configparser

import pytest

from attrcast.config import configmanager, config


def test_defaults():
    assert config['timezone'] == 'UTC'
    assert config['integer_limit'] == 4
    assert config['log_handler'] == []
    assert config.get('no_such_option', 'x') == 'x'


def test_set_runtime_values():
    config['integer_limit'] = "8"
    assert config['integer_limit'] == 8
    config['log_handler'] = "attrcast.types:DEBUG, attrcast.models:WARNING"
    assert config['log_handler'] == ["attrcast.types:DEBUG", "attrcast.models:WARNING"]
    with pytest.raises(ValueError):
        config['timezone'] = "Mars/Olympus_Mons"
    with pytest.raises(ValueError):
        config['log_level'] = "loud"
    with pytest.raises(KeyError):
        config['no_such_option'] = 1


def test_reset_drops_runtime_values():
    config['timezone'] = 'Asia/Jakarta'
    config.reset()
    assert config['timezone'] == 'UTC'


def test_file_and_environment(tmp_path, monkeypatch):
    rcfile = tmp_path / "attrcast.conf"
    rcfile.write_text("[options]\ntimezone = Europe/Paris\ninteger_limit = 2\nlog_level = debug\n")
    monkeypatch.setenv("ATTRCAST_INTEGER_LIMIT", "8")
    conf = configmanager(str(rcfile))
    assert conf['timezone'] == 'Europe/Paris'
    assert conf['log_level'] == 'debug'
    # the environment wins over the file
    assert conf['integer_limit'] == 8
    assert conf.tz.zone == 'Europe/Paris'


def test_rcfile_from_environment(tmp_path, monkeypatch):
    rcfile = tmp_path / "attrcast.conf"
    rcfile.write_text("[options]\ndate_format = %d.%m.%Y\n")
    monkeypatch.setenv("ATTRCAST_RC", str(rcfile))
    conf = configmanager()
    assert conf['date_format'] == '%d.%m.%Y'


def test_missing_or_invalid_file(tmp_path):
    conf = configmanager(str(tmp_path / "missing.conf"))
    assert conf['timezone'] == 'UTC'
    rcfile = tmp_path / "nosection.conf"
    rcfile.write_text("timezone = Europe/Paris\n")
    with pytest.raises(configparser.MissingSectionHeaderError):
        configmanager(str(rcfile))
    rcfile.write_text("[other]\ntimezone = Europe/Paris\n")
    assert configmanager(str(rcfile))['timezone'] == 'UTC'

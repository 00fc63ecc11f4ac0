import logging
from pathlib import Path

import pytest

from knxcore.config import KnxConfig
from knxdpt import cli


def test_config_defaults_and_env(monkeypatch, tmp_path):
    for k in ("KNX_B8_DEFAULT_DPT", "KNX_B8_LOG_FILE", "KNX_B8_VERBOSE"):
        monkeypatch.delenv(k, raising=False)
    cfg = KnxConfig.from_env()
    assert cfg == KnxConfig()
    assert (cfg.default_dpt, cfg.log_file, cfg.verbose) == ("21.001", None, False)

    monkeypatch.setenv("KNX_B8_DEFAULT_DPT", "21.002")
    monkeypatch.setenv("KNX_B8_LOG_FILE", str(tmp_path / "b8.log"))
    monkeypatch.setenv("KNX_B8_VERBOSE", "yes")
    cfg = KnxConfig.from_env()
    assert cfg.default_dpt == "21.002"
    assert cfg.log_file == tmp_path / "b8.log"
    assert cfg.verbose is True

    over = cfg.override(default_dpt="21.601", verbose=False)
    assert (over.default_dpt, over.log_file, over.verbose) == ("21.601", tmp_path / "b8.log", False)
    assert cfg.override() == cfg

    with pytest.raises(ValueError):
        KnxConfig(default_dpt="")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for k in ("KNX_B8_DEFAULT_DPT", "KNX_B8_LOG_FILE", "KNX_B8_VERBOSE"):
        monkeypatch.delenv(k, raising=False)
    yield
    logging.getLogger().handlers.clear()


def test_cli_list(capsys):
    assert cli.main(["list"]) == 0
    out = capsys.readouterr().out
    assert "21.001" in out and "OutOfService Fault Overridden InAlarm AlarmUnAck" in out
    assert "21.1010" in out


def test_cli_encode(capsys):
    assert cli.main(["encode", "--dpt", "21.001", "1 1 0 1", "0x08", "Fault"]) == 0
    assert "0d 08 02" in capsys.readouterr().out


def test_cli_decode_uses_env_default(monkeypatch, capsys):
    monkeypatch.setenv("KNX_B8_DEFAULT_DPT", "21.002")
    assert cli.main(["decode", "05"]) == 0
    assert "VerifyMode UserStopped" in capsys.readouterr().out


def test_cli_errors_return_2(capsys, tmp_path):
    log_file = tmp_path / "logs" / "b8.log"
    assert cli.main(["--log-file", str(log_file), "encode", "--dpt", "21.001", "xyz"]) == 2
    assert cli.main(["decode", "--dpt", "21.001", "ff"]) == 2
    assert cli.main(["decode", "--dpt", "21.001", "zz"]) == 2
    assert cli.main(["encode", "--dpt", "21.999", "1"]) == 2
    logging.shutdown()
    assert "xyz" in Path(log_file).read_text(encoding="utf-8")

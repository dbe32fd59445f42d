# tests/test_config.py
import json
import logging

import pytest
from dsutils.utils.config_manager import DEFAULTS, Config
from dsutils.utils.logger_utils import setup_logging, time_block


def test_defaults_when_file_missing(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    assert cfg.data == DEFAULTS
    assert not (tmp_path / "cfg.json").exists()


def test_set_coerces_and_saves(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    cfg.set("max_results", "5")
    cfg.set("sort_results", "no")
    cfg.set("default_weight", "2.5")
    assert cfg.get("max_results") == 5
    assert cfg.get("sort_results") is False
    saved = json.loads(path.read_text(encoding="utf8"))
    assert saved["default_weight"] == 2.5

    again = Config(str(path))
    assert again.get("max_results") == 5
    assert again.get("sort_results") is False


def test_set_rejects_unknown_and_bad_values(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    with pytest.raises(KeyError):
        cfg.set("theme", "dark")
    with pytest.raises(ValueError):
        cfg.set("max_results", "lots")
    with pytest.raises(ValueError):
        cfg.set("sort_results", "maybe")


def test_malformed_file_keeps_defaults(tmp_path, caplog):
    path = tmp_path / "cfg.json"
    path.write_text("{not json", encoding="utf8")
    with caplog.at_level(logging.WARNING, logger="dsutils"):
        cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert "unreadable config" in caplog.text


def test_partial_file_merges_with_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"max_results": 3, "bogus": 1}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("max_results") == 3
    assert cfg.get("sort_results") is True
    assert "bogus" not in cfg.data


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "ds.log"
    setup_logging("info", str(log_file))
    pkg = setup_logging("info", str(log_file))
    assert len(pkg.handlers) == 2
    with time_block("unit"):
        pass
    for h in pkg.handlers:
        h.flush()
    assert "unit done in" in log_file.read_text(encoding="utf-8")
    setup_logging("warning")


def test_time_block_reports_elapsed():
    with time_block("noop") as t:
        pass
    assert t.elapsed >= 0


def test_log_level_is_validated(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    cfg.set("log_level", "debug")
    assert cfg.get("log_level") == "DEBUG"
    with pytest.raises(ValueError, match="unknown log level"):
        cfg.set("log_level", "loud")
    assert cfg.get("log_level") == "DEBUG"
    assert json.loads(path.read_text(encoding="utf8"))["log_level"] == "DEBUG"


@pytest.mark.parametrize("bad", ["-1", "nan", "inf"])
def test_default_weight_must_be_finite_and_non_negative(tmp_path, bad):
    cfg = Config(str(tmp_path / "cfg.json"))
    with pytest.raises(ValueError):
        cfg.set("default_weight", bad)
    assert cfg.get("default_weight") == 1.0


@pytest.mark.parametrize("val, expected", [("0", 1), ("-5", 1), ("7", 7)])
def test_max_results_is_at_least_one(tmp_path, val, expected):
    cfg = Config(str(tmp_path / "cfg.json"))
    cfg.set("max_results", val)
    assert cfg.get("max_results") == expected


def test_bad_values_in_file_fall_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"log_level": "loud", "default_weight": -2,
                                "max_results": 0}), encoding="utf8")
    with caplog.at_level(logging.WARNING, logger="dsutils"):
        cfg = Config(str(path))
    assert cfg.get("log_level") == "WARNING"
    assert cfg.get("default_weight") == 1.0
    assert cfg.get("max_results") == 1
    assert "bad value for 'log_level'" in caplog.text

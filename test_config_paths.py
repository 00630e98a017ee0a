import json
import tempfile
from pathlib import Path

import config_paths


def _with_config(cfg_dir, fn):
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    orig_history = config_paths.HISTORY_PATH
    try:
        config_paths.CONFIG_DIR = str(cfg_dir)
        config_paths.CONFIG_JSON = str(cfg_dir / "config.json")
        config_paths.HISTORY_PATH = str(cfg_dir / "history.log")
        return fn()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json
        config_paths.HISTORY_PATH = orig_history


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _with_config(Path(tmp) / "csvdim", config_paths.load_config)
        assert cfg == {
            "RECORDS_PER_PAGE": 10,
            "HAS_HEADER": False,
            "ENCODING": "utf-8",
            "HISTORY_SIZE": 100,
        }


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "csvdim"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text(
            json.dumps(
                {
                    "records_per_page": 25,
                    "has_header": True,
                    "encoding": "latin-1",
                    "history_size": 5,
                    "unknown": "ignored",
                }
            )
        )
        cfg = _with_config(cfg_dir, config_paths.load_config)
        assert cfg["RECORDS_PER_PAGE"] == 25
        assert cfg["HAS_HEADER"] is True
        assert cfg["ENCODING"] == "latin-1"
        assert cfg["HISTORY_SIZE"] == 5
        assert "UNKNOWN" not in cfg


def test_load_config_ignores_bad_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "csvdim"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text(
            json.dumps(
                {
                    "records_per_page": 0,
                    "has_header": "yes",
                    "encoding": "",
                    "history_size": True,
                }
            )
        )
        cfg = _with_config(cfg_dir, config_paths.load_config)
        assert cfg["RECORDS_PER_PAGE"] == 10
        assert cfg["HAS_HEADER"] is False
        assert cfg["ENCODING"] == "utf-8"
        assert cfg["HISTORY_SIZE"] == 100


def test_load_config_survives_broken_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "csvdim"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text("{not json")
        cfg = _with_config(cfg_dir, config_paths.load_config)
        assert cfg["RECORDS_PER_PAGE"] == 10


def test_ensure_config_dirs_creates_history():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "nested" / "csvdim"
        _with_config(cfg_dir, config_paths.ensure_config_dirs)
        assert cfg_dir.is_dir()
        assert (cfg_dir / "history.log").read_text() == ""


def test_load_config_ignores_unknown_encoding():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "csvdim"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text(json.dumps({"encoding": "bogus-codec"}))
        cfg = _with_config(cfg_dir, config_paths.load_config)
        assert cfg["ENCODING"] == "utf-8"

# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from docs_archiver.config import ArchiverConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("base_url: http://example.com/\nskip_existing: true", ".yaml", None),
        (json.dumps({"base_url": "http://example.com", "skip_existing": True}), ".json", None),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("base_url: ftp://example.com", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("base_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path, environ={})
    else:
        cfg = load_config(cfg_path, environ={})
        assert isinstance(cfg, ArchiverConfig)
        assert cfg.base_url == "http://example.com"
        assert cfg.skip_existing is True


def test_defaults():
    cfg = load_config(environ={})
    assert cfg.base_url == "https://docs.example.com"
    assert cfg.start_url == "https://docs.example.com/getting-started"
    assert cfg.output_dir == Path("archived-docs")
    assert cfg.skip_existing is False
    assert cfg.delay == 1.0
    assert cfg.timeout == 10.0
    assert cfg.api_key is None


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml", environ={})


def test_precedence_flag_over_env_over_file(tmp_path):
    cfg_path = write_file(
        tmp_path,
        "base_url: https://file.example.com\nstart_url: https://file.example.com/s\noutput_dir: from-file",
        ".yaml",
    )
    env = {"BASE_URL": "https://env.example.com", "START_URL": "https://env.example.com/s", "ANTHROPIC_API_KEY": "k"}

    cfg = load_config(cfg_path, environ=env, start_url="https://flag.example.com/s", base_url=None)

    assert cfg.base_url == "https://env.example.com"
    assert cfg.start_url == "https://flag.example.com/s"
    assert cfg.output_dir == Path("from-file")
    assert cfg.api_key == "k"


def test_start_url_kept_verbatim_base_url_stripped():
    cfg = ArchiverConfig(base_url="https://d.example.com///", start_url="https://d.example.com/")
    assert cfg.base_url == "https://d.example.com"
    assert cfg.start_url == "https://d.example.com/"


def test_blank_api_key_is_missing():
    assert load_config(environ={"ANTHROPIC_API_KEY": ""}).api_key is None
    assert ArchiverConfig(api_key="   ").api_key is None


def test_api_key_hidden_from_repr():
    assert "sekrit" not in repr(ArchiverConfig(api_key="sekrit"))


@pytest.mark.parametrize("field,value", [("delay", -1), ("timeout", 0), ("max_tokens", 0), ("max_nav_depth", 0)])
def test_bounds(field, value):
    with pytest.raises(ValidationError):
        ArchiverConfig(**{field: value})

# === FILE: docs_archiver/config.py ===
"""
Loading and validation of the archiver configuration.
Pydantic describes the schema; values come from an optional YAML/JSON file,
the environment and CLI overrides (in increasing order of precedence).
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://docs.example.com"
DEFAULT_START_URL = "https://docs.example.com/getting-started"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
DEFAULT_API_URL = "https://api.anthropic.com/v1/messages"

#: environment variable -> config field
ENV_VARS: Dict[str, str] = {
    "ANTHROPIC_API_KEY": "api_key",
    "BASE_URL": "base_url",
    "START_URL": "start_url",
    "OUTPUT_DIR": "output_dir",
}


class ArchiverConfig(BaseModel):
    """Settings for one archiving run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(DEFAULT_BASE_URL, description="Root of the documentation site.")
    start_url: str = Field(DEFAULT_START_URL, description="First page of the crawl.")
    output_dir: Path = Field(Path("archived-docs"), description="Directory of archived pages.")
    skip_existing: bool = Field(False, description="Do not re-archive pages already on disk.")
    timeout: float = Field(10.0, gt=0, description="Timeout of one page fetch (seconds).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="User-Agent header.")
    delay: float = Field(1.0, ge=0, description="Pause after every archived page (seconds).")

    api_key: Optional[str] = Field(None, repr=False, description="Anthropic API key.")
    api_url: str = Field(DEFAULT_API_URL, description="Messages endpoint of the conversion API.")
    model: str = Field("claude-3-5-sonnet-latest", min_length=1)
    max_tokens: int = Field(4000, ge=1)
    convert_timeout: float = Field(120.0, gt=0, description="Timeout of one conversion call.")

    max_nav_depth: int = Field(64, ge=1, description="Deepest navigation group that is followed.")

    @field_validator("base_url", mode="before")
    def _strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @field_validator("base_url", "start_url", "api_url")
    def _require_http(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"expected an http(s) URL, got {v!r}")
        return v

    @field_validator("api_key", mode="before")
    def _blank_key_is_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def _read_file(path: Union[str, Path]) -> dict[str, Any]:
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def _from_env(environ: Mapping[str, str]) -> dict[str, Any]:
    return {field: environ[var] for var, field in ENV_VARS.items() if environ.get(var)}


def load_config(
    path: Union[str, Path, None] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> ArchiverConfig:
    """
    Build a validated :class:`ArchiverConfig`.

    Values are layered: defaults < config file (YAML or JSON, optional) <
    environment variables (see :data:`ENV_VARS`) < keyword overrides whose
    value is not ``None``.
    """
    data: dict[str, Any] = _read_file(path) if path is not None else {}
    data.update(_from_env(os.environ if environ is None else environ))
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ArchiverConfig(**data)


__all__ = ["ArchiverConfig", "load_config", "ENV_VARS"]

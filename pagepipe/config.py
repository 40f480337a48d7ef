# === FILE: pagepipe/config.py ===
"""
Loading and validation of the discovery configuration.
Pydantic describes the schema; YAML and JSON files are both accepted.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ("DiscoveryConfig", "load_config", "DEFAULT_CONFIG_PATH")


class DiscoveryConfig(BaseModel):
    """Policy for one discovery run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_pages: int = Field(100, ge=1, description="Cap on URLs enqueued by the link crawl.")
    sitemap_path: str = Field("/sitemap.xml", min_length=1, description="Sitemap location on the target host.")
    use_sitemap: bool = Field(True, description="Try the sitemap before crawling links.")
    sitemap_timeout: float = Field(15.0, gt=0, description="Timeout for the sitemap request (seconds).")
    fetch_timeout: float = Field(30.0, gt=0, description="Timeout for one page request (seconds).")
    user_agent: str = Field("PagePipe/1.0", min_length=1, description="User-Agent header.")
    retry_times: int = Field(0, ge=0, description="Retries on 429/5xx responses.")
    retry_backoff: float = Field(1.0, gt=0, description="Base delay of the exponential backoff (seconds).")

    @field_validator("sitemap_path")
    @classmethod
    def _check_sitemap_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("sitemap_path must start with '/'")
        return v


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


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


def load_config(path: Union[str, Path, None] = None) -> DiscoveryConfig:
    """
    Read YAML or JSON and return a validated DiscoveryConfig.

    With ``path=None`` the file ``configs/default.yaml`` is used when it exists,
    otherwise the built-in defaults. An explicit path that does not exist raises
    FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.is_file():
            return DiscoveryConfig()
        path_obj = DEFAULT_CONFIG_PATH
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return DiscoveryConfig(**data)

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_ROOT = PACKAGE_ROOT / "data"
DEFAULTS_FILE = "icaomrz.defaults.yaml"
LOG_LEVEL_ENV = "ICAOMRZ_LOG_LEVEL"


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    return data or {}


@lru_cache(maxsize=1)
def load_defaults(config_root: Path | None = None) -> Dict[str, Any]:
    root = config_root or CONFIG_ROOT
    return _load_yaml(root / DEFAULTS_FILE)


def resolve_log_level(cli_value: str | None, cfg: Dict[str, Any]) -> int:
    configured = cfg.get("logging", {}).get("level", "WARNING")
    name = str(cli_value or os.getenv(LOG_LEVEL_ENV) or configured).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(cli_value: str | None = None, cfg: Dict[str, Any] | None = None) -> int:
    cfg = cfg if cfg is not None else load_defaults()
    level = resolve_log_level(cli_value, cfg)
    fmt = cfg.get("logging", {}).get("format", "%(levelname)s %(name)s: %(message)s")
    logging.basicConfig(level=level, format=fmt)
    logging.getLogger("icaomrz").setLevel(level)
    return level


__all__ = ["CONFIG_ROOT", "LOG_LEVEL_ENV", "load_defaults", "resolve_log_level", "configure_logging"]

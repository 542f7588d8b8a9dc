"""File I/O and path utilities."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_json(path: str | Path) -> dict[str, Any]:
    """Load a JSON file and return its contents."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"JSON file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_config_data(path: str | Path) -> dict[str, Any]:
    """Load a configuration file, choosing YAML or JSON by extension.

    ``.yaml``/``.yml`` are read as YAML; everything else (``.json``, the
    legacy ``config.js``) is read as JSON.
    """
    path = Path(path)
    if path.suffix.lower() in _YAML_SUFFIXES:
        logger.debug(f"Loading YAML configuration {path}")
        return load_yaml(path)
    logger.debug(f"Loading JSON configuration {path}")
    return load_json(path)


def read_lines(path: str | Path) -> list[str]:
    """Read a UTF-8 text file and return its lines without terminators.

    A trailing newline does not produce an extra empty line, so a file with
    N lines always yields N strings.
    """
    path = Path(path)
    with open(path, encoding="utf-8", newline=None) as f:
        return [line.rstrip("\r\n") for line in f]

"""Helpers for loading engine configuration from TOML/JSON sources.

`load_engine_config` accepts:

* None -> default EngineConfig
* dict -> EngineConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from depimpact.config.schema import EngineConfig

logger = logging.getLogger("depimpact.runtime.config_loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _parse_text(text: str, fmt: Optional[str] = None) -> Any:
    """Parse configuration text as JSON or TOML.

    Without an explicit format, text opening with ``{`` is JSON. Text opening
    with ``[`` is either a JSON array or a TOML table header, so JSON is tried
    first and TOML on a decode error. Anything else is TOML.
    """
    if fmt == "json":
        return json.loads(text)
    if fmt == "toml":
        return tomllib.loads(text)

    stripped = text.lstrip()
    if stripped.startswith("{"):
        return json.loads(text)
    if stripped.startswith("["):
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return tomllib.loads(text)
    return tomllib.loads(text)


def load_engine_config(source: ConfigSource) -> EngineConfig:
    """Load EngineConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns EngineConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        EngineConfig instance.

    Raises:
        ValueError: The parsed configuration is not a mapping.
        TypeError: The source type is unsupported.
        ValidationError: The configuration values are invalid.
    """
    if source is None:
        logger.debug("No config source provided; using default EngineConfig")
        return EngineConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading EngineConfig from provided dict")
        return EngineConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            is_file = path.is_file()
        except OSError:
            # Inline configuration text can exceed filesystem name limits.
            is_file = False

        if is_file:
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = None
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt or "auto")
        else:
            text = str(source)
            fmt = None
            logger.info("Loading configuration from inline string")

        data = _parse_text(text, fmt)

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return EngineConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["ConfigSource", "load_engine_config"]

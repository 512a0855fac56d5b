"""YAML config parser for the HTTP client.

Parses YAML config files into HTTPOptions objects. Example:

    http:
      retryCount: 3
      initialDelay: 50ms
      maxDelay: 2s
      exponentFactor: 2
      maxJitterInterval: 10ms
"""

import re
from pathlib import Path
from typing import Any, Union

import yaml

from .schema import DURATION_FIELDS, OPTION_ALIASES, HTTPOptions

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m)?\s*$")
_UNIT_SECONDS = {"ms": 0.001, "s": 1.0, "m": 60.0, None: 1.0}


def parse_config(file_path: Union[str, Path]) -> HTTPOptions:
    """Parse a YAML config file into HTTPOptions.

    Args:
        file_path: Path to the YAML config file.

    Returns:
        Parsed HTTPOptions (defaults for anything not set).

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the YAML is malformed or a value has the wrong type.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        return HTTPOptions()

    return parse_config_data(data, source=str(file_path))


def parse_config_data(data: dict, source: str = "<inline>") -> HTTPOptions:
    """Parse options from a dictionary (already loaded YAML).

    Options may sit at the top level or under an `http` key. Keys may be
    snake_case or camelCase; unknown keys are ignored.

    Args:
        data: Dictionary with config data.
        source: Source identifier for error messages.

    Returns:
        Parsed HTTPOptions.

    Raises:
        ValueError: If a value is malformed.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__}")

    section = data.get("http", data)
    if not isinstance(section, dict):
        raise ValueError(f"'http' must be a mapping in {source}")

    values: dict[str, Any] = {}
    for key, raw in section.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in HTTPOptions.__dataclass_fields__:
            continue
        values[name] = _coerce(name, raw, source)

    return HTTPOptions(**values)


def parse_duration(value: Any) -> float:
    """Convert a duration to seconds.

    Accepts numbers (seconds) or strings like "250ms", "1.5s", "2m".

    Raises:
        ValueError: If the value is not a valid duration.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        match = _DURATION_RE.match(value)
        if match:
            amount, unit = match.groups()
            return float(amount) * _UNIT_SECONDS[unit]
    raise ValueError(f"Invalid duration: {value!r}. Expected seconds or e.g. '250ms', '1.5s'")


def _coerce(name: str, raw: Any, source: str) -> Any:
    """Convert a raw YAML value to the field's type."""
    try:
        if name in DURATION_FIELDS:
            return parse_duration(raw)
        if name in ("retry_count", "max_idle_connections"):
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise ValueError(f"expected an integer, got {raw!r}")
            return raw
        if name == "exponent_factor":
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise ValueError(f"expected a number, got {raw!r}")
            return float(raw)
        if name == "user_agent":
            return str(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for '{name}' in {source}: {e}") from e
    return raw

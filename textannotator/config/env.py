"""Environment variable support for configuration.

Variables named ``TEXTANNOTATOR_<SECTION>__<KEY>`` override configuration
values, e.g. ``TEXTANNOTATOR_LOGGING__LEVEL=DEBUG``.
"""

import os
from pathlib import Path
from typing import Any

ENV_PREFIX = "TEXTANNOTATOR_"


def parse_env_value(value: str) -> Any:
    """Parse environment variable value to appropriate Python type.

    Handles: bool, int, float, Path, string

    Parameters
    ----------
    value : str
        Raw environment variable value.

    Returns
    -------
    Any
        Parsed value with appropriate type.

    Examples
    --------
    >>> parse_env_value("true")
    True
    >>> parse_env_value("42")
    42
    >>> parse_env_value("/path/to/file")
    PosixPath('/path/to/file')
    """
    # handle boolean values
    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False

    # handle numeric values; try int first
    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    # handle path-like strings
    if value.startswith(("/", "./", "~/", "../")):
        return Path(value).expanduser()

    return value


def env_to_nested_dict(env_vars: dict[str, str], prefix: str) -> dict[str, Any]:
    """Convert flat environment variables to nested dictionary.

    Parameters
    ----------
    env_vars : dict[str, str]
        Environment variables to convert.
    prefix : str
        Prefix to strip from variable names.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary.

    Examples
    --------
    >>> env_vars = {"TEXTANNOTATOR_LOGGING__LEVEL": "DEBUG"}
    >>> env_to_nested_dict(env_vars, "TEXTANNOTATOR_")
    {'logging': {'level': 'DEBUG'}}
    """
    result: dict[str, Any] = {}

    for key, value in env_vars.items():
        if not key.startswith(prefix):
            continue

        parts = [part.lower() for part in key[len(prefix) :].split("__")]

        current = result
        for part in parts[:-1]:
            current = current.setdefault(part, {})
        current[parts[-1]] = parse_env_value(value)

    return result


def load_from_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load configuration values from environment variables.

    Parameters
    ----------
    prefix : str
        Environment variable prefix to filter on.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary from environment.
    """
    env_vars = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
    return env_to_nested_dict(env_vars, prefix)

"""Configuration serialization to YAML format."""

from pathlib import Path
from typing import Any

import yaml

from textannotator.config.config import AnnotatorConfig


def config_to_dict(config: AnnotatorConfig, include_defaults: bool = True) -> dict[str, Any]:
    """Convert AnnotatorConfig to a YAML-ready dictionary.

    Parameters
    ----------
    config : AnnotatorConfig
        Configuration to convert.
    include_defaults : bool
        Whether to include values equal to the defaults.

    Returns
    -------
    dict[str, Any]
        Dictionary with paths converted to strings.
    """
    config_dict: dict[str, Any] = config.model_dump(mode="json")
    if not include_defaults:
        default_dict: dict[str, Any] = AnnotatorConfig().model_dump(mode="json")
        config_dict = _remove_defaults(config_dict, default_dict)
    return config_dict


def _remove_defaults(
    config_dict: dict[str, Any], default_dict: dict[str, Any]
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in config_dict.items():
        if key not in default_dict:
            result[key] = value
        elif isinstance(value, dict) and isinstance(default_dict[key], dict):
            nested_result = _remove_defaults(value, default_dict[key])  # type: ignore[arg-type]
            if nested_result:
                result[key] = nested_result
        elif value != default_dict[key]:
            result[key] = value
    return result


def to_yaml(config: AnnotatorConfig, include_defaults: bool = True) -> str:
    """Serialize configuration to YAML string.

    Parameters
    ----------
    config : AnnotatorConfig
        Configuration to serialize.
    include_defaults : bool
        If False, only include non-default values.

    Returns
    -------
    str
        YAML representation of configuration.

    Examples
    --------
    >>> 'profile: default' in to_yaml(AnnotatorConfig())
    True
    """
    return yaml.safe_dump(
        config_to_dict(config, include_defaults),
        default_flow_style=False,
        sort_keys=False,
    )


def save_yaml(config: AnnotatorConfig, path: Path | str) -> None:
    """Write configuration to a YAML file.

    Parameters
    ----------
    config : AnnotatorConfig
        Configuration to save.
    path : Path | str
        Destination file.
    """
    Path(path).write_text(to_yaml(config), encoding="utf-8")

"""Configuration loading.

A configuration is built from the chosen profile with partial layers
applied over it, lowest precedence first:

1. a YAML file,
2. ``TEXTANNOTATOR_<SECTION>__<KEY>`` environment variables,
3. keyword overrides (``export__overwrite=True``).

Every layer has the shape of ``AnnotatorConfig.model_dump()``: a
``profile`` name plus the ``export`` and ``logging`` sections. A layer
replaces single keys inside a section and leaves the section's other keys
alone.
"""

from pathlib import Path
from typing import Any

import yaml

from textannotator.config.config import AnnotatorConfig
from textannotator.config.env import ENV_PREFIX, load_from_env
from textannotator.config.profiles import get_profile

SECTIONS = ("export", "logging")


def apply_layer(
    config: dict[str, Any], layer: dict[str, Any], source: str
) -> dict[str, Any]:
    """Apply a partial configuration layer.

    Parameters
    ----------
    config : dict[str, Any]
        Configuration built so far. Not modified.
    layer : dict[str, Any]
        Partial configuration to apply.
    source : str
        Where the layer came from, used in error messages.

    Returns
    -------
    dict[str, Any]
        New configuration dictionary.

    Raises
    ------
    ValueError
        If the layer gives a section as anything other than a mapping.

    Examples
    --------
    >>> apply_layer(
    ...     {"profile": "default", "logging": {"level": "INFO", "console": True}},
    ...     {"logging": {"level": "DEBUG"}},
    ...     "example",
    ... )
    {'profile': 'default', 'logging': {'level': 'DEBUG', 'console': True}}
    """
    merged = dict(config)
    for key, value in layer.items():
        if key not in SECTIONS:
            merged[key] = value
            continue
        if not isinstance(value, dict):
            raise ValueError(
                f"{source}: section '{key}' must be a mapping, "
                f"got {type(value).__name__}"
            )
        merged[key] = {**merged.get(key, {}), **value}
    return merged


def read_config_file(path: Path | str) -> dict[str, Any]:
    """Read a YAML configuration file as a layer.

    Parameters
    ----------
    path : Path | str
        YAML file.

    Returns
    -------
    dict[str, Any]
        File contents; empty for an empty file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    yaml.YAMLError
        If the file is not valid YAML.
    ValueError
        If the top level of the file is not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"{path}: expected a mapping at the top level, got {type(data).__name__}"
        )
    return data


def _overrides_layer(overrides: dict[str, Any]) -> dict[str, Any]:
    # "export__overwrite" -> {"export": {"overwrite": ...}}
    layer: dict[str, Any] = {}
    for key, value in overrides.items():
        section, _, field = key.partition("__")
        if field:
            layer.setdefault(section, {})[field] = value
        else:
            layer[key] = value
    return layer


def load_config(
    config_path: Path | str | None = None,
    profile: str = "default",
    use_env: bool = True,
    **overrides: Any,
) -> AnnotatorConfig:
    """Load the effective configuration.

    Parameters
    ----------
    config_path : Path | str | None
        YAML file to apply over the profile.
    profile : str
        Base profile (default, dev, test).
    use_env : bool
        Whether to apply ``TEXTANNOTATOR_*`` environment variables.
    **overrides : Any
        Final overrides, ``<section>__<key>=value``.

    Returns
    -------
    AnnotatorConfig
        Validated configuration.

    Raises
    ------
    FileNotFoundError
        If ``config_path`` does not exist.
    yaml.YAMLError
        If the file is not valid YAML.
    ValueError
        If the profile is unknown, a layer is malformed or a value fails
        validation.

    Examples
    --------
    >>> load_config(profile="dev", use_env=False).logging.level
    'DEBUG'
    >>> load_config(use_env=False, export__overwrite=True).export.overwrite
    True
    """
    layers: list[tuple[dict[str, Any], str]] = []
    if config_path is not None:
        layers.append((read_config_file(config_path), str(config_path)))
    if use_env:
        layers.append((load_from_env(ENV_PREFIX), "environment"))
    if overrides:
        layers.append((_overrides_layer(overrides), "overrides"))

    config = get_profile(profile).model_dump()
    for layer, source in layers:
        config = apply_layer(config, layer, source)
    return AnnotatorConfig(**config)

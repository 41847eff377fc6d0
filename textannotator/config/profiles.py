"""Configuration profiles for the textannotator package.

Pre-configured profiles for development and testing alongside the
defaults.
"""

from __future__ import annotations

from textannotator.config.config import AnnotatorConfig
from textannotator.config.export import ExportConfig
from textannotator.config.logging import LoggingConfig

# development profile: verbose logging, exports may be replaced
DEV_CONFIG = AnnotatorConfig(
    profile="dev",
    export=ExportConfig(overwrite=True),
    logging=LoggingConfig(level="DEBUG", console=True),
)
"""Development configuration profile.

Optimized for:
- Verbose logging (DEBUG level)
- Re-running exports into the same directory
"""

# test profile: quiet logging, no console output
TEST_CONFIG = AnnotatorConfig(
    profile="test",
    export=ExportConfig(overwrite=True),
    logging=LoggingConfig(level="WARNING", console=False),
)
"""Test configuration profile.

Optimized for:
- Minimal logging (WARNING level, no console handler)
- Re-running exports into temporary directories
"""

PROFILES: dict[str, AnnotatorConfig] = {
    "default": AnnotatorConfig(),
    "dev": DEV_CONFIG,
    "test": TEST_CONFIG,
}
"""Registry of all available configuration profiles.

Examples
--------
>>> from textannotator.config.profiles import PROFILES
>>> list(PROFILES.keys())
['default', 'dev', 'test']
>>> PROFILES["dev"].logging.level
'DEBUG'
"""


def get_profile(name: str) -> AnnotatorConfig:
    """Get configuration profile by name.

    Parameters
    ----------
    name : str
        Profile name. Must be one of: 'default', 'dev', 'test'.

    Returns
    -------
    AnnotatorConfig
        Configuration for the specified profile.

    Raises
    ------
    ValueError
        If profile name is not found in the registry.

    Examples
    --------
    >>> try:
    ...     get_profile("invalid")
    ... except ValueError as e:
    ...     print(str(e))
    Profile 'invalid' not found. Available profiles: default, dev, test
    """
    if name not in PROFILES:
        available = ", ".join(sorted(PROFILES.keys()))
        msg = f"Profile {name!r} not found. Available profiles: {available}"
        raise ValueError(msg)

    return PROFILES[name].model_copy(deep=True)


def list_profiles() -> list[str]:
    """Return list of available profile names.

    Returns
    -------
    list[str]
        List of available profile names, sorted alphabetically.
    """
    return sorted(PROFILES.keys())

"""Load and validate learning-hub configuration YAML.

This subpackage parses the project's ``hubs.yaml`` file, merges global defaults
with per-hub overrides, resolves content and output paths, and produces typed
dataclasses (:class:`HubSiteConfig`, :class:`HubConfig`, etc.) that the hub
builder consumes. The primary entry point is :func:`load_hub_config`.

Examples
--------
>>> from pathlib import Path
>>> from learning_hub.config import load_hub_config
>>> site = load_hub_config(Path("config/hubs.yaml"))  # doctest: +SKIP
>>> hub = site.get_hub("backend-learning")  # doctest: +SKIP
>>> hub.output  # doctest: +SKIP
PosixPath('backend-learning.html')
"""

from .loader import load_hub_config
from .models import (
    HubConfig,
    HubConfigError,
    HubSiteConfig,
    NavGroupConfig,
    ThemeConfig,
)

__all__ = [
    "HubConfig",
    "HubConfigError",
    "HubSiteConfig",
    "NavGroupConfig",
    "ThemeConfig",
    "load_hub_config",
]

"""Typed dataclasses describing learning-hub configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from learning_hub._constants import ListWrapping  # noqa: TC001 - used for runtime type metadata


class HubConfigError(ValueError):
    """Raised when the hub configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Colours and sidebar sizing applied to a generated hub."""

    sidebar_width: int = 300
    sidebar_gradient: str = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"
    accent: str = "#667eea"
    accent_dark: str = "#764ba2"


@dc.dataclass(slots=True)
class NavGroupConfig:
    """Named sidebar group covering ``modules[start:end]``."""

    name: str
    start: int
    end: int


@dc.dataclass(slots=True)
class HubConfig:
    """A fully resolved learning hub definition sourced from YAML config."""

    key: str
    title: str
    heading: str
    tagline: str
    content_dir: Path
    output: Path
    files: list[str]
    groups: list[NavGroupConfig]
    inline_code: bool
    search: bool
    keyboard_nav: bool
    list_wrapping: ListWrapping
    highlight_code: bool
    pygments_style: str
    theme: ThemeConfig


@dc.dataclass(slots=True)
class HubSiteConfig:
    """Collection of hub configs alongside the default hub key."""

    hubs: dict[str, HubConfig]
    default_hub: str | None = None

    def get_hub(self, hub_id: str | None) -> HubConfig:
        """Return the requested hub or fall back to the configured default."""
        if hub_id is None:
            return self._get_default_hub()
        try:
            return self.hubs[hub_id]
        except KeyError as exc:
            available = ", ".join(sorted(self.hubs))
            msg = f"Unknown hub '{hub_id}'. Known hubs: {available}"
            raise KeyError(msg) from exc

    def _get_default_hub(self) -> HubConfig:
        """Return the configured default hub or the first defined hub."""
        if self.default_hub and self.default_hub in self.hubs:
            return self.hubs[self.default_hub]
        if not self.hubs:  # pragma: no cover - configuration error
            msg = "No hubs configured."
            raise HubConfigError(msg)
        first_key = next(iter(self.hubs))
        return self.hubs[first_key]


__all__ = [
    "HubConfig",
    "HubConfigError",
    "HubSiteConfig",
    "NavGroupConfig",
    "ThemeConfig",
]

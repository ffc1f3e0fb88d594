"""Load hub configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from learning_hub._constants import ListWrapping  # noqa: TC001 - used for runtime type metadata

from .helpers import (
    _build_files,
    _build_groups,
    _build_theme_config,
    _merge_theme,
    _optional_str,
    _validate_list_wrapping,
    _validate_pygments_style,
)
from .models import HubConfig, HubConfigError, HubSiteConfig, ThemeConfig


def load_hub_config(path: Path) -> HubSiteConfig:
    """Load the YAML configuration describing every learning hub.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/hubs.yaml``).

    Returns
    -------
    HubSiteConfig
        Parsed hub definitions with defaults merged into each hub.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    HubConfigError
        If no hubs are defined or a hub entry is missing required fields
        or names an unknown list wrapping mode or Pygments style.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from learning_hub.config import load_hub_config
    >>> config = load_hub_config(Path("config/hubs.yaml"))  # doctest: +SKIP
    >>> sorted(config.hubs)  # doctest: +SKIP
    ['ai-learning', 'backend-learning']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}

    hub_defaults = _HubDefaults(
        theme=_build_theme_config(defaults.get("theme", {}) or {}),
        output_dir=Path(defaults.get("output_dir", ".")),
        content_root=Path(defaults.get("content_root", ".")),
        inline_code=bool(defaults.get("inline_code", False)),
        search=bool(defaults.get("search", False)),
        keyboard_nav=bool(defaults.get("keyboard_nav", True)),
        list_wrapping=defaults.get("list_wrapping", "document"),
        highlight_code=bool(defaults.get("highlight_code", False)),
        pygments_style=defaults.get("pygments_style", "monokai"),
    )

    hubs_raw = raw.get("hubs") or {}
    if not hubs_raw:
        msg = "No hubs defined in configuration."
        raise HubConfigError(msg)

    hubs: dict[str, HubConfig] = {}
    for key, payload in hubs_raw.items():
        match payload:
            case dict():
                hubs[key] = _build_hub_config(
                    key=key, payload=payload, defaults=hub_defaults
                )
            case _:
                msg = f"Hub '{key}' must be a mapping."
                raise HubConfigError(msg)

    return HubSiteConfig(hubs=hubs, default_hub=_optional_str(defaults.get("hub")))


@dc.dataclass(slots=True)
class _HubDefaults:
    """Internal container for hub default configuration values."""

    theme: ThemeConfig
    output_dir: Path
    content_root: Path
    inline_code: bool
    search: bool
    keyboard_nav: bool
    list_wrapping: ListWrapping
    highlight_code: bool
    pygments_style: str


def _build_hub_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    defaults: _HubDefaults,
) -> HubConfig:
    """Build a HubConfig for a single hub entry using defaults and overrides."""
    label = key.replace("-", " ").title()
    title = _optional_str(payload.get("title")) or label
    heading = _optional_str(payload.get("heading")) or title
    tagline = _optional_str(payload.get("tagline")) or ""
    content_dir = defaults.content_root / payload.get("content_dir", key)
    output = defaults.output_dir / payload.get("output", f"{key}.html")
    list_wrapping = _validate_list_wrapping(
        key, payload.get("list_wrapping", defaults.list_wrapping)
    )

    return HubConfig(
        key=key,
        title=title,
        heading=heading,
        tagline=tagline,
        content_dir=content_dir,
        output=output,
        files=_build_files(key, payload.get("files")),
        groups=_build_groups(key, payload.get("groups")),
        inline_code=bool(payload.get("inline_code", defaults.inline_code)),
        search=bool(payload.get("search", defaults.search)),
        keyboard_nav=bool(payload.get("keyboard_nav", defaults.keyboard_nav)),
        list_wrapping=list_wrapping,
        highlight_code=bool(payload.get("highlight_code", defaults.highlight_code)),
        pygments_style=_validate_pygments_style(
            key, payload.get("pygments_style", defaults.pygments_style)
        ),
        theme=_merge_theme(defaults.theme, payload.get("theme")),
    )


__all__ = ["load_hub_config"]

"""Utility helpers shared by the learning-hub configuration loader."""

from __future__ import annotations

import typing as typ

from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from learning_hub._constants import LIST_WRAPPING_MODES, ListWrapping

from .models import HubConfigError, NavGroupConfig, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _merge_theme(
    base: ThemeConfig, override: typ.Mapping[str, typ.Any] | None
) -> ThemeConfig:
    """Merge an override theme mapping into the base ThemeConfig."""
    if not override:
        return base
    return ThemeConfig(
        sidebar_width=int(override.get("sidebar_width", base.sidebar_width)),
        sidebar_gradient=override.get("sidebar_gradient", base.sidebar_gradient),
        accent=override.get("accent", base.accent),
        accent_dark=override.get("accent_dark", base.accent_dark),
    )


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    return _merge_theme(ThemeConfig(), payload)


def _build_files(key: str, value: object) -> list[str]:
    """Return the ordered markdown file list for hub ``key``."""
    match value:
        case list() if value:
            files = [str(item).strip() for item in value]
        case _:
            msg = f"Hub '{key}' must list at least one markdown file under 'files'."
            raise HubConfigError(msg)
    if any(not name for name in files):
        msg = f"Hub '{key}' contains an empty filename."
        raise HubConfigError(msg)
    return files


def _build_groups(key: str, value: object) -> list[NavGroupConfig]:
    """Parse ``{name, start, end}`` group entries for hub ``key``."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Hub '{key}' groups must be a list."
        raise HubConfigError(msg)
    groups: list[NavGroupConfig] = []
    for entry in value:
        match entry:
            case {"name": str() as name, "start": int() as start, "end": int() as end}:
                if start < 0 or end < start:
                    msg = f"Hub '{key}' group '{name}' has an invalid range {start}:{end}."
                    raise HubConfigError(msg)
                groups.append(NavGroupConfig(name=name, start=start, end=end))
            case _:
                msg = f"Hub '{key}' group entries need 'name', 'start' and 'end'."
                raise HubConfigError(msg)
    return groups


def _validate_list_wrapping(key: str, value: object) -> ListWrapping:
    """Return ``value`` when it names a supported list wrapping mode."""
    if value not in LIST_WRAPPING_MODES:
        modes = ", ".join(LIST_WRAPPING_MODES)
        msg = f"Hub '{key}' has unknown list_wrapping '{value}'; expected {modes}."
        raise HubConfigError(msg)
    return typ.cast("ListWrapping", value)


def _validate_pygments_style(key: str, value: object) -> str:
    """Return ``value`` when it names an installed Pygments style."""
    style = str(value).strip()
    try:
        get_style_by_name(style)
    except ClassNotFound as exc:
        msg = f"Hub '{key}' has unknown pygments_style '{style}'."
        raise HubConfigError(msg) from exc
    return style


__all__ = [
    "_build_files",
    "_build_groups",
    "_build_theme_config",
    "_merge_theme",
    "_optional_str",
    "_validate_list_wrapping",
    "_validate_pygments_style",
]

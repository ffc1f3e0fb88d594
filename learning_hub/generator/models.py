"""Shared dataclasses used by the learning-hub build pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from learning_hub.modules import ModuleRecord, NavGroup


@dc.dataclass(frozen=True, slots=True)
class HubDocument:
    """Fully rendered learning hub, ready to be written to disk."""

    modules: tuple[ModuleRecord, ...]
    nav_groups: tuple[NavGroup, ...]
    html: str


@dc.dataclass(frozen=True, slots=True)
class BuildReport:
    """Summary of a completed hub build used for console output.

    Attributes
    ----------
    output_path : Path
        Location of the written HTML file.
    module_count : int
        Number of modules rendered into the hub.
    group_counts : tuple[tuple[str, int], ...]
        ``(group name, module count)`` pairs for named sidebar groups; empty
        when the sidebar is ungrouped.
    """

    output_path: Path
    module_count: int
    group_counts: tuple[tuple[str, int], ...]


__all__ = ["BuildReport", "HubDocument", "ModuleRecord", "NavGroup"]

r"""Load markdown modules from disk and arrange them into sidebar groups.

Module order is the order of the configured file list: it fixes both the
``module-<index>`` ids and the position of each link in the sidebar. Files are
read synchronously, one after another; a missing file aborts the build with the
underlying ``OSError`` before anything is written.

Example
-------
>>> from learning_hub.modules import derive_title
>>> derive_title("01_Go_Fundamentals.md")
'01 Go Fundamentals'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from learning_hub._constants import MODULE_ID_TEMPLATE

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from learning_hub.config import NavGroupConfig
    from learning_hub.generator.renderer import FragmentRenderer

MARKDOWN_SUFFIX_PATTERN = re.compile(r"\.md$")


@dc.dataclass(frozen=True, slots=True)
class ModuleRecord:
    """One rendered markdown file and its navigation metadata.

    Attributes
    ----------
    id : str
        Element id of the content section, ``module-<index>``.
    index : int
        0-based position of the module within its hub.
    title : str
        Sidebar label derived from the filename.
    filename : str
        Markdown filename relative to the hub content directory.
    html : str
        Rendered HTML fragment for the module body.
    """

    id: str
    index: int
    title: str
    filename: str
    html: str


@dc.dataclass(frozen=True, slots=True)
class NavGroup:
    """Sidebar bucket holding a contiguous slice of modules.

    ``name`` is ``None`` for the single group of an ungrouped sidebar.
    """

    name: str | None
    modules: tuple[ModuleRecord, ...]


def derive_title(filename: str) -> str:
    """Strip a trailing ``.md`` and turn underscores into spaces."""
    return MARKDOWN_SUFFIX_PATTERN.sub("", filename).replace("_", " ")


def load_modules(
    content_dir: Path,
    files: cabc.Sequence[str],
    renderer: FragmentRenderer,
) -> tuple[ModuleRecord, ...]:
    """Read and render every listed markdown file in order.

    Parameters
    ----------
    content_dir : Path
        Directory the filenames are resolved against.
    files : Sequence[str]
        Ordered markdown filenames.
    renderer : FragmentRenderer
        Renderer applied to each file's content.

    Returns
    -------
    tuple[ModuleRecord, ...]
        One record per file, ids assigned from list position.

    Raises
    ------
    FileNotFoundError
        If a listed file does not exist. Other ``OSError`` subclasses and
        ``UnicodeDecodeError`` propagate unchanged as well.
    """
    records: list[ModuleRecord] = []
    for index, filename in enumerate(files):
        content = (content_dir / filename).read_text(encoding="utf-8")
        records.append(
            ModuleRecord(
                id=MODULE_ID_TEMPLATE.format(index=index),
                index=index,
                title=derive_title(filename),
                filename=filename,
                html=renderer.render(content),
            )
        )
    return tuple(records)


def build_nav_groups(
    modules: cabc.Sequence[ModuleRecord],
    groups: cabc.Sequence[NavGroupConfig],
) -> tuple[NavGroup, ...]:
    """Slice ``modules`` into the configured groups.

    Each group takes ``modules[start:end]``; ranges past the end of the list
    simply yield fewer modules. Without configured groups a single unnamed
    group holds every module.
    """
    if not groups:
        return (NavGroup(name=None, modules=tuple(modules)),)
    return tuple(
        NavGroup(name=group.name, modules=tuple(modules[group.start : group.end]))
        for group in groups
    )


__all__ = [
    "ModuleRecord",
    "NavGroup",
    "build_nav_groups",
    "derive_title",
    "load_modules",
]

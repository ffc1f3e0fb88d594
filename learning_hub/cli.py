"""Cyclopts CLI entrypoint for building learning-hub pages.

The ``learning-hub`` console script defined here renders one or every hub
described in ``config/hubs.yaml`` into a single static HTML page each, and
lists the configured hubs. Status lines go to standard output; a missing
markdown file stops the run with the underlying ``FileNotFoundError``.

Examples
--------
Build every configured hub:

>>> from learning_hub.cli import main
>>> main()  # doctest: +SKIP

Build one hub into a custom location:

>>> from learning_hub.cli import app
>>> app(
...     ["generate", "--hub", "backend-learning", "--output", "dist/backend.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_hub_config
from .generator import LearningHubBuilder

if typ.TYPE_CHECKING:
    from .generator import BuildReport

DEFAULT_CONFIG = Path("config/hubs.yaml")

app = App(name="learning-hub", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _report_lines(report: BuildReport) -> list[str]:
    """Return the console status lines for a finished hub build."""
    lines = [
        f"wrote {_format_path(report.output_path)}",
        f"converted {report.module_count} modules",
        f"open file://{report.output_path.resolve()} in your browser",
    ]
    if report.group_counts:
        lines.append("module structure:")
        lines.extend(f"  {name}: {count} modules" for name, count in report.group_counts)
    return lines


@app.command(help="Render learning-hub HTML pages from markdown modules.")
def generate(
    *,
    hub: typ.Annotated[
        str | None, Parameter(help="Hub identifier", env_var="INPUT_HUB")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to hub config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Generate learning-hub pages for the requested configuration.

    Parameters
    ----------
    hub : str or None, optional
        Specific hub key to render; when ``None`` (default) all hubs are
        rendered.
    config : Path, optional
        Path to the ``hubs.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output : Path or None, optional
        Override the output file for single-hub rendering.

    Raises
    ------
    ValueError
        If ``output`` is supplied while more than one hub is requested.
    FileNotFoundError
        If the configuration or any listed markdown file is missing.
    """
    hub_config = load_hub_config(config)

    if hub:
        target_hubs = [hub_config.get_hub(hub)]
    else:
        target_hubs = list(hub_config.hubs.values())

    if len(target_hubs) > 1 and output:
        msg = "Cannot override output when generating multiple hubs."
        raise ValueError(msg)

    for target in target_hubs:
        report = LearningHubBuilder(target, output=output).run()
        for line in _report_lines(report):
            print(line)


@app.command(name="list", help="List the hubs defined in the configuration.")
def list_hubs(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to hub config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print each configured hub key with its title and file count."""
    hub_config = load_hub_config(config)
    for key, target in hub_config.hubs.items():
        print(f"{key}: {target.title} ({len(target.files)} files)")


def main() -> None:
    """Invoke the Cyclopts application behind the `learning-hub` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

"""High-level orchestration for learning-hub page generation.

This module turns one :class:`~learning_hub.config.HubConfig` into a single
static HTML page. It reads the configured markdown files in order, renders each
through :class:`FragmentRenderer`, groups the resulting modules for the sidebar,
and renders the ``learning_hub.jinja`` template with inline CSS and scripts.

Example
-------
>>> from pathlib import Path
>>> from learning_hub.config import load_hub_config
>>> from learning_hub.generator import LearningHubBuilder
>>> config = load_hub_config(Path("config/hubs.yaml"))  # doctest: +SKIP
>>> report = LearningHubBuilder(config.get_hub("ai-learning")).run()  # doctest: +SKIP
>>> report.module_count  # doctest: +SKIP
16
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from learning_hub._constants import HUB_TEMPLATE_NAME
from learning_hub.generator.models import BuildReport, HubDocument
from learning_hub.generator.renderer import FragmentRenderer
from learning_hub.modules import build_nav_groups, load_modules

if typ.TYPE_CHECKING:
    from learning_hub.config import HubConfig


class LearningHubBuilder:
    """Render a hub's markdown modules into one self-contained HTML page."""

    def __init__(
        self,
        hub_config: HubConfig,
        *,
        templates_dir: Path | None = None,
        output: Path | None = None,
    ) -> None:
        """Initialize the builder with configuration and template context.

        Parameters
        ----------
        hub_config : HubConfig
            Hub configuration describing the file list, features, and theme.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output : Path, optional
            Override for the HTML output path; defaults to the hub config output.
        """
        self.hub = hub_config
        self.output_override = output
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.renderer = FragmentRenderer(
            inline_code=hub_config.inline_code,
            list_wrapping=hub_config.list_wrapping,
            highlight_code=hub_config.highlight_code,
            pygments_style=hub_config.pygments_style,
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(HUB_TEMPLATE_NAME)

    @property
    def output_path(self) -> Path:
        """Return the effective output path for the generated page."""
        return self.output_override or self.hub.output

    def build(self) -> HubDocument:
        """Read, render and assemble every module without touching the output.

        Raises
        ------
        FileNotFoundError
            If any listed markdown file is missing; the build stops at the
            first failure.
        """
        modules = load_modules(self.hub.content_dir, self.hub.files, self.renderer)
        nav_groups = build_nav_groups(modules, self.hub.groups)
        context = {
            "hub": self.hub,
            "theme": self.hub.theme,
            "modules": modules,
            "nav_groups": nav_groups,
            "pygments_css": self.renderer.stylesheet,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return HubDocument(modules=modules, nav_groups=nav_groups, html=html)

    def run(self) -> BuildReport:
        """Build the hub and write it to disk, replacing any existing file.

        Returns
        -------
        BuildReport
            Output path plus module and group counts for status output.

        Notes
        -----
        The output file is written in place, without a temporary file, only
        after every module rendered successfully.
        """
        document = self.build()
        output_path = self.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document.html, encoding="utf-8")
        group_counts = tuple(
            (group.name, len(group.modules))
            for group in document.nav_groups
            if group.name is not None
        )
        return BuildReport(
            output_path=output_path,
            module_count=len(document.modules),
            group_counts=group_counts,
        )


__all__ = ["LearningHubBuilder"]

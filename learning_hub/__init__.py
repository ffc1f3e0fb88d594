"""Build single-page learning hubs from batches of markdown notes.

This package exposes the CLI entry points used by ``uv run learning-hub`` to
render each configured hub into one self-contained HTML page with sidebar
navigation.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from learning_hub import main
>>> main()  # doctest: +SKIP
>>> from learning_hub import app
>>> isinstance(app.name[0], str)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

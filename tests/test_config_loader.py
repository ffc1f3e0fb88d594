"""Tests for loading ``hubs.yaml`` into typed configuration objects.

These cover default merging, per-hub overrides, validation failures raised as
``HubConfigError``, and the checked-in ``config/hubs.yaml`` describing the
AI-learning and backend-learning hubs.

Usage
-----
Run ``pytest tests/test_config_loader.py -v``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from learning_hub.config import (
    HubConfigError,
    NavGroupConfig,
    ThemeConfig,
    load_hub_config,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "hubs.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_defaults_and_overrides_merge(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
defaults:
  output_dir: public
  content_root: notes
  search: true
  theme:
    accent: "#111111"
hubs:
  go-basics:
    content_dir: go
    files: [01_Intro.md, 02_Types.md]
    inline_code: true
    theme:
      sidebar_width: 280
  plain:
    title: Plain Hub
    search: false
    files: [a.md]
""",
    )

    config = load_hub_config(path)

    go = config.get_hub("go-basics")
    assert go.title == "Go Basics"
    assert go.heading == "Go Basics"
    assert go.tagline == ""
    assert go.content_dir == Path("notes/go")
    assert go.output == Path("public/go-basics.html")
    assert go.files == ["01_Intro.md", "02_Types.md"]
    assert go.inline_code is True
    assert go.search is True
    assert go.keyboard_nav is True
    assert go.list_wrapping == "document"
    assert go.highlight_code is False
    assert go.groups == []
    assert go.theme == ThemeConfig(
        sidebar_width=280,
        sidebar_gradient=ThemeConfig().sidebar_gradient,
        accent="#111111",
        accent_dark=ThemeConfig().accent_dark,
    )

    plain = config.get_hub("plain")
    assert plain.title == "Plain Hub"
    assert plain.content_dir == Path("notes/plain")
    assert plain.search is False
    assert plain.inline_code is False


def test_groups_parsed(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
hubs:
  grouped:
    files: [a.md, b.md, c.md]
    groups:
      - {name: First, start: 0, end: 1}
      - {name: Rest, start: 1, end: 3}
""",
    )
    hub = load_hub_config(path).get_hub("grouped")
    assert hub.groups == [
        NavGroupConfig(name="First", start=0, end=1),
        NavGroupConfig(name="Rest", start=1, end=3),
    ]


def test_default_hub_falls_back_to_first(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
hubs:
  first: {files: [a.md]}
  second: {files: [b.md]}
""",
    )
    assert load_hub_config(path).get_hub(None).key == "first"


def test_configured_default_hub(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
defaults:
  hub: second
hubs:
  first: {files: [a.md]}
  second: {files: [b.md]}
""",
    )
    assert load_hub_config(path).get_hub(None).key == "second"


def test_unknown_hub_lists_known_keys(tmp_path: Path) -> None:
    path = _write(tmp_path, "hubs:\n  only: {files: [a.md]}")
    with pytest.raises(KeyError, match="Known hubs: only"):
        load_hub_config(path).get_hub("missing")


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_hub_config(tmp_path / "absent.yaml")


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, "- just\n- a list")
    with pytest.raises(TypeError):
        load_hub_config(path)


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("defaults: {}", "No hubs defined"),
        ("hubs:\n  empty: {title: Empty}", "at least one markdown file"),
        ("hubs:\n  bad: {files: []}", "at least one markdown file"),
        ("hubs:\n  bad: scalar", "must be a mapping"),
        (
            "hubs:\n  bad: {files: [a.md], list_wrapping: nested}",
            "unknown list_wrapping",
        ),
        (
            "hubs:\n  bad: {files: [a.md], groups: [{name: X, start: 2, end: 1}]}",
            "invalid range",
        ),
        (
            "hubs:\n  bad: {files: [a.md], groups: [{name: X}]}",
            "need 'name', 'start' and 'end'",
        ),
        ("hubs:\n  bad: {files: [a.md], groups: oops}", "groups must be a list"),
        (
            "hubs:\n  bad: {files: [a.md], pygments_style: solarised}",
            "unknown pygments_style",
        ),
        (
            "defaults: {pygments_style: solarised}\nhubs:\n  bad: {files: [a.md]}",
            "unknown pygments_style",
        ),
    ],
)
def test_invalid_config_raises(tmp_path: Path, body: str, message: str) -> None:
    path = _write(tmp_path, body)
    with pytest.raises(HubConfigError, match=message):
        load_hub_config(path)


def test_known_pygments_style_accepted(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "hubs:\n  styled:\n    files: [a.md]\n    highlight_code: true\n"
        "    pygments_style: friendly",
    )
    hub = load_hub_config(path).get_hub("styled")
    assert hub.highlight_code is True
    assert hub.pygments_style == "friendly"


def test_repository_config_describes_both_hubs() -> None:
    """The shipped config mirrors the AI-learning and backend-learning hubs."""
    config = load_hub_config(REPO_ROOT / "config" / "hubs.yaml")
    assert sorted(config.hubs) == ["ai-learning", "backend-learning"]

    ai = config.get_hub("ai-learning")
    assert len(ai.files) == 16
    assert ai.inline_code is False
    assert ai.search is False
    assert ai.keyboard_nav is True
    assert ai.groups == []

    backend = config.get_hub("backend-learning")
    assert len(backend.files) == 33
    assert backend.inline_code is True
    assert backend.search is True
    assert len(backend.groups) == 8
    assert backend.groups[-1].end == len(backend.files)
    covered = sum(group.end - group.start for group in backend.groups)
    assert covered == len(backend.files)

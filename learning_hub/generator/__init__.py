"""Utilities for rendering markdown fragments and assembling learning hubs."""

from .hub_builder import LearningHubBuilder
from .models import BuildReport, HubDocument
from .renderer import FragmentRenderer, escape_code, render_fragment

__all__ = [
    "BuildReport",
    "FragmentRenderer",
    "HubDocument",
    "LearningHubBuilder",
    "escape_code",
    "render_fragment",
]

"""Renderer exports."""

from issuelens.renderers.console import render_state

__all__ = ["render_state"]

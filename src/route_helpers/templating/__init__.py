"""Kida template integration for route helpers."""

from route_helpers.templating.integration import register_helpers, render_block, render_template

__all__ = ["register_helpers", "render_block", "render_template"]

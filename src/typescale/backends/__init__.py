"""Backends for typescale output (CSS, ...)."""

from .css_generator import CssMode, declarations, generate_css, save_css_file

__all__ = ["CssMode", "declarations", "generate_css", "save_css_file"]

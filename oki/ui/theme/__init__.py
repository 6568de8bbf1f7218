"""Theme system — light/dark palettes and stylesheet generation."""
from .colors import THEMES, theme_for
from .stylesheet import build_stylesheet

__all__ = ["THEMES", "theme_for", "build_stylesheet"]

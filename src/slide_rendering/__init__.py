from .pdf_renderer import RenderError, render_slides, wrap_text
from .theme import DEFAULT_THEME, Branding, Theme

__all__ = ["Branding", "DEFAULT_THEME", "RenderError", "Theme", "render_slides", "wrap_text"]

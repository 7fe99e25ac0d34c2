"""Data transfer objects shared across layers."""

from .render_dto import DEFAULT_RENDER_OPTIONS, RenderOptions

__all__ = ["DEFAULT_RENDER_OPTIONS", "RenderOptions"]

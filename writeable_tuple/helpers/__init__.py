"""
Helpers package.
"""

from .dto.render_dto import DEFAULT_RENDER_OPTIONS, RenderOptions
from .exceptions import InvalidArgumentError
from .logging_helper import describe_value

__all__ = [
    "DEFAULT_RENDER_OPTIONS",
    "InvalidArgumentError",
    "RenderOptions",
    "describe_value",
]

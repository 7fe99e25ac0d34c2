"""
DTOs for tuple rendering.

Rules:
- Dataclasses here are pure: no I/O, no config loading.
- Only import standard library modules.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    """
    Controls how tuples are turned into text.

    The defaults produce the canonical form ``(a, b, c)`` where absent
    (``None``) components render as the empty string.

    Attributes:
        open: Text emitted once before the first component of a chain
        close: Text emitted once after the last component of a chain
        separator: Text placed between adjacent components
        none_text: Text used for components whose value is None
    """

    open: str = "("
    close: str = ")"
    separator: str = ", "
    none_text: str = ""


DEFAULT_RENDER_OPTIONS = RenderOptions()

"""
writeable-tuple: mutable fixed-arity tuples.

Tuples of 1..7 components are WriteableTuple instances; longer tuples are
chains of ExtendedTuple links (7 components + rest). Use create() for up to 8
values and create_chain() for any length.
"""

import logging

from writeable_tuple.__version__ import __version__
from writeable_tuple.components.tuples import (
    ExtendedTuple,
    TupleLike,
    WriteableTuple,
    create,
    create_chain,
)
from writeable_tuple.helpers.dto.render_dto import RenderOptions
from writeable_tuple.helpers.exceptions import InvalidArgumentError
from writeable_tuple.services.config_svc import ConfigService

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigService",
    "ExtendedTuple",
    "InvalidArgumentError",
    "RenderOptions",
    "TupleLike",
    "WriteableTuple",
    "__version__",
    "create",
    "create_chain",
]

"""Version information for writeable-tuple."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the tuple API or rendered form
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Chains of any length
#         - create_chain() builds nested extended tuples for any value count
#         - Positional access and iteration walk through rest chains
#         - RenderOptions + ConfigService (YAML/env) for delimiters and none text
#         - Rest assignment re-validates the tuple contract and rejects cycles
# 0.1.0 - Initial release
#         - Arity 1..7 tuples and the 7 + rest extended tuple
#         - create() factory for 1..8 values

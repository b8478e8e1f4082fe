"""Version information for KodeX."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to component record format or CLI surface
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "1.0.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 1.0.0 - Python rewrite of the component bundler
#         - Three-step selection (types, groups, components) with rich prompts
#         - Separate and bundle output modes
#         - Layered YAML/JSON configuration, en/de message catalog

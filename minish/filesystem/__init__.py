"""
minish Filesystem Module

Path resolution for cd and executable lookup along PATH.
"""

from .path_resolver import PathResolver, ParsedPath, ResolvedCommand

__all__ = [
    'PathResolver',
    'ParsedPath',
    'ResolvedCommand',
]

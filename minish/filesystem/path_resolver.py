"""
Path Resolver Module

Path handling for the shell: normalizing paths, expanding ``~``,
resolving cd targets against the working directory and searching PATH
for executables.

Author: YSNRFD
Version: 1.0.0
"""

import os
from dataclasses import dataclass
from typing import Optional, List, Sequence, Tuple

from minish.core.state import ShellState


@dataclass
class ParsedPath:
    """A parsed path with its components."""
    is_absolute: bool
    components: List[str]

    def __str__(self) -> str:
        if self.is_absolute:
            return '/' + '/'.join(self.components)
        return '/'.join(self.components) if self.components else '.'


@dataclass(frozen=True)
class ResolvedCommand:
    """An executable found on the search path."""
    directory: str
    path: str


class PathResolver:
    """
    Resolves and manipulates paths.

    Handles:
    - Absolute and relative paths
    - . and .. components
    - Home directory shorthand (~, ~/rest)
    - Executable lookup along PATH
    """

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into components.

        Args:
            path: Path string to parse

        Returns:
            ParsedPath with components
        """
        is_absolute = path.startswith('/')
        components = [c for c in path.split('/') if c and c != '.']
        return ParsedPath(is_absolute=is_absolute, components=components)

    @staticmethod
    def normalize(path: str) -> str:
        """
        Normalize a path by resolving . and ..

        A .. at the root stays at the root.

        Args:
            path: Path to normalize

        Returns:
            Normalized path string
        """
        parsed = PathResolver.parse(path)

        result: List[str] = []

        for component in parsed.components:
            if component == '..':
                if result and result[-1] != '..':
                    result.pop()
                elif not parsed.is_absolute:
                    result.append(component)
            else:
                result.append(component)

        return str(ParsedPath(is_absolute=parsed.is_absolute, components=result))

    @staticmethod
    def resolve(path: str, cwd: str = '/') -> str:
        """
        Resolve a path relative to a current working directory.

        Args:
            path: Path to resolve
            cwd: Current working directory

        Returns:
            Absolute resolved path
        """
        if PathResolver.is_absolute(path):
            return PathResolver.normalize(path)

        combined = cwd.rstrip('/') + '/' + path
        return PathResolver.normalize(combined)

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Check if a path is absolute."""
        return path.startswith('/')

    @staticmethod
    def expand_home(path: str, home: str) -> str:
        """
        Replace a leading ``~`` with the home directory.

        Only ``~`` on its own and ``~/...`` are expanded; ``~user`` is left
        alone.

        Args:
            path: Path as typed
            home: Value of HOME

        Returns:
            The expanded path
        """
        if path == '~':
            return home
        if path.startswith('~/'):
            return home.rstrip('/') + '/' + path[2:]
        return path

    @staticmethod
    def resolve_cd_target(path: str, state: ShellState) -> Tuple[str, str]:
        """
        Work out where cd should go.

        Args:
            path: Argument given to cd
            state: Current shell state

        Returns:
            (path after ~ expansion, absolute normalized path)
        """
        expanded = PathResolver.expand_home(path, state.home)
        return expanded, PathResolver.resolve(expanded, state.cwd)

    @staticmethod
    def is_executable(path: str) -> bool:
        """Check that path is a regular file the user may execute."""
        return os.path.isfile(path) and os.access(path, os.X_OK)

    @staticmethod
    def find_executable(
        command: str,
        directories: Sequence[str]
    ) -> Optional[ResolvedCommand]:
        """
        Search directories in order for an executable named command.

        Args:
            command: Command name
            directories: Search path, in priority order

        Returns:
            The first match, or None if there is none
        """
        if not command:
            return None

        for directory in directories:
            candidate = os.path.join(directory, command)
            if PathResolver.is_executable(candidate):
                return ResolvedCommand(directory=directory, path=candidate)

        return None

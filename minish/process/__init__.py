"""
minish Process Module

Launching external commands:
- Spawn requests describing executable, arguments and stream wiring
- Spawner interface and the subprocess-backed default
- Executor tying PATH lookup to spawning
"""

from .executor import (
    ExternalExecutor,
    SpawnRequest,
    Spawner,
    StreamMode,
    StreamTarget,
    SubprocessSpawner,
)

__all__ = [
    'ExternalExecutor',
    'SpawnRequest',
    'Spawner',
    'StreamMode',
    'StreamTarget',
    'SubprocessSpawner',
]

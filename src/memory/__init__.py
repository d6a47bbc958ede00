"""Memory documents and comparison of their revisions."""

from memory.memory_comparison import MemoryComparer, MemoryContentDiff
from memory.memory_snapshot import MemorySnapshot

__all__ = [
    'MemorySnapshot',
    'MemoryComparer',
    'MemoryContentDiff',
]

from .heap import (
    MIN,
    MAX,
    Heap,
    HeapError,
    InvalidMode,
    merge
)

__version__ = "1.0.0"


__all__ = [
    "__version__",
    "MIN",
    "MAX",
    "Heap",
    "HeapError",
    "InvalidMode",
    "merge"
]

#!/usr/bin/env python3

from .graph import DirectedGraph
from .johnson import count_circuits, find_circuits, iter_circuits, NO_MAX_LIMIT, NO_MIN_LIMIT
from .type_defs import IllegalStateError

__version__ = "0.1.0"

__all__ = [
    "count_circuits",
    "DirectedGraph",
    "find_circuits",
    "IllegalStateError",
    "iter_circuits",
    "NO_MAX_LIMIT",
    "NO_MIN_LIMIT",
]

from .heap import MinBinaryHeap
from .storage import DynamicArray

__all__ = [
    "MinBinaryHeap",
    "DynamicArray",
]

from maxheap.config import HeapConfig
from maxheap.heap import Heap, ScopedMutableTop

__all__ = ["Heap", "HeapConfig", "ScopedMutableTop"]

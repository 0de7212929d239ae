"""
Binary min/max heaps.

.. code-block::

    from binheap import Heap, HeapType

    heap = Heap(HeapType.MIN, [3, 1, 2])
    heap.remove()  # 1

"""

from .heap import Heap, HeapType

#
__version__ = "0.1.0"
__all__ = ["Heap", "HeapType"]

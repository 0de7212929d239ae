from enum import Enum
import logging
from typing import Any, Callable, Iterable, List, Optional, Union

from binheap.validation import check_option


LOGGER = logging.getLogger(__name__)


class HeapType(Enum):
    MIN = "min"
    MAX = "max"


class Heap:
    """
    Array-backed binary heap. The root (index 0) is the minimum of a :attr:`HeapType.MIN` heap and the maximum of a :attr:`HeapType.MAX` heap.

    .. rubric:: Example

    .. code-block::

        heap = Heap(HeapType.MAX)
        for x in [3, 6, 2]:
            heap.insert(x)
        heap.remove()  # 6
        heap.peek()  # 3

    Elements only need to support ``<``, ``>``, ``<=`` and ``>=``. Partial orders are accepted: incomparable pairs are never exchanged.

    By default, a node whose only child is out of order is exchanged with it when removing. Pass ``sift_single_child=False`` to stop sift-down at any node without a right child instead, matching older releases exactly (a min heap filled with ``[1, 2, 3]`` then drains as ``[1, 3, 2]``).

    ``None`` is the empty-heap result of :meth:`peek` and :meth:`remove`, so a stored ``None`` cannot be told apart from an empty heap by those calls alone. Check :meth:`size` in that case.
    """

    def __init__(
        self,
        heap_type: Union[HeapType, str] = HeapType.MIN,
        items: Iterable = (),
        key: Optional[Callable[[Any], Any]] = None,
        sift_single_child: bool = True,
    ):
        """
        :param heap_type: The fixed orientation of the heap, a :class:`HeapType` or one of its values (``'min'``, ``'max'``).
        :param items: Inserted one at a time, in iteration order.
        :param key: If provided, elements are compared using ``key(element)``.
        :param sift_single_child: When removing, also exchange a node with its left child when that is its only child. If ``False``, sift-down stops at any node without a right child, which can leave that pair out of order.
        """
        if not isinstance(heap_type, HeapType):
            heap_type = HeapType(
                check_option("heap_type", heap_type, [_t.value for _t in HeapType])
            )
        self._heap_type = heap_type
        self._key = key
        self._sift_single_child = sift_single_child
        self._storage: List = []

        for item in items:
            self.insert(item)

        LOGGER.debug(f"Created {self!r}.")

    def heap_type(self) -> HeapType:
        return self._heap_type

    def size(self) -> int:
        return len(self._storage)

    def __len__(self):
        return len(self._storage)

    def __repr__(self):
        return f"{type(self).__name__}({self._heap_type.value}, size={len(self)})"

    def peek(self):
        """
        Returns the root element without removing it, or ``None`` if the heap is empty (or if the root is ``None``).
        """
        if not self._storage:
            LOGGER.debug("Peek on an empty heap.")
            return None
        return self._storage[0]

    def insert(self, item):
        """
        Adds ``item`` to the heap. If comparing ``item`` raises (e.g., a ``TypeError`` for unorderable types), the error propagates and the heap is left unchanged.
        """
        self._storage.append(item)
        try:
            self._sift_up(len(self._storage) - 1)
        except Exception:
            self._storage.pop()
            raise

    def remove(self):
        """
        Removes and returns the root element, or returns ``None`` if the heap is empty (or if the root is ``None``).
        """
        if not self._storage:
            LOGGER.debug("Remove on an empty heap.")
            return None

        self._swap(0, len(self._storage) - 1)
        out = self._storage.pop()
        self._sift_down(0)
        return out

    def _swap(self, idx1, idx2):
        self._storage[idx1], self._storage[idx2] = (
            self._storage[idx2],
            self._storage[idx1],
        )

    def _value(self, idx):
        item = self._storage[idx]
        return item if self._key is None else self._key(item)

    def _precedes(self, first, second) -> bool:
        """
        Strict order of the heap: ``first`` must sit above ``second``.
        """
        if self._heap_type is HeapType.MIN:
            return first < second
        return first > second

    def _precedes_or_ties(self, first, second) -> bool:
        if self._heap_type is HeapType.MIN:
            return first <= second
        return first >= second

    def _sift_up(self, idx):
        # All comparisons happen before the first swap, so a raising comparison leaves the storage untouched.
        value = self._value(idx)
        swaps = []
        while idx > 0:
            parent_idx = (idx - 1) // 2
            # Equal elements are never exchanged.
            if not self._precedes(value, self._value(parent_idx)):
                break
            swaps.append((idx, parent_idx))
            idx = parent_idx

        for child_idx, parent_idx in swaps:
            self._swap(child_idx, parent_idx)

    def _sift_down(self, idx):
        while (child_idx := self._sift_down_child(idx)) is not None:
            self._swap(idx, child_idx)
            idx = child_idx

    def _sift_down_child(self, parent_idx) -> Optional[int]:
        """
        Returns the index of the child to exchange with the parent, or ``None`` if sift-down is done.
        The left child wins ties between the two children.
        """
        left_idx = 2 * parent_idx + 1
        right_idx = left_idx + 1
        length = len(self._storage)

        if left_idx >= length:
            return None

        parent = self._value(parent_idx)
        left = self._value(left_idx)

        if right_idx >= length:
            if self._sift_single_child and self._precedes(left, parent):
                return left_idx
            return None

        right = self._value(right_idx)
        if self._precedes(left, parent) and self._precedes_or_ties(left, right):
            return left_idx
        if self._precedes(right, parent) and self._precedes_or_ties(right, left):
            return right_idx
        return None

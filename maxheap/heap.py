#!/usr/bin/python3


# An array backed max heap. The root can be mutated in place through a
# ScopedMutableTop, which repairs the heap once when it is released.

from maxheap.config import HeapConfig
from maxheap.utils import Logger, check


class ScopedMutableTop:
    """Exclusive handle on the root of a Heap.

    Reading the root never changes anything. Any write access, either
    assigning ``value`` or asking for ``get_mut()``, marks the handle dirty
    without comparing old and new values. Releasing a dirty handle sifts the
    root down exactly once; releasing a clean one does nothing.

    The handle must be released, with ``close()`` or by leaving a ``with``
    block. A dirty handle that is never released leaves the heap possibly
    violating the heap property, and its heap rejects every other access
    until then.

        top = heap.peek_mut()
        if top is not None:
            with top:
                top.value = 0
    """

    def __init__(self, heap):
        self.heap = heap
        self.needs_sifting = False
        self.released = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()

    def __check_open(self):
        check(not self.released, "ScopedMutableTop is used after release")

    @property
    def value(self):
        self.__check_open()
        return self.heap.items[0]

    @value.setter
    def value(self, new_value):
        self.__check_open()
        self.needs_sifting = True
        self.heap.items[0] = new_value

    def get(self):
        return self.value

    def get_mut(self):
        """Returns the root for in place mutation, the handle becomes dirty"""
        self.__check_open()
        self.needs_sifting = True
        return self.heap.items[0]

    def close(self):
        if self.released:
            return
        self.released = True
        self.heap._release_top(self)

    def __repr__(self):
        state = "released" if self.released else "open"
        return "ScopedMutableTop({}, dirty={})".format(state, self.needs_sifting)


class Heap:
    def __init__(self, config=None):
        self.items = []
        self.config = config or HeapConfig()
        self.__top = None

    def __swap(self, index1, index2):
        self.items[index1], self.items[index2] = (
            self.items[index2],
            self.items[index1],
        )

    def __check_not_borrowed(self):
        check(self.__top is None, "heap is borrowed by an open ScopedMutableTop")

    def __verify(self):
        if self.config.CHECK_INTEGRITY:
            check(self.check_integrity(), "heap property violated")

    def __sift_up(self, index):
        # greatest value swims to top
        while index > 0:
            parent = (index - 1) // 2
            if not self.items[index] > self.items[parent]:
                return
            self.__swap(parent, index)
            index = parent

    def __sift_down(self, index):
        """Sinks the element at index, returns where it ends up.
        Equal children prefer the left one.
        """
        size = len(self.items)
        while True:
            left = 2 * index + 1
            right = left + 1
            largest = index
            if left < size and self.items[left] > self.items[largest]:
                largest = left
            if right < size and self.items[right] > self.items[largest]:
                largest = right
            if largest == index:
                return index
            self.__swap(index, largest)
            index = largest

    def push(self, value):
        self.__check_not_borrowed()
        self.items.append(value)
        self.__sift_up(len(self.items) - 1)
        self.__verify()

    def peek(self):
        self.__check_not_borrowed()
        if not self.items:
            return None
        return self.items[0]

    def peek_mut(self):
        self.__check_not_borrowed()
        if not self.items:
            return None
        self.__top = ScopedMutableTop(self)
        return self.__top

    def _release_top(self, top):
        check(top is self.__top, "ScopedMutableTop does not belong to this heap")
        self.__top = None
        if top.needs_sifting:
            Logger.debug("sifting down mutated root %r", self.items[0])
            self.__sift_down(0)
            self.__verify()

    def pop(self):
        self.__check_not_borrowed()
        if not self.items:
            return None
        self.__swap(0, len(self.items) - 1)
        largest = self.items.pop()
        self.__sift_down(0)
        self.__verify()
        return largest

    def delete(self, value):
        """Removes the first element equal to value, scanning in storage order.

        Storage order is not insertion order once the heap has been repaired,
        so among several equal elements the one removed is unspecified beyond
        being the first in the internal array.
        """
        self.__check_not_borrowed()
        index = next(
            (i for i, item in enumerate(self.items) if value == item), None
        )
        if index is None:
            Logger.debug("delete: %r not found", value)
            return None
        self.__swap(index, len(self.items) - 1)
        deleted = self.items.pop()
        # the element moved into index may come from another subtree
        if index < len(self.items) and self.__sift_down(index) == index:
            self.__sift_up(index)
        self.__verify()
        return deleted

    def clear(self):
        self.__check_not_borrowed()
        self.items.clear()

    def heap(self):
        """Iterates the internal array, which is heap order and not sorted"""
        self.__check_not_borrowed()
        return iter(self.items)

    def __iter__(self):
        return self.heap()

    def __len__(self):
        return len(self.items)

    def is_empty(self):
        return len(self.items) == 0

    def __str__(self):
        return str(self.items)

    def __repr__(self):
        return "Heap({})".format(self.items)

    # self check, used for testing and CHECK_INTEGRITY
    def check_integrity(self):
        for i in range(1, len(self.items)):
            if self.items[i] > self.items[(i - 1) // 2]:
                return False
        return True

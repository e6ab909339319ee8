import random
import unittest

from maxheap.heap import Heap


def build_heap(values):
    h = Heap()
    for v in values:
        h.push(v)
    return h


class Task:
    def __init__(self, priority):
        self.priority = priority

    def __gt__(self, other):
        return self.priority > other.priority


class TestScopedMutableTop(unittest.TestCase):
    def test_peek_mut(self):
        h = build_heap([1, 5, 2])
        with h.peek_mut() as top:
            top.value = 0
        self.assertEqual(h.peek(), 2)

    def test_peek_mut_with_close(self):
        h = build_heap([1, 5, 2])
        top = h.peek_mut()
        top.value = 0
        top.close()
        self.assertEqual(h.peek(), 2)
        self.assertTrue(h.check_integrity())

    def test_read_only_is_noop(self):
        h = build_heap([1, 2, 5, 4, 3])
        # break the heap property behind the heap's back: a clean release must not repair it
        h.items[0] = 0
        before = list(h.items)
        with h.peek_mut() as top:
            self.assertEqual(top.value, 0)
            self.assertEqual(top.get(), 0)
            self.assertFalse(top.needs_sifting)
        self.assertEqual(h.items, before)

    def test_write_marks_dirty_without_comparing(self):
        h = build_heap([3, 1])
        h.items = [1, 3]
        with h.peek_mut() as top:
            top.value = 1
            self.assertTrue(top.needs_sifting)
        self.assertEqual(h.items, [3, 1])

    def test_get_mut_in_place(self):
        h = Heap()
        for p in [4, 9, 7, 1]:
            h.push(Task(p))
        with h.peek_mut() as top:
            task = top.get_mut()
            self.assertEqual(task.priority, 9)
            task.priority = 0
        self.assertEqual(h.peek().priority, 7)
        self.assertTrue(h.check_integrity())

    def test_raising_value(self):
        h = build_heap([1, 5, 2])
        with h.peek_mut() as top:
            top.value = 10
        self.assertEqual(list(h), [10, 1, 2])

    def test_mutate_law(self):
        rng = random.Random(3)
        for _ in range(50):
            values = [rng.randrange(100) for _ in range(rng.randrange(1, 30))]
            h = build_heap(values)
            with h.peek_mut() as top:
                values.remove(top.value)
                top.value = top.value - rng.randrange(1, 100)
                values.append(top.value)
            self.assertEqual(h.peek(), max(values))
            self.assertTrue(h.check_integrity())

    def test_repairs_on_exception(self):
        h = build_heap([1, 5, 2])
        with self.assertRaises(ValueError):
            with h.peek_mut() as top:
                top.value = 0
                raise ValueError()
        self.assertEqual(h.peek(), 2)

    def test_use_after_release(self):
        h = build_heap([1])
        top = h.peek_mut()
        top.close()
        with self.assertRaises(AssertionError):
            top.value
        with self.assertRaises(AssertionError):
            top.value = 2
        with self.assertRaises(AssertionError):
            top.get_mut()

    def test_close_twice(self):
        h = build_heap([1, 5, 2])
        top = h.peek_mut()
        top.value = 0
        top.close()
        h.push(9)
        top.close()
        self.assertEqual(list(h), [9, 2, 0, 1])

    def test_heap_is_exclusive_while_open(self):
        h = build_heap([1, 5, 2])
        top = h.peek_mut()
        for op in [
            lambda: h.push(1),
            h.pop,
            h.peek,
            h.peek_mut,
            h.clear,
            lambda: h.delete(1),
            lambda: list(h),
        ]:
            with self.assertRaises(AssertionError):
                op()
        self.assertEqual(len(h), 3)
        self.assertFalse(h.is_empty())
        top.close()
        self.assertEqual(h.peek(), 5)

    def test_repr(self):
        h = build_heap([1])
        top = h.peek_mut()
        self.assertEqual(repr(top), "ScopedMutableTop(open, dirty=False)")
        top.get_mut()
        top.close()
        self.assertEqual(repr(top), "ScopedMutableTop(released, dirty=True)")


if __name__ == "__main__":
    unittest.main()

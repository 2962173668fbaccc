"""
Unit tests for SortedList.

Properties checked:
- [0, size) stays non-descending after every insert / delete_at
- 2 <= capacity and size <= capacity at all times
- growth doubles, shrinking happens once size*3 < capacity
"""

import random
import unittest

from dayschedule.errors import CapacityExhaustedError, IndexOutOfRangeError, InvalidArgumentError
from dayschedule.sorted_list import CapacityPolicy, DoublingPolicy, SortedList


def _items(lst: SortedList) -> list:
    return list(lst)


class TestSortedList(unittest.TestCase):
    def assertInvariants(self, lst: SortedList) -> None:
        values = _items(lst)
        self.assertEqual(values, sorted(values))
        self.assertLessEqual(lst.size, lst.capacity)
        self.assertGreaterEqual(lst.capacity, 2)

    def test_defaults(self) -> None:
        lst = SortedList()
        self.assertEqual(lst.size, 0)
        self.assertEqual(lst.capacity, 2)
        self.assertEqual(len(lst), 0)

    def test_initial_capacity_below_two_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            SortedList(1)

    def test_insert_none_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            SortedList().insert(None)

    def test_insert_keeps_order_and_grows(self) -> None:
        lst = SortedList()
        for v in [5, 1, 3]:
            lst.insert(v)
        self.assertEqual(_items(lst), [1, 3, 5])
        self.assertEqual(lst.capacity, 4)

    def test_random_insert_delete_keeps_invariants(self) -> None:
        rng = random.Random(42)
        lst = SortedList()
        for _ in range(500):
            if lst.size and rng.random() < 0.4:
                lst.delete_at(rng.randrange(lst.size))
            else:
                lst.insert(rng.randint(-50, 50))
            self.assertInvariants(lst)

    def test_growth_is_logarithmic(self) -> None:
        lst = SortedList()
        grows = 0
        last = lst.capacity
        for v in range(1000):
            lst.insert(v)
            if lst.capacity != last:
                grows += 1
                last = lst.capacity
        # 2 -> 1024 takes 9 doublings
        self.assertEqual(grows, 9)
        self.assertEqual(lst.capacity, 1024)

    def test_grow_then_shrink_scenario(self) -> None:
        lst = SortedList(2)
        for v in [10, 20, 30]:
            lst.insert(v)
        self.assertEqual(lst.capacity, 4)

        lst.delete_at(0)
        self.assertEqual((lst.size, lst.capacity), (2, 4))
        lst.delete_at(0)
        # 1*3 < 4 -> halved
        self.assertEqual((lst.size, lst.capacity), (1, 2))
        self.assertEqual(lst.get(0), 30)

    def test_delete_clears_vacated_slot(self) -> None:
        lst = SortedList(8)
        for v in [1, 2, 3, 4]:
            lst.insert(v)
        removed = lst.delete_at(1)
        self.assertEqual(removed, 2)
        self.assertEqual(_items(lst), [1, 3, 4])
        self.assertIsNone(lst._data[lst.size])

    def test_index_errors(self) -> None:
        lst = SortedList()
        lst.insert(1)
        with self.assertRaises(IndexOutOfRangeError):
            lst.get(1)
        with self.assertRaises(IndexOutOfRangeError):
            lst.get(-1)
        with self.assertRaises(IndexError):
            lst.delete_at(3)
        with self.assertRaises(IndexOutOfRangeError):
            lst.replace_at(1, 5)

    def test_replace_at_respects_neighbours(self) -> None:
        lst = SortedList()
        for v in [1, 5, 9]:
            lst.insert(v)
        self.assertTrue(lst.replace_at(1, 7))
        self.assertFalse(lst.replace_at(1, 10))
        self.assertEqual(_items(lst), [1, 7, 9])

    def test_replace_at_boundaries_unconstrained_on_missing_side(self) -> None:
        lst = SortedList()
        for v in [1, 5, 9]:
            lst.insert(v)
        self.assertTrue(lst.replace_at(0, -100))
        self.assertTrue(lst.replace_at(2, 1000))
        self.assertFalse(lst.replace_at(0, 6))
        self.assertEqual(_items(lst), [-100, 5, 1000])

    def test_replace_at_none_rejected(self) -> None:
        lst = SortedList()
        lst.insert(1)
        with self.assertRaises(InvalidArgumentError):
            lst.replace_at(0, None)

    def test_insert_at(self) -> None:
        lst = SortedList()
        lst.insert(1)
        lst.insert(5)
        self.assertTrue(lst.insert_at(1, 3))
        self.assertEqual(_items(lst), [1, 3, 5])
        self.assertTrue(lst.insert_at(3, 10))
        self.assertEqual(_items(lst), [1, 3, 5, 10])
        self.assertEqual(lst.capacity, 4)

    def test_insert_at_wrong_position_is_noop(self) -> None:
        lst = SortedList()
        lst.insert(1)
        lst.insert(5)
        self.assertFalse(lst.insert_at(0, 10))
        self.assertEqual(_items(lst), [1, 5])
        with self.assertRaises(IndexOutOfRangeError):
            lst.insert_at(5, 10)

    def test_equal_keys_keep_insertion_order(self) -> None:
        lst = SortedList(key=lambda pair: pair[0])
        lst.insert((2, "x"))
        lst.insert((1, "a"))
        lst.insert((1, "b"))
        self.assertEqual(_items(lst), [(1, "a"), (1, "b"), (2, "x")])

    def test_capacity_upper_bound(self) -> None:
        lst = SortedList(policy=DoublingPolicy(max_capacity=4))
        for v in [1, 2, 3]:
            lst.insert(v)
        self.assertEqual(lst.capacity, 4)
        self.assertFalse(lst.grow_capacity())
        with self.assertRaises(CapacityExhaustedError):
            lst.insert(4)
        self.assertEqual(_items(lst), [1, 2, 3])

    def test_insert_at_capacity_upper_bound(self) -> None:
        lst = SortedList(policy=DoublingPolicy(max_capacity=4))
        for v in [1, 2, 3]:
            lst.insert(v)
        with self.assertRaises(CapacityExhaustedError):
            lst.insert_at(lst.size, 4)
        self.assertEqual(_items(lst), [1, 2, 3])
        self.assertEqual((lst.size, lst.capacity), (3, 4))

    def test_capacity_policy_is_abstract(self) -> None:
        with self.assertRaises(TypeError):
            CapacityPolicy()  # type: ignore[abstract]

    def test_shrink_capacity_limits(self) -> None:
        lst = SortedList()
        self.assertFalse(lst.shrink_capacity())

        lst = SortedList(8)
        for v in range(5):
            lst.insert(v)
        self.assertTrue(lst.shrink_capacity())
        self.assertEqual(lst.capacity, 5)
        # full now
        self.assertFalse(lst.shrink_capacity())
        self.assertInvariants(lst)

    def test_grow_capacity_doubles(self) -> None:
        lst = SortedList(3)
        self.assertTrue(lst.grow_capacity())
        self.assertEqual(lst.capacity, 6)


if __name__ == "__main__":
    unittest.main()

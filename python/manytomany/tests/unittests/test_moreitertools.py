import unittest

from manytomany.auxiliary.moreitertools import (dedup_adjacent, find_all,
                                                sorted_distinct,
                                                unique_everseen)


class TestMoreItertools(unittest.TestCase):
    def test_dedup_adjacent(self):
        self.assertEqual(list(dedup_adjacent([1, 1, 2, 1, 3, 3])), [1, 2, 1, 3])
        self.assertEqual(list(dedup_adjacent([])), [])

    def test_sorted_distinct(self):
        self.assertEqual(sorted_distinct([3, 1, 2, 3, 1]), [1, 2, 3])

    def test_unique_everseen(self):
        self.assertEqual(list(unique_everseen([3, 1, 3, 2, 1])), [3, 1, 2])

    def test_unique_everseen_unhashable(self):
        items = [[1], {"a": 1}, [1], 2, {"a": 1}, 2]
        self.assertEqual(list(unique_everseen(items)), [[1], {"a": 1}, 2])

    def test_find_all(self):
        found = list(find_all("abcab", lambda _, char: char == "b"))
        self.assertEqual(found, [(1, "b"), (4, "b")])
        limited = list(find_all("abcab", lambda _, char: char == "b", 3))
        self.assertEqual(limited, [(1, "b")])


if __name__ == "__main__":
    unittest.main()

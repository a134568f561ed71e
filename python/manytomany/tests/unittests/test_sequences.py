import unittest

from manytomany.datastructures.sequences import SmallList


class TestSmallList(unittest.TestCase):
    def test_init(self):
        small: SmallList[int] = SmallList([1, 2, 3], capacity=4)
        self.assertEqual(list(small), [1, 2, 3])
        self.assertEqual(len(small), 3)
        self.assertEqual(small.capacity, 4)
        self.assertFalse(small.spilled)

    def test_init_over_capacity(self):
        small: SmallList[int] = SmallList(range(5), capacity=2)
        self.assertTrue(small.spilled)
        self.assertEqual(list(small), [0, 1, 2, 3, 4])

    def test_bad_capacity(self):
        with self.assertRaises(TypeError):
            SmallList(capacity="3")
        with self.assertRaises(ValueError):
            SmallList(capacity=-1)

    def test_append_spills(self):
        small: SmallList[int] = SmallList(capacity=2)
        small.append(1)
        small.append(2)
        self.assertFalse(small.spilled)
        small.append(3)
        self.assertTrue(small.spilled)
        self.assertEqual(list(small), [1, 2, 3])

    def test_insert(self):
        small: SmallList[int] = SmallList([1, 3], capacity=4)
        small.insert(1, 2)
        small.insert(0, 0)
        self.assertEqual(list(small), [0, 1, 2, 3])
        small.insert(-1, 9)
        self.assertEqual(list(small), [0, 1, 2, 9, 3])
        self.assertTrue(small.spilled)

    def test_insert_clamps_index(self):
        small: SmallList[int] = SmallList([1], capacity=4)
        small.insert(10, 2)
        small.insert(-10, 0)
        self.assertEqual(list(small), [0, 1, 2])

    def test_getitem(self):
        small: SmallList[int] = SmallList([1, 2, 3], capacity=4)
        self.assertEqual(small[0], 1)
        self.assertEqual(small[-1], 3)
        self.assertEqual(small[1:], [2, 3])
        with self.assertRaises(IndexError):
            small[3]
        with self.assertRaises(IndexError):
            small[-4]

    def test_setitem(self):
        small: SmallList[int] = SmallList([1, 2, 3], capacity=4)
        small[0] = 10
        small[-1] = 30
        self.assertEqual(list(small), [10, 2, 30])
        small[:] = [4, 5]
        self.assertEqual(list(small), [4, 5])
        self.assertFalse(small.spilled)
        small[:] = [1, 2, 3, 4, 5]
        self.assertTrue(small.spilled)
        self.assertEqual(list(small), [1, 2, 3, 4, 5])

    def test_delitem(self):
        small: SmallList[int] = SmallList([1, 2, 3, 4], capacity=4)
        del small[1]
        self.assertEqual(list(small), [1, 3, 4])
        del small[-1]
        self.assertEqual(list(small), [1, 3])
        del small[:1]
        self.assertEqual(list(small), [3])
        with self.assertRaises(IndexError):
            del small[1]

    def test_clear_keeps_heap(self):
        small: SmallList[int] = SmallList(range(3), capacity=2)
        small.clear()
        self.assertEqual(len(small), 0)
        self.assertTrue(small.spilled)

    def test_clear_inline(self):
        small: SmallList[int] = SmallList(range(2), capacity=2)
        small.clear()
        self.assertEqual(list(small), [])
        small.extend([5, 6])
        self.assertFalse(small.spilled)

    def test_sort(self):
        small: SmallList[int] = SmallList([3, 1, 2], capacity=4)
        small.sort()
        self.assertEqual(list(small), [1, 2, 3])
        small.sort(reverse=True)
        self.assertEqual(list(small), [3, 2, 1])

    def test_mixin_methods(self):
        small: SmallList[str] = SmallList("abca", capacity=8)
        self.assertIn("b", small)
        self.assertEqual(small.index("c"), 2)
        self.assertEqual(small.count("a"), 2)
        self.assertEqual(small.pop(), "a")
        small.remove("b")
        self.assertEqual(list(small), ["a", "c"])

    def test_repr(self):
        small: SmallList[int] = SmallList([1], capacity=2)
        self.assertEqual(repr(small), "SmallList([1], capacity=2)")


if __name__ == "__main__":
    unittest.main()

import unittest

from manytomany.datastructures.manytomany import Pair
from manytomany.datastructures.sequences import SmallList
from manytomany.datastructures.views import (ComponentRef, ListView,
                                             MutableListView, PairRef)


class TestListView(unittest.TestCase):
    def test_reflects_changes(self):
        list_ = [1, 2]
        view = ListView(list_)
        list_.append(3)
        self.assertEqual(len(view), 3)
        self.assertEqual(view[-1], 3)
        self.assertEqual(view[:2], [1, 2])
        self.assertEqual(view, [1, 2, 3])

    def test_read_only(self):
        view = ListView([1, 2])
        with self.assertRaises(TypeError):
            view[0] = 5  # type: ignore

    def test_small_list(self):
        view = ListView(SmallList([1, 2], capacity=2))
        self.assertEqual(list(view), [1, 2])
        self.assertEqual(repr(view), "ListView([1, 2])")


class TestMutableListView(unittest.TestCase):
    def test_setitem(self):
        list_ = [1, 2]
        view = MutableListView(list_)
        view[0] = 5
        self.assertEqual(list_, [5, 2])

    def test_convert(self):
        list_ = [Pair(1, "a")]
        view = MutableListView(list_, lambda item: Pair(*item))
        view[0] = (2, "b")
        self.assertIsInstance(list_[0], Pair)
        self.assertEqual(list_[0].left, 2)

    def test_fixed_length(self):
        view = MutableListView([1, 2])
        with self.assertRaises(TypeError):
            view[0:1] = [3, 4]
        with self.assertRaises(TypeError):
            del view[0]


class TestPairRefs(unittest.TestCase):
    def test_pair_ref(self):
        pairs = [Pair(1, "a"), Pair(2, "b")]
        ref: PairRef[int, str] = PairRef(pairs, 1)
        self.assertEqual(ref.pair, (2, "b"))
        self.assertEqual(ref.index, 1)
        ref.left = 3
        ref.right = "c"
        self.assertEqual(pairs, [(1, "a"), (3, "c")])
        left, right = ref
        self.assertEqual((left, right), (3, "c"))

    def test_component_ref(self):
        pairs = [Pair(1, "a")]
        left_ref = ComponentRef(pairs, 0, "left")
        right_ref = ComponentRef(pairs, 0, "right")
        self.assertEqual(left_ref.value, 1)
        self.assertEqual(right_ref.side, "right")
        right_ref.value = "z"
        left_ref.value += 1
        self.assertEqual(pairs, [(2, "z")])
        self.assertEqual(repr(left_ref), "ComponentRef(2)")

    def test_component_ref_bad_side(self):
        with self.assertRaises(ValueError):
            ComponentRef([Pair(1, "a")], 0, "middle")  # type: ignore


if __name__ == "__main__":
    unittest.main()

import unittest

import numpy as np

from src.ntensor.domain._config import TensorConfig
from src.ntensor.domain._errors import (
    IndexOutOfRangeError,
    ShapeMismatchError,
    StaleViewError,
    UnsupportedRankError,
)
from src.ntensor.infrastructure.tensor._tensor import Tensor
from src.ntensor.infrastructure.tensor._view import View


def _grid(rows, cols, config=None):
    arr = np.arange(rows * cols, dtype=np.float32).reshape(rows, cols)
    return Tensor.from_numpy(arr, config)


class TestViewDescriptor(unittest.TestCase):
    def test_slice_descriptor(self):
        t = _grid(4, 4)
        v = t.slice(1, 3, 2, 4)
        self.assertIsInstance(v, View)
        self.assertIs(v.parent, t)
        self.assertEqual(v.shape, (2, 2))
        self.assertEqual(v.strides, (4, 1))
        self.assertEqual(v.offset, 1 * 4 + 2)
        self.assertEqual(v.size, 4)
        self.assertTrue(v.is_valid)

    def test_view_reads_parent_elements(self):
        t = _grid(4, 4)
        v = t.slice(2, 4, 1, 3)
        self.assertEqual(v[0, 0], 9.0)
        self.assertEqual(v.get(1, 1), 14.0)
        self.assertEqual(v.index(1, 0), 13)
        np.testing.assert_array_equal(v.to_numpy(), [[9, 10], [13, 14]])

    def test_rank_one_parent_is_a_single_row(self):
        t = Tensor.from_numpy(np.arange(6, dtype=np.float32))
        v = t.slice(0, 1, 2, 5)
        self.assertEqual(v.format_flat(), "2 3 4")

    def test_empty_view(self):
        v = _grid(4, 4).slice(1, 1, 0, 4)
        self.assertEqual(v.shape, (0, 4))
        self.assertEqual(v.window().shape, (0, 4))
        self.assertEqual(v.format_flat(), "")


class TestViewAliasing(unittest.TestCase):
    def test_write_through_view_is_visible_in_parent(self):
        t = Tensor((4, 4), -1.0)
        v = t.slice(0, 2, 0, 2)
        v.set(0, 0, 1.0)
        v.set(0, 1, 2.0)
        v[1, 0] = 3.0
        v[1, 1] = 4.0

        expected = np.full((4, 4), -1.0, dtype=np.float32)
        expected[:2, :2] = [[1.0, 2.0], [3.0, 4.0]]
        np.testing.assert_array_equal(t.to_numpy(), expected)

    def test_write_through_parent_is_visible_in_view(self):
        t = Tensor((4, 4))
        v = t.slice(2, 4, 2, 4)
        t[3, 2] = -1.0
        self.assertEqual(v[1, 0], -1.0)

    def test_window_is_zero_copy(self):
        t = Tensor((4, 4))
        w = t.slice(1, 3, 1, 3).window()
        self.assertTrue(np.shares_memory(w, t.data))
        w[...] = 5.0
        self.assertEqual(t.sum(), 20.0)
        self.assertEqual(t[1, 1], 5.0)
        self.assertEqual(t[2, 2], 5.0)
        self.assertEqual(t[0, 0], 0.0)

    def test_sub_view_addresses_same_parent(self):
        t = _grid(6, 6)
        inner = t.slice(1, 5, 1, 5).slice(1, 3, 2, 4)
        self.assertIs(inner.parent, t)
        self.assertEqual(inner.offset, 2 * 6 + 3)
        np.testing.assert_array_equal(inner.to_numpy(), [[15, 16], [21, 22]])

    def test_to_tensor_is_an_owning_copy(self):
        cfg = TensorConfig(strassen_threshold=0)
        t = _grid(4, 4, cfg)
        copy = t.slice(0, 2, 0, 2).to_tensor()
        self.assertIsInstance(copy, Tensor)
        self.assertIs(copy.config, cfg)
        np.testing.assert_array_equal(copy.to_numpy(), [[0, 1], [4, 5]])
        copy[0, 0] = 99.0
        self.assertEqual(t[0, 0], 0.0)


class TestViewRegionWrites(unittest.TestCase):
    def test_combine_add_and_sub(self):
        t = _grid(4, 4)
        dst = Tensor((4, 4))
        top_left = t.slice(0, 2, 0, 2)
        bottom_right = t.slice(2, 4, 2, 4)

        dst.slice(0, 2, 0, 2).combine_add(top_left, bottom_right)
        dst.slice(2, 4, 2, 4).combine_sub(bottom_right, top_left)

        np.testing.assert_array_equal(dst.slice(0, 2, 0, 2).to_numpy(), [[10, 12], [18, 20]])
        np.testing.assert_array_equal(dst.slice(2, 4, 2, 4).to_numpy(), np.full((2, 2), 10))
        self.assertEqual(dst[0, 3], 0.0)

    def test_copy_from_tensor_into_view(self):
        t = Tensor((3, 3))
        t.slice(1, 3, 1, 3).copy_from(Tensor((2, 2), 4.0))
        self.assertEqual(t.sum(), 16.0)
        self.assertEqual(t[0, 0], 0.0)

    def test_region_shape_mismatch(self):
        t = Tensor((4, 4))
        with self.assertRaises(ShapeMismatchError):
            t.slice(0, 2, 0, 2).copy_from(t.slice(0, 3, 0, 3))

    def test_region_rejects_non_matrix_operand(self):
        v = Tensor((2, 2)).slice(0, 2, 0, 2)
        with self.assertRaises(TypeError):
            v.combine_add(v, [[1, 2], [3, 4]])


class TestViewBounds(unittest.TestCase):
    def test_rectangle_outside_parent(self):
        t = Tensor((4, 4))
        with self.assertRaises(IndexOutOfRangeError):
            t.slice(0, 5, 0, 2)
        with self.assertRaises(IndexOutOfRangeError):
            t.slice(0, 2, 3, 2)
        with self.assertRaises(IndexOutOfRangeError):
            t.slice(-1, 2, 0, 2)

    def test_element_outside_view(self):
        v = Tensor((4, 4)).slice(0, 2, 0, 2)
        with self.assertRaises(IndexOutOfRangeError):
            v.get(2, 0)
        with self.assertRaises(IndexOutOfRangeError):
            v.set(0, -1, 1.0)

    def test_sub_view_outside_view(self):
        v = Tensor((4, 4)).slice(0, 2, 0, 2)
        with self.assertRaises(IndexOutOfRangeError):
            v.slice(0, 3, 0, 1)

    def test_slice_of_rank_three_rejected(self):
        with self.assertRaises(UnsupportedRankError):
            Tensor((2, 2, 2)).slice(0, 1, 0, 1)


class TestViewLifetime(unittest.TestCase):
    def test_flatten_invalidates_views(self):
        t = Tensor((4, 4))
        v = t.slice(0, 2, 0, 2)
        t.flatten()
        self.assertFalse(v.is_valid)
        self.assertIn("stale", repr(v))
        with self.assertRaises(StaleViewError):
            v.get(0, 0)
        with self.assertRaises(StaleViewError):
            v.window()

    def test_views_made_after_flatten_are_valid(self):
        t = _grid(2, 3)
        t.flatten()
        v = t.slice(0, 1, 2, 5)
        self.assertEqual(v.format_flat(), "2 3 4")

    def test_release_invalidates_views(self):
        t = Tensor((4, 4))
        v = t.slice(1, 2, 1, 2)
        t.release()
        self.assertFalse(v.is_valid)
        with self.assertRaises(StaleViewError):
            v.set(0, 0, 1.0)
        with self.assertRaises(StaleViewError):
            v.to_tensor()

    def test_stale_view_error_is_runtime_error(self):
        t = Tensor((2, 2))
        v = t.slice(0, 1, 0, 1)
        t.flatten()
        with self.assertRaises(RuntimeError):
            v.index(0, 0)


if __name__ == "__main__":
    unittest.main()

import unittest

import numpy as np

from src.ntensor.domain._config import TensorConfig
from src.ntensor.domain._errors import InvalidShapeError
from src.ntensor.infrastructure.tensor._tensor import Tensor


class TestTensorConstruction(unittest.TestCase):
    def test_fill_value_is_applied_to_every_element(self):
        t = Tensor((2, 3, 4), 1.5)
        self.assertEqual(t.shape, (2, 3, 4))
        self.assertEqual(t.stride, (12, 4, 1))
        self.assertEqual(t.size, 24)
        self.assertEqual(t.ndim, 3)
        for i in range(2):
            for j in range(3):
                for k in range(4):
                    self.assertEqual(t.get((i, j, k)), 1.5)

    def test_default_fill_is_zero(self):
        t = Tensor((3, 3))
        np.testing.assert_array_equal(t.to_numpy(), np.zeros((3, 3), dtype=np.float32))

    def test_default_config_and_dtype(self):
        t = Tensor((2, 2))
        self.assertEqual(t.config, TensorConfig())
        self.assertEqual(t.dtype, np.float32)
        self.assertEqual(t.generation, 0)
        self.assertFalse(t.released)

    def test_explicit_config_is_kept(self):
        cfg = TensorConfig(strassen_threshold=0)
        t = Tensor((2, 2), 0.0, cfg)
        self.assertIs(t.config, cfg)

    def test_non_config_object_rejected(self):
        with self.assertRaises(TypeError):
            Tensor((2, 2), 0.0, {"strassen_threshold": 0})

    def test_rank_zero_shape_rejected(self):
        with self.assertRaises(InvalidShapeError):
            Tensor(())

    def test_negative_extent_rejected(self):
        with self.assertRaises(InvalidShapeError):
            Tensor((3, -1))

    def test_zero_extent_shape_is_empty(self):
        t = Tensor((0, 5))
        self.assertEqual(t.size, 0)
        self.assertEqual(t.numel(), 0)
        self.assertEqual(t.format_flat(), "")

    def test_rank_one_tensor(self):
        t = Tensor(5, 2.0)
        self.assertEqual(t.shape, (5,))
        self.assertEqual(t.stride, (1,))
        self.assertEqual(t[3], 2.0)

    def test_float64_dtype(self):
        t = Tensor((2,), 0.1, dtype=np.float64)
        self.assertEqual(t.dtype, np.float64)
        self.assertEqual(t[0], 0.1)

    def test_buffer_is_flat_and_contiguous(self):
        t = Tensor((3, 4), 1.0)
        self.assertEqual(t.data.ndim, 1)
        self.assertEqual(t.data.shape, (12,))
        self.assertTrue(t.data.flags["C_CONTIGUOUS"])

    def test_repr_mentions_shape(self):
        self.assertIn("(2, 3)", repr(Tensor((2, 3))))


class TestTensorFactories(unittest.TestCase):
    def test_zeros(self):
        t = Tensor.zeros((2, 5))
        self.assertIsInstance(t, Tensor)
        np.testing.assert_array_equal(t.to_numpy(), np.zeros((2, 5)))

    def test_full(self):
        t = Tensor.full((3,), -2.5)
        np.testing.assert_array_equal(t.to_numpy(), np.full((3,), -2.5))

    def test_factories_forward_config(self):
        cfg = TensorConfig(max_workers=2)
        self.assertIs(Tensor.zeros((1, 1), cfg).config, cfg)
        self.assertIs(Tensor.full((1, 1), 3.0, cfg).config, cfg)

    def test_from_numpy_copies_values_and_shape(self):
        src = np.arange(12, dtype=np.float32).reshape(3, 4)
        t = Tensor.from_numpy(src)
        self.assertEqual(t.shape, (3, 4))
        np.testing.assert_array_equal(t.to_numpy(), src)

        src[0, 0] = 100.0
        self.assertEqual(t[0, 0], 0.0)

    def test_from_numpy_integer_input_becomes_float32(self):
        t = Tensor.from_numpy([[1, 2], [3, 4]])
        self.assertEqual(t.dtype, np.float32)
        self.assertEqual(t[1, 0], 3.0)

    def test_from_numpy_keeps_float64(self):
        t = Tensor.from_numpy(np.ones((2, 2), dtype=np.float64))
        self.assertEqual(t.dtype, np.float64)

    def test_fill_overwrites_every_element(self):
        t = Tensor((2, 2), 1.0)
        t.fill(7.0)
        np.testing.assert_array_equal(t.to_numpy(), np.full((2, 2), 7.0))


if __name__ == "__main__":
    unittest.main()

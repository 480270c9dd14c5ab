import io
import math
import unittest

import numpy as np

import src.ntensor as ntensor
from src.ntensor import Tensor, TensorConfig


def _reference_grid(config=None):
    t = Tensor((4, 4), 0.0, config)
    for i in range(4):
        for j in range(4):
            t[i, j] = 2.125 * (i + j) + math.floor(i / (j + 1))
    return t


class TestEndToEnd(unittest.TestCase):
    def test_public_surface(self):
        for name in ntensor.__all__:
            self.assertTrue(hasattr(ntensor, name), name)
        self.assertEqual(ntensor.__version__, "0.1.0")

    def test_reference_grid_sum(self):
        self.assertEqual(_reference_grid().sum(), 111.0)

    def test_scale_then_square(self):
        cfg = TensorConfig(strassen_threshold=0)
        t = _reference_grid(cfg)
        ref = t.to_numpy().astype(np.float64)

        t *= 2
        out = t.matmul(t)

        np.testing.assert_allclose(out.to_numpy(), (2 * ref) @ (2 * ref), rtol=1e-6)

    def test_view_edit_then_flatten_and_print(self):
        t = _reference_grid()
        corner = t.slice(0, 2, 0, 2)
        corner.copy_from(Tensor((2, 2), 0.0))
        self.assertEqual(t.sum(), 111.0 - (0.0 + 2.125 + 3.125 + 4.25))

        t.flatten()
        self.assertFalse(corner.is_valid)

        buf = io.StringIO()
        t.print_flat(file=buf)
        values = [float(v) for v in buf.getvalue().split()]
        self.assertEqual(len(values), 16)
        self.assertEqual(values[:2], [0.0, 0.0])
        self.assertEqual(values[4:6], [0.0, 0.0])

    def test_mean_min_max_of_reference_grid(self):
        t = _reference_grid()
        self.assertAlmostEqual(t.mean(), 111.0 / 16)
        self.assertEqual(t.min(), 0.0)
        self.assertEqual(t.max(), 2.125 * 6)


if __name__ == "__main__":
    unittest.main()

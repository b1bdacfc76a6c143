import unittest

from src.saturn.scalar import FixedPointKernel, FloatKernel
from src.saturn.vector import Point3, VectorMath


class VectorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.kernels = (FixedPointKernel(), FloatKernel())

    def _tolerance(self, kernel) -> float:
        # Table lookups for sin and cos land on neighbouring samples.
        return 0.15 if kernel.name == "fixed" else 1e-9

    def test_rotate_x_keeps_axis_and_length(self) -> None:
        for kernel in self.kernels:
            with self.subTest(kernel=kernel.name):
                vectors = VectorMath(kernel)
                p = vectors.point(3.0, 4.0, 5.0)
                for degrees in (27.0, 90.0, 200.0):
                    rotated = vectors.rotate_x(p, kernel.radians(kernel.from_float(degrees)))
                    self.assertEqual(rotated.x, p.x)
                    self.assertAlmostEqual(
                        kernel.to_float(vectors.length(rotated)),
                        kernel.to_float(vectors.length(p)),
                        delta=self._tolerance(kernel),
                    )

    def test_rotate_y_keeps_axis_and_length(self) -> None:
        for kernel in self.kernels:
            with self.subTest(kernel=kernel.name):
                vectors = VectorMath(kernel)
                p = vectors.point(3.0, 4.0, 5.0)
                for degrees in (27.0, 90.0, 200.0):
                    rotated = vectors.rotate_y(p, kernel.radians(kernel.from_float(degrees)))
                    self.assertEqual(rotated.y, p.y)
                    self.assertAlmostEqual(
                        kernel.to_float(vectors.length(rotated)),
                        kernel.to_float(vectors.length(p)),
                        delta=self._tolerance(kernel),
                    )

    def test_normalize_zero_vector(self) -> None:
        for kernel in self.kernels:
            with self.subTest(kernel=kernel.name):
                vectors = VectorMath(kernel)
                self.assertEqual(vectors.normalize(vectors.origin, fallback=vectors.unit_z), vectors.unit_z)
                self.assertEqual(vectors.normalize(vectors.origin), vectors.origin)

    def test_normalize_gives_unit_length(self) -> None:
        for kernel in self.kernels:
            with self.subTest(kernel=kernel.name):
                vectors = VectorMath(kernel)
                unit = vectors.normalize(vectors.point(3.0, 4.0, 0.0))
                self.assertAlmostEqual(kernel.to_float(vectors.length(unit)), 1.0, delta=0.001)
                self.assertAlmostEqual(kernel.to_float(unit.x), 0.6, delta=0.001)
                self.assertAlmostEqual(kernel.to_float(unit.y), 0.8, delta=0.001)

    def test_cross_of_x_and_y_is_z(self) -> None:
        for kernel in self.kernels:
            with self.subTest(kernel=kernel.name):
                vectors = VectorMath(kernel)
                unit_x = Point3(kernel.one, kernel.zero, kernel.zero)
                self.assertEqual(vectors.cross(unit_x, vectors.unit_y), vectors.unit_z)
                self.assertEqual(vectors.dot(unit_x, vectors.unit_y), 0)


if __name__ == "__main__":
    unittest.main()

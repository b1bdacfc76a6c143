import math
import unittest

from src.saturn.scalar import SIN_TABLE, FixedPointKernel, FloatKernel, make_kernel


class KernelTests(unittest.TestCase):
    def setUp(self) -> None:
        self.kernels = (FixedPointKernel(), FloatKernel())
        self.angles = [i * 0.37 - 7.0 for i in range(40)]

    def test_fixed_constants(self) -> None:
        fixed = FixedPointKernel()
        self.assertEqual(fixed.one, 65536)
        self.assertEqual(fixed.pi, 205887)
        self.assertEqual(fixed.half_pi, 102943)
        self.assertEqual(fixed.two_pi, 2 * 205887)
        self.assertEqual(fixed.epsilon, 65)

    def test_sine_table_matches_reference(self) -> None:
        expected = (
            0, 1608, 3216, 4821, 6424, 8022, 9616, 11204, 12785, 14359, 15924, 17479, 19024, 20557, 22078, 23586,
            25080, 26558, 28020, 29466, 30893, 32302, 33692, 35061, 36410, 37736, 39040, 40320, 41576, 42806, 44011, 45190,
            46341, 47464, 48559, 49624, 50660, 51665, 52639, 53581, 54491, 55368, 56212, 57022, 57798, 58538, 59244, 59914,
            60547, 61145, 61705, 62228, 62714, 63162, 63572, 63944, 64277, 64571, 64827, 65043, 65220, 65358, 65457, 65516,
            65536, 65516, 65457, 65358, 65220, 65043, 64827, 64571, 64277, 63944, 63572, 63162, 62714, 62228, 61705, 61145,
            60547, 59914, 59244, 58538, 57798, 57022, 56212, 55368, 54491, 53581, 52639, 51665, 50660, 49624, 48559, 47464,
            46341, 45190, 44011, 42806, 41576, 40320, 39040, 37736, 36410, 35061, 33692, 32302, 30893, 29466, 28020, 26558,
            25080, 23586, 22078, 20557, 19024, 17479, 15924, 14359, 12785, 11204, 9616, 8022, 6424, 4821, 3216, 1608,
            0, -1608, -3216, -4821, -6424, -8022, -9616, -11204, -12785, -14359, -15924, -17479, -19024, -20557, -22078, -23586,
            -25080, -26558, -28020, -29466, -30893, -32302, -33692, -35061, -36410, -37736, -39040, -40320, -41576, -42806, -44011, -45190,
            -46341, -47464, -48559, -49624, -50660, -51665, -52639, -53581, -54491, -55368, -56212, -57022, -57798, -58538, -59244, -59914,
            -60547, -61145, -61705, -62228, -62714, -63162, -63572, -63944, -64277, -64571, -64827, -65043, -65220, -65358, -65457, -65516,
            -65536, -65516, -65457, -65358, -65220, -65043, -64827, -64571, -64277, -63944, -63572, -63162, -62714, -62228, -61705, -61145,
            -60547, -59914, -59244, -58538, -57798, -57022, -56212, -55368, -54491, -53581, -52639, -51665, -50660, -49624, -48559, -47464,
            -46341, -45190, -44011, -42806, -41576, -40320, -39040, -37736, -36410, -35061, -33692, -32302, -30893, -29466, -28020, -26558,
            -25080, -23586, -22078, -20557, -19024, -17479, -15924, -14359, -12785, -11204, -9616, -8022, -6424, -4821, -3216, -1608,
        )
        self.assertEqual(len(SIN_TABLE), 256)
        self.assertEqual(SIN_TABLE, expected)

    def test_sin_cos_periodic(self) -> None:
        for kernel in self.kernels:
            for angle in self.angles:
                with self.subTest(kernel=kernel.name, angle=angle):
                    a = kernel.from_float(angle)
                    self.assertAlmostEqual(
                        kernel.to_float(kernel.sin(a)),
                        kernel.to_float(kernel.sin(a + kernel.two_pi)),
                        places=9,
                    )
                    self.assertAlmostEqual(
                        kernel.to_float(kernel.cos(a)),
                        kernel.to_float(kernel.cos(a - 3 * kernel.two_pi)),
                        places=9,
                    )

    def test_cos_is_shifted_sin(self) -> None:
        for kernel in self.kernels:
            for angle in self.angles:
                with self.subTest(kernel=kernel.name, angle=angle):
                    a = kernel.from_float(angle)
                    self.assertAlmostEqual(
                        kernel.to_float(kernel.cos(a)),
                        kernel.to_float(kernel.sin(a + kernel.half_pi)),
                        places=9,
                    )

    def test_fixed_trig_close_to_math(self) -> None:
        fixed = FixedPointKernel()
        for angle in self.angles:
            with self.subTest(angle=angle):
                a = fixed.from_float(angle)
                self.assertAlmostEqual(fixed.to_float(fixed.sin(a)), math.sin(angle), delta=0.03)
                self.assertAlmostEqual(fixed.to_float(fixed.cos(a)), math.cos(angle), delta=0.03)

    def test_sqrt_squares_back(self) -> None:
        for kernel in self.kernels:
            for value in (0.25, 1.0, 2.0, 3.0, 10.0, 100.0, 1000.0, 2500.0, 4900.0):
                with self.subTest(kernel=kernel.name, value=value):
                    root = kernel.to_float(kernel.sqrt(kernel.from_float(value)))
                    self.assertAlmostEqual(root * root, value, delta=0.01 * max(1.0, value))

    def test_sqrt_non_positive(self) -> None:
        for kernel in self.kernels:
            with self.subTest(kernel=kernel.name):
                self.assertEqual(kernel.sqrt(kernel.zero), 0)
                self.assertEqual(kernel.sqrt(kernel.from_float(-4.0)), 0)

    def test_fixed_mul_floors_and_div_truncates(self) -> None:
        fixed = FixedPointKernel()
        self.assertEqual(fixed.mul(fixed.from_float(1.5), fixed.from_float(2.0)), fixed.from_float(3.0))
        self.assertEqual(fixed.mul(-1, 1), -1)
        self.assertEqual(fixed.div(fixed.from_int(-1), fixed.from_int(3)), -21845)
        self.assertEqual(fixed.div(fixed.from_int(1), fixed.from_int(3)), 21845)

    def test_to_int_floors(self) -> None:
        for kernel in self.kernels:
            with self.subTest(kernel=kernel.name):
                self.assertEqual(kernel.to_int(kernel.from_float(-0.5)), -1)
                self.assertEqual(kernel.to_int(kernel.from_float(63.99)), 63)

    def test_radians(self) -> None:
        for kernel in self.kernels:
            with self.subTest(kernel=kernel.name):
                tilt = kernel.radians(kernel.from_float(27.0))
                self.assertAlmostEqual(kernel.to_float(tilt), math.radians(27.0), delta=1e-4)

    def test_wrap_angle_range(self) -> None:
        for kernel in self.kernels:
            for angle in self.angles:
                with self.subTest(kernel=kernel.name, angle=angle):
                    wrapped = kernel.wrap_angle(kernel.from_float(angle))
                    self.assertGreaterEqual(wrapped, 0)
                    self.assertLess(wrapped, kernel.two_pi)

    def test_whole_steps(self) -> None:
        for kernel in self.kernels:
            with self.subTest(kernel=kernel.name):
                span = kernel.from_float(2.0)
                self.assertEqual(kernel.whole_steps(span, kernel.from_float(0.1)), 20)
                self.assertEqual(kernel.whole_steps(span, kernel.from_float(0.7)), 2)
                self.assertEqual(kernel.whole_steps(span, kernel.from_float(1.0)), 2)

    def test_make_kernel(self) -> None:
        self.assertIsInstance(make_kernel("fixed"), FixedPointKernel)
        self.assertIsInstance(make_kernel("float"), FloatKernel)
        with self.assertRaises(ValueError):
            make_kernel("double")


if __name__ == "__main__":
    unittest.main()

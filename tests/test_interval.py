from __future__ import annotations

import dataclasses
import unittest

from rampcurve import ClosedInterval, InterpolationError, InvalidInterval


class TestClosedInterval(unittest.TestCase):
    def test_length_and_bounds(self) -> None:
        iv = ClosedInterval(10.0, 20.0)
        self.assertEqual(iv.bounds, (10.0, 20.0))
        self.assertEqual(iv.length, 10.0)
        self.assertEqual(iv.midpoint, 15.0)

    def test_rejects_degenerate_and_inverted(self) -> None:
        for low, high in [(1.0, 1.0), (2.0, 1.0), (0.0, -0.5), (float("nan"), 1.0)]:
            with self.assertRaises(InvalidInterval):
                ClosedInterval(low, high)

    def test_rejects_infinite_bounds(self) -> None:
        inf = float("inf")
        for low, high in [(-inf, inf), (0.0, inf), (-inf, 0.0)]:
            with self.assertRaises(InvalidInterval) as ctx:
                ClosedInterval(low, high)
            self.assertIn("finite", str(ctx.exception))

    def test_unordered_range_may_be_infinite(self) -> None:
        iv = ClosedInterval(float("inf"), 0.0, ordered=False)
        self.assertEqual(iv.high, 0.0)

    def test_invalid_interval_is_value_error(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            ClosedInterval(5, 3)
        self.assertIsInstance(ctx.exception, InterpolationError)
        self.assertIn("5.0 !< 3.0", str(ctx.exception))

    def test_unordered_range_allowed(self) -> None:
        iv = ClosedInterval(-100.0, -200.0, ordered=False)
        self.assertEqual(iv.length, -100.0)
        degenerate = ClosedInterval(7.0, 7.0, ordered=False)
        self.assertEqual(degenerate.length, 0.0)

    def test_contains_is_inclusive(self) -> None:
        iv = ClosedInterval(10, 20)
        self.assertTrue(iv.contains(10))
        self.assertTrue(iv.contains(15.5))
        self.assertTrue(iv.contains(20))
        self.assertFalse(iv.contains(9.999))
        self.assertFalse(iv.contains(20.001))

    def test_coerce_from_pair_and_interval(self) -> None:
        iv = ClosedInterval.coerce((1, 3))
        self.assertEqual(iv, ClosedInterval(1.0, 3.0))
        self.assertEqual(ClosedInterval.coerce(iv), iv)
        self.assertEqual(tuple(iv), (1.0, 3.0))
        with self.assertRaises(InvalidInterval):
            ClosedInterval.coerce((3, 1))

    def test_immutable(self) -> None:
        iv = ClosedInterval(0.0, 1.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            iv.low = -1.0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()

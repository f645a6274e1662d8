import unittest
from fractions import Fraction

from acreage.core.combinatorics import MAX_CENTRAL_BINOM_N, central_binom
from acreage.core.models import Area


class AreaTests(unittest.TestCase):
    def test_simplify_collapses_half_pairs(self) -> None:
        simplified = Area(units=3, half=5).simplify()
        self.assertEqual((simplified.units, simplified.half), (5, 1))

    def test_simplify_is_idempotent(self) -> None:
        for units, half in [(0, 0), (0, 1), (0, 4), (7, 9), (32, 0), (12, 31)]:
            once = Area(units, half).simplify()
            twice = once.simplify()
            self.assertEqual((once.units, once.half), (twice.units, twice.half))
            self.assertIn(once.half, (0, 1))

    def test_equality_uses_simplified_form(self) -> None:
        self.assertEqual(Area(0, 4), Area(2, 0))
        self.assertEqual(hash(Area(0, 4)), hash(Area(2)))
        self.assertNotEqual(Area(2, 1), Area(2, 0))

    def test_is_integer(self) -> None:
        self.assertTrue(Area(4, 4).is_integer(6))
        self.assertFalse(Area(4, 3).is_integer(5))
        self.assertFalse(Area(4, 4).is_integer(5))

    def test_display_renders_decimal(self) -> None:
        self.assertEqual(str(Area(30, 4)), "32")
        self.assertEqual(str(Area(6, 1)), "6.5")
        self.assertEqual(Area(6, 3).value, Fraction(15, 2))

    def test_from_value_parses_halves(self) -> None:
        self.assertEqual(Area.from_value("32"), Area(32, 0))
        parsed = Area.from_value("6.5")
        self.assertEqual((parsed.units, parsed.half), (6, 1))
        self.assertEqual(Area.from_value(2), Area(2))

    def test_from_value_rejects_bad_input(self) -> None:
        for value in ("6.25", "-2", "abc"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    Area.from_value(value)

    def test_negative_components_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Area(-1, 0)


class CentralBinomTests(unittest.TestCase):
    def test_known_values(self) -> None:
        self.assertEqual(central_binom(0), 1)
        self.assertEqual(central_binom(2), 6)
        self.assertEqual(central_binom(10), 184756)
        self.assertEqual(central_binom(26), 495918532948104)

    def test_matches_recurrence(self) -> None:
        # C(2n, n) = C(2n-2, n-1) * 2(2n-1) / n
        for n in range(1, MAX_CENTRAL_BINOM_N + 1):
            self.assertEqual(central_binom(n), central_binom(n - 1) * 2 * (2 * n - 1) // n)

    def test_out_of_range(self) -> None:
        with self.assertRaises(ValueError):
            central_binom(MAX_CENTRAL_BINOM_N + 1)
        with self.assertRaises(ValueError):
            central_binom(-1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

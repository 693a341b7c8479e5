import unittest
from dataclasses import dataclass

from gradepoint.core.gpa import MAX_GPA, calculate_gpa


@dataclass(frozen=True)
class WeightedResult:
    credit_hours: int
    grade_point: float


class GPATests(unittest.TestCase):
    def test_weighted_average(self):
        results = [WeightedResult(3, 4.0), WeightedResult(4, 3.0)]
        self.assertAlmostEqual(calculate_gpa(results), 24 / 7)

    def test_result_is_not_rounded(self):
        results = [WeightedResult(3, 4.0), WeightedResult(4, 3.0)]
        self.assertEqual(calculate_gpa(results), 24.0 / 7)

    def test_empty_is_zero(self):
        self.assertEqual(calculate_gpa([]), 0.0)

    def test_zero_credits_is_zero(self):
        self.assertEqual(calculate_gpa([WeightedResult(0, 4.0), WeightedResult(0, 3.0)]), 0.0)

    def test_capped_at_max(self):
        self.assertEqual(calculate_gpa([WeightedResult(2, 5.0)]), MAX_GPA)

    def test_accepts_generator(self):
        gpa = calculate_gpa(WeightedResult(c, 2.0) for c in (1, 2, 3))
        self.assertEqual(gpa, 2.0)


if __name__ == "__main__":
    unittest.main()

import math
import unittest

from compoundsim import (
    InvalidParameterError,
    compute_lump_sum,
    compute_regular_contribution,
    generate_contribution_series,
    generate_lump_sum_series,
)


class LumpSumSeriesTests(unittest.TestCase):
    def test_shape(self):
        series = generate_lump_sum_series(10_000, 0.08, 10, 12)
        self.assertEqual(len(series), 11)
        self.assertEqual([s.year for s in series], list(range(11)))
        self.assertEqual(series[0].value, 10_000)
        self.assertEqual(series[0].interest_to_date, 0)
        self.assertTrue(all(s.principal_to_date == 10_000 for s in series))

    def test_matches_calculator(self):
        for freq in (1, 12, 52, 365):
            series = generate_lump_sum_series(10_000, 0.08, 10, freq)
            result = compute_lump_sum(10_000, 0.08, 10, freq)
            self.assertTrue(math.isclose(series[-1].value, result.future_value, rel_tol=1e-9))
            self.assertTrue(math.isclose(series[-1].interest_to_date, result.total_interest, rel_tol=1e-9))

    def test_each_year_uses_closed_form(self):
        series = generate_lump_sum_series(1_000, 0.05, 5, 1)
        for snapshot in series:
            self.assertAlmostEqual(snapshot.value, 1_000 * 1.05 ** snapshot.year, places=9)

    def test_zero_years(self):
        series = generate_lump_sum_series(1_000, 0.05, 0, 12)
        self.assertEqual(len(series), 1)
        self.assertEqual(series[0].value, 1_000)

    def test_invalid_inputs(self):
        with self.assertRaises(InvalidParameterError):
            generate_lump_sum_series(-1, 0.05, 5, 12)
        with self.assertRaises(InvalidParameterError):
            generate_lump_sum_series(1_000, 0.05, 5, 0)
        with self.assertRaises(InvalidParameterError) as ctx:
            generate_lump_sum_series(1_000, 0.05, 2.5, 12)
        self.assertEqual(ctx.exception.field, "years")


class ContributionSeriesTests(unittest.TestCase):
    def test_shape(self):
        series = generate_contribution_series(1_000, 0.08, 10, 12)
        self.assertEqual(len(series), 11)
        self.assertEqual(series[0].value, 0)
        self.assertEqual(series[0].principal_to_date, 0)
        self.assertEqual([s.principal_to_date for s in series], [12_000 * y for y in range(11)])
        values = [s.value for s in series]
        self.assertEqual(values, sorted(values))

    def test_matches_calculator(self):
        for freq in (1, 4, 12, 52, 365):
            for years in (1, 3, 10):
                series = generate_contribution_series(1_000, 0.08, years, freq)
                result = compute_regular_contribution(1_000, 0.08, years, freq)
                self.assertTrue(math.isclose(series[-1].value, result.future_value, rel_tol=1e-9))
                self.assertEqual(series[-1].principal_to_date, result.total_principal)

    def test_intermediate_years_match_shorter_runs(self):
        series = generate_contribution_series(500, 0.06, 5, 52)
        for snapshot in series[1:]:
            result = compute_regular_contribution(500, 0.06, snapshot.year, 52)
            self.assertTrue(math.isclose(snapshot.value, result.future_value, rel_tol=1e-9))

    def test_interest_to_date(self):
        for snapshot in generate_contribution_series(200, 0.05, 4, 365):
            self.assertAlmostEqual(snapshot.interest_to_date, snapshot.value - snapshot.principal_to_date)

    def test_invalid_inputs(self):
        with self.assertRaises(InvalidParameterError):
            generate_contribution_series(1_000, -0.05, 5, 12)
        with self.assertRaises(InvalidParameterError):
            generate_contribution_series(1_000, 0.05, -5, 12)


if __name__ == '__main__':
    unittest.main()

import unittest

from puzzletracker.tracker.averages import calculate_average_time


class AverageTimeTests(unittest.TestCase):
    def test_mean_of_five_samples(self) -> None:
        self.assertAlmostEqual(calculate_average_time([10, 20, 30, 40, 50]), 30.0)

    def test_zero_length_is_zero(self) -> None:
        self.assertEqual(calculate_average_time([]), 0.0)
        self.assertEqual(calculate_average_time([10], 0), 0.0)
        self.assertEqual(calculate_average_time([10], -3), 0.0)

    def test_any_negative_zeroes_the_average(self) -> None:
        self.assertEqual(calculate_average_time([10, -5, 20]), 0.0)
        self.assertEqual(calculate_average_time([-0.01, 100, 100, 100, 100]), 0.0)

    def test_size_reads_only_a_prefix(self) -> None:
        self.assertAlmostEqual(calculate_average_time([4, 8, -1], 2), 6.0)

    def test_size_is_clamped_to_sequence(self) -> None:
        self.assertAlmostEqual(calculate_average_time([3, 5], 10), 4.0)

    def test_zero_values_are_allowed(self) -> None:
        self.assertEqual(calculate_average_time([0, 0, 0]), 0.0)
        self.assertAlmostEqual(calculate_average_time([0, 10]), 5.0)


if __name__ == "__main__":
    unittest.main()

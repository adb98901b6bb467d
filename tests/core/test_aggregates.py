"""Tests for intseq/core/aggregates.py."""

from array import array

import pytest

from intseq.core.aggregates import average, max_value, min_value, sum_values
from intseq.core.errors import EmptyInputError
from intseq.core.sequence import INT32_MAX, INT32_MIN

SAMPLE = [10, 5, 8, 3, 9, 1, 7]


# ---------------------------------------------------------------------------
# max / min
# ---------------------------------------------------------------------------

class TestMaxMin:
    def test_sample(self):
        assert max_value(SAMPLE) == 10
        assert min_value(SAMPLE) == 1

    def test_single_element(self):
        assert max_value([-7]) == -7
        assert min_value([-7]) == -7

    def test_all_negative(self):
        # A zero sentinel would wrongly report 0 here.
        assert max_value([-5, -2, -9]) == -2

    def test_full_int32_range(self):
        values = [INT32_MIN, 0, INT32_MAX]
        assert max_value(values) == INT32_MAX
        assert min_value(values) == INT32_MIN

    def test_accepts_tuple_and_array(self):
        assert max_value((3, 4, 1)) == 4
        assert min_value(array("i", [3, 4, 1])) == 1

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError, match="max_value"):
            max_value([])
        with pytest.raises(EmptyInputError, match="min_value"):
            min_value(())

    def test_empty_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            max_value([])


# ---------------------------------------------------------------------------
# sum / average
# ---------------------------------------------------------------------------

class TestSumAverage:
    def test_sum_sample(self):
        assert sum_values(SAMPLE) == 43

    def test_sum_empty_is_zero(self):
        assert sum_values([]) == 0

    def test_sum_does_not_wrap(self):
        assert sum_values([INT32_MAX, INT32_MAX]) == 2 * INT32_MAX

    def test_average_truncates(self):
        assert average(SAMPLE) == 6  # 43 / 7 = 6.14...
        assert average([1, 2]) == 1

    def test_average_negative_truncates_toward_zero(self):
        assert average([-3, -4]) == -3  # -3.5
        assert average([-1, -1, 0]) == 0  # -0.66...
        assert average([-7, 0]) == -3

    def test_average_large_values_stay_exact(self):
        # A float division would lose precision here.
        assert average([2**31 - 1] * 3 + [2**31 - 2]) == 2**31 - 2

    def test_average_exact(self):
        assert average([2, 4, 6]) == 4

    def test_average_empty_raises(self):
        with pytest.raises(EmptyInputError, match="average"):
            average([])

    def test_does_not_mutate(self):
        values = list(SAMPLE)
        average(values)
        sum_values(values)
        max_value(values)
        assert values == SAMPLE

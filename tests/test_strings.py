# tests/test_strings.py
import pytest
from sawview.exceptions import RangeError
from sawview.utils.strings import shorten

class TestShorten:
    def test_first_3_last_3(self):
        assert shorten("ABCddddABC", 3, 3) == "ABC...ABC"

    def test_first_3_last_0(self):
        assert shorten("ABCddddABC", 3, 0) == "ABC..."

    def test_first_0_last_3(self):
        assert shorten("ABCddddABC", 0, 3) == "...ABC"

    def test_overlapping_windows(self):
        assert shorten("ABC", 1, 3) == "A...ABC"

    def test_whole_string_both_sides(self):
        assert shorten("ABC", 3, 3) == "ABC...ABC"

    def test_signature_window(self):
        signature = "a1b2c3" + "f" * 54 + "9z8y"
        assert len(signature) == 64
        assert shorten(signature, 6, 4) == "a1b2c3...9z8y"

    @pytest.mark.parametrize("n, m", [(4, 3), (1, 4), (10, 10)])
    def test_window_out_of_bounds(self, n, m):
        with pytest.raises(RangeError, match="Invalid range"):
            shorten("ABC", n, m)

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            shorten("", 1, 0)

    def test_result_length(self):
        s = "0123456789abcdef"
        for n in range(len(s) + 1):
            for m in range(len(s) + 1):
                assert len(shorten(s, n, m)) == n + 3 + m

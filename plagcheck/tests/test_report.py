import pytest


class TestFormatPercentage:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (0.8567, "85.67%"),
            (1.0, "100.00%"),
            (0.0, "0.00%"),
            (4 / 6, "66.67%"),
            (0.7745966692414834, "77.46%"),
            (0.00001, "0.00%"),
        ],
    )
    def test_two_decimals(self, score, expected):
        from plagcheck.report import format_percentage

        assert format_percentage(score) == expected

    def test_half_up_at_midpoint(self):
        from plagcheck.report import format_percentage

        assert format_percentage(0.12345) == "12.35%"
        assert format_percentage(0.12355) == "12.36%"

    def test_half_even_at_midpoint(self):
        from plagcheck.report import format_percentage

        assert format_percentage(0.12345, rounding="half-even") == "12.34%"
        assert format_percentage(0.12355, rounding="half-even") == "12.36%"

    def test_unknown_rounding_mode(self):
        from plagcheck.report import format_percentage

        with pytest.raises(ValueError):
            format_percentage(0.5, rounding="truncate")

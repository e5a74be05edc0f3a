"""Tests for print sizing."""

import pytest

from darkroom_easel.core.models import PrintSize
from darkroom_easel.geometry.print_size import border_gaps, compute_print_size, fit_ratio


class TestComputePrintSize:
    """Test the maximal print rectangle."""

    def test_width_bound(self):
        """3:2 on 8x10 portrait with a half-inch border."""
        result = compute_print_size(8, 10, 3, 2, 0.5)

        assert result.print_w == pytest.approx(7.0)
        assert result.print_h == pytest.approx(4.6667, abs=1e-4)

    def test_height_bound(self):
        result = compute_print_size(20, 8, 3, 2, 1)

        assert result.print_w == pytest.approx(9.0)
        assert result.print_h == pytest.approx(6.0)

    def test_landscape_8x10(self):
        result = compute_print_size(10, 8, 3, 2, 0.5)

        assert result.print_w == pytest.approx(9.0)
        assert result.print_h == pytest.approx(6.0)

    def test_zero_border_fills_matching_ratio(self):
        result = compute_print_size(8, 10, 4, 5, 0)

        assert result.print_w == pytest.approx(8.0)
        assert result.print_h == pytest.approx(10.0)

    @pytest.mark.parametrize(
        "paper_w, paper_h, ratio_w, ratio_h, min_border",
        [
            (8, 10, 3, 0, 0.5),
            (8, 10, 0, 2, 0.5),
            (8, 10, -3, 2, 0.5),
            (0, 10, 3, 2, 0.5),
            (8, -1, 3, 2, 0.5),
            (8, 10, 3, 2, -0.1),
            (8, 10, 3, 2, 4),
            (8, 10, 3, 2, 6),
        ],
    )
    def test_degenerate_input_gives_zero(self, paper_w, paper_h, ratio_w, ratio_h, min_border):
        result = compute_print_size(paper_w, paper_h, ratio_w, ratio_h, min_border)

        assert result == PrintSize(print_w=0, print_h=0)
        assert result.is_degenerate

    def test_ratio_and_border_preserved(self):
        """Output keeps the ratio and respects the border on both axes."""
        for paper_w, paper_h in ((8, 10), (10, 8), (11, 14), (20, 16), (3.875, 5.875)):
            for ratio_w, ratio_h in ((3, 2), (2, 3), (1, 1), (65, 24), (2.39, 1)):
                for min_border in (0, 0.25, 0.5, 1.0):
                    result = compute_print_size(paper_w, paper_h, ratio_w, ratio_h, min_border)

                    assert result.print_w / result.print_h == pytest.approx(ratio_w / ratio_h)
                    assert result.print_w <= paper_w - 2 * min_border + 1e-9
                    assert result.print_h <= paper_h - 2 * min_border + 1e-9


class TestFitRatio:
    def test_wide_area_binds_height(self):
        assert fit_ratio(10, 2, 2.0) == (4.0, 2)

    def test_tall_area_binds_width(self):
        assert fit_ratio(2, 10, 2.0) == (2, 1.0)


class TestBorderGaps:
    def test_centered_gaps(self):
        left, right, top, bottom = border_gaps(10, 8, 1.5, 0.5)

        assert left == right == pytest.approx(0.5)
        assert top == bottom == pytest.approx(1.0)

    def test_no_printable_area(self):
        assert border_gaps(8, 10, 1.5, 4) is None

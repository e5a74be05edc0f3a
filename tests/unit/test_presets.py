"""Tests for paper and aspect ratio presets."""

from darkroom_easel.calculator.presets import (
    ASPECT_RATIO_MAP,
    ASPECT_RATIOS,
    DEFAULT_BORDER_PRESETS,
    FALLBACK_PAPER,
    FALLBACK_RATIO,
    PAPER_SIZE_MAP,
    PAPER_SIZES,
    border_slider_labels,
    get_aspect_ratio,
    get_paper_size,
)
from darkroom_easel.easel import DEFAULT_CATALOG


class TestPresets:
    def test_values_are_unique(self):
        assert len(PAPER_SIZE_MAP) == len(PAPER_SIZES)
        assert len(ASPECT_RATIO_MAP) == len(ASPECT_RATIOS)

    def test_special_entries_present(self):
        assert "custom" in PAPER_SIZE_MAP
        assert "custom" in ASPECT_RATIO_MAP
        assert ASPECT_RATIO_MAP["even-borders"].width is None

    def test_standard_papers_match_catalog(self):
        """Every named paper except the postcard has its own easel."""
        for paper in PAPER_SIZES:
            if paper.value in ("custom", "3.875x5.875"):
                continue
            assert DEFAULT_CATALOG.is_exact_match(paper.width, paper.height), paper.value

    def test_lookup(self):
        assert get_paper_size("11x14").width == 11
        assert get_aspect_ratio("65:24").height == 24

    def test_unknown_values_fall_back(self):
        assert get_paper_size("A4") == FALLBACK_PAPER
        assert get_aspect_ratio("9:7") == FALLBACK_RATIO

    def test_default_preset(self):
        preset = DEFAULT_BORDER_PRESETS[0]

        assert preset.settings.paper_size == "8x10"
        assert preset.settings.aspect_ratio == "3:2"
        assert preset.settings.is_landscape is True


class TestBorderSliderLabels:
    def test_quarters(self):
        assert border_slider_labels(6) == ["0", "1.5", "3", "4.5", "6"]

    def test_whole_numbers(self):
        assert border_slider_labels(4) == ["0", "1", "2", "3", "4"]

    def test_fractional(self):
        assert border_slider_labels(1) == ["0", "0.3", "0.5", "0.8", "1"]

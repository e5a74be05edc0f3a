"""
Paper size and aspect ratio presets for the border calculator.
"""

from darkroom_easel.core.models import AspectRatio, BorderPreset, BorderSettings, PaperSize
from darkroom_easel.geometry.precision import round_to_precision

# Border slider
SLIDER_MIN_BORDER = 0.0
SLIDER_MAX_BORDER = 6.0
SLIDER_STEP_BORDER = 0.125

# Offset sliders
OFFSET_SLIDER_MIN = -3.0
OFFSET_SLIDER_MAX = 3.0
OFFSET_SLIDER_STEP = 0.125

# Defaults for custom entries
DEFAULT_MIN_BORDER = 0.5
DEFAULT_CUSTOM_PAPER_WIDTH = 13.0
DEFAULT_CUSTOM_PAPER_HEIGHT = 10.0
DEFAULT_CUSTOM_ASPECT_WIDTH = 2.0
DEFAULT_CUSTOM_ASPECT_HEIGHT = 3.0

# Used when a selector value is unknown
FALLBACK_PAPER = PaperSize(label="8x10", value="8x10", width=8, height=10)
FALLBACK_RATIO = AspectRatio(label="3:2", value="3:2", width=3, height=2)

ASPECT_RATIOS: tuple[AspectRatio, ...] = (
    AspectRatio(label="35mm standard frame, 6x9 (3:2)", value="3:2", width=3, height=2),
    AspectRatio(label="Even borders (match paper)", value="even-borders"),
    AspectRatio(label="XPan Pano (65:24)", value="65:24", width=65, height=24),
    AspectRatio(label="6x4.5/6x8/35mm Half Frame (4:3)", value="4:3", width=4, height=3),
    AspectRatio(label="6x6/Square (1:1)", value="1:1", width=1, height=1),
    AspectRatio(label="6x7", value="7:6", width=7, height=6),
    AspectRatio(label="4x5", value="5:4", width=5, height=4),
    AspectRatio(label="5x7", value="7:5", width=7, height=5),
    AspectRatio(label="HDTV (16:9)", value="16:9", width=16, height=9),
    AspectRatio(label="Academy Ratio (1.37:1)", value="1.37:1", width=1.37, height=1),
    AspectRatio(label="Widescreen (1.85:1)", value="1.85:1", width=1.85, height=1),
    AspectRatio(label="Univisium (2:1)", value="2:1", width=2, height=1),
    AspectRatio(label="CinemaScope (2.39:1)", value="2.39:1", width=2.39, height=1),
    AspectRatio(label="Ultra Panavision (2.76:1)", value="2.76:1", width=2.76, height=1),
    AspectRatio(label="Custom Ratio", value="custom", width=0, height=0),
)

PAPER_SIZES: tuple[PaperSize, ...] = (
    PaperSize(label="5x7", value="5x7", width=5, height=7),
    PaperSize(label="3⅞x5⅞ (postcard)", value="3.875x5.875", width=3.875, height=5.875),
    PaperSize(label="8x10", value="8x10", width=8, height=10),
    PaperSize(label="11x14", value="11x14", width=11, height=14),
    PaperSize(label="16x20", value="16x20", width=16, height=20),
    PaperSize(label="20x24", value="20x24", width=20, height=24),
    PaperSize(label="Custom Paper Size", value="custom", width=0, height=0),
)

PAPER_SIZE_MAP: dict[str, PaperSize] = {p.value: p for p in PAPER_SIZES}
ASPECT_RATIO_MAP: dict[str, AspectRatio] = {r.value: r for r in ASPECT_RATIOS}

DEFAULT_BORDER_PRESETS: tuple[BorderPreset, ...] = (
    BorderPreset(
        id="default-8x10",
        name="35mm on 8x10, 6x9in",
        settings=BorderSettings(
            aspect_ratio="3:2",
            paper_size="8x10",
            min_border=0.5,
            is_landscape=True,
        ),
    ),
)


def get_paper_size(value: str) -> PaperSize:
    """Look up a paper preset, falling back to 8x10."""
    return PAPER_SIZE_MAP.get(value, FALLBACK_PAPER)


def get_aspect_ratio(value: str) -> AspectRatio:
    """Look up an aspect ratio preset, falling back to 3:2."""
    return ASPECT_RATIO_MAP.get(value, FALLBACK_RATIO)


def border_slider_labels(max_border: float) -> list[str]:
    """Five evenly spaced slider labels from 0 to ``max_border``.

    Example:
        >>> border_slider_labels(6)
        ['0', '1.5', '3', '4.5', '6']
    """
    step = max_border / 4
    labels = []
    for value in (0, step, step * 2, step * 3, max_border):
        if value == 0:
            labels.append("0")
        else:
            text = f"{round_to_precision(value, 1):.1f}"
            labels.append(text[:-2] if text.endswith(".0") else text)
    return labels

"""Blade thickness scaled to paper area."""

import math
from typing import Optional

from darkroom_easel.config import PaperSettings, get_settings
from darkroom_easel.geometry.precision import round_half_up


def blade_thickness(
    paper_w: float, paper_h: float, settings: Optional[PaperSettings] = None
) -> int:
    """Blade thickness for a paper, thicker for smaller sheets.

    The scale is ``base_paper_area / paper_area`` capped at
    ``max_scale_factor``, so a 20x24 sheet gets the base thickness and small
    sheets at most twice that. Non-positive or non-finite dimensions return
    the base thickness unchanged.
    """
    settings = settings or get_settings().paper
    # NaN fails both comparisons
    if not (0 < paper_w < math.inf and 0 < paper_h < math.inf):
        return settings.blade_thickness

    area = paper_w * paper_h
    scale = min(settings.base_paper_area / max(area, settings.epsilon), settings.max_scale_factor)
    return int(round_half_up(settings.blade_thickness * scale))

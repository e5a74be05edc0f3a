"""
Fit a sheet of paper onto the easel catalog.

An exact catalog match resolves directly. Anything else is a non-standard
paper size that needs masking: the smallest-waste easel that can hold it (as
is or rotated) is chosen, and paper too large for every easel falls back to
an easel the size of the paper itself.
"""

from typing import Optional

from darkroom_easel.core.logging import get_logger
from darkroom_easel.core.models import FitResult, Size
from darkroom_easel.easel.catalog import DEFAULT_CATALOG, EaselCatalog

logger = get_logger(__name__)


def resolve_fit(
    paper_width: float,
    paper_height: float,
    is_landscape: bool,
    catalog: Optional[EaselCatalog] = None,
) -> FitResult:
    """Find the best easel for a paper size.

    Args:
        paper_width: Paper width as entered (portrait).
        paper_height: Paper height as entered (portrait).
        is_landscape: Whether the paper lies landscape on the easel.
        catalog: Easel catalog to search. Defaults to the standard easels.

    Returns:
        FitResult whose ``effective_slot`` is at least the oriented paper on
        both axes.
    """
    catalog = catalog or DEFAULT_CATALOG
    paper = Size(width=paper_width, height=paper_height).oriented(is_landscape)

    easel = catalog.find_exact(paper.width, paper.height)
    if easel is not None:
        return FitResult(
            easel_size=easel.size,
            effective_slot=paper,
            is_non_standard_paper_size=False,
        )

    best_easel = None
    best_slot = None
    min_waste = float("inf")

    for candidate in catalog.by_area:
        fits = candidate.size.contains(paper)
        fits_rotated = candidate.size.rotated().contains(paper)
        if not fits and not fits_rotated:
            continue

        waste = candidate.area - paper.area
        if waste < min_waste:
            min_waste = waste
            best_easel = candidate
            best_slot = candidate.size if fits else candidate.size.rotated()
            if waste == 0:
                break

    if best_easel is None:
        logger.debug(f"Paper {paper} exceeds every easel; using the paper as its own easel")
        return FitResult(
            easel_size=paper,
            effective_slot=paper,
            is_non_standard_paper_size=True,
        )

    return FitResult(
        easel_size=best_easel.size,
        effective_slot=best_slot,
        is_non_standard_paper_size=True,
    )

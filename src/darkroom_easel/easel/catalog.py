"""
Catalog of standard enlarging easels.

The catalog is built once from a fixed list and precomputes the two lookups
the fit resolver needs: an exact-match set holding every easel in both
orientations, and the easels sorted by ascending area for the best-fit scan.
"""

from typing import Iterable, Optional

from darkroom_easel.core.models import EaselSize, Size

# Standard easels, stored landscape (width > height)
STANDARD_EASEL_SIZES: tuple[EaselSize, ...] = (
    EaselSize(label="5x7", width=7, height=5),
    EaselSize(label="8x10", width=10, height=8),
    EaselSize(label="11x14", width=14, height=11),
    EaselSize(label="16x20", width=20, height=16),
    EaselSize(label="20x24", width=24, height=20),
)


class EaselCatalog:
    """Immutable collection of easels with precomputed lookups."""

    def __init__(self, easels: Iterable[EaselSize]):
        self._easels: tuple[EaselSize, ...] = tuple(easels)

        self._exact: dict[tuple[float, float], EaselSize] = {}
        for easel in self._easels:
            self._exact.setdefault((easel.width, easel.height), easel)
            self._exact.setdefault((easel.height, easel.width), easel)

        # sorted() is stable, so equal areas keep catalog order
        self._by_area: tuple[EaselSize, ...] = tuple(sorted(self._easels, key=lambda e: e.area))

    @property
    def easels(self) -> tuple[EaselSize, ...]:
        return self._easels

    @property
    def by_area(self) -> tuple[EaselSize, ...]:
        """Easels sorted by ascending area."""
        return self._by_area

    @property
    def exact_keys(self) -> frozenset[tuple[float, float]]:
        """All ``(width, height)`` pairs that match an easel exactly."""
        return frozenset(self._exact)

    @property
    def max_dimension(self) -> float:
        """Longest side of any easel, 0 for an empty catalog."""
        return max((max(e.width, e.height) for e in self._easels), default=0.0)

    def is_exact_match(self, width: float, height: float) -> bool:
        return (width, height) in self._exact

    def find_exact(self, width: float, height: float) -> Optional[EaselSize]:
        """Return the easel matching ``width x height`` in either orientation."""
        return self._exact.get((width, height))

    def label_for(self, size: Size) -> str:
        """Catalog label for an easel size, or a ``WxH`` description."""
        easel = self.find_exact(size.width, size.height)
        if easel is not None:
            return easel.label
        return str(size)

    def __len__(self) -> int:
        return len(self._easels)

    def __iter__(self):
        return iter(self._easels)

    def __repr__(self) -> str:
        labels = ", ".join(e.label for e in self._easels)
        return f"EaselCatalog([{labels}])"


DEFAULT_CATALOG = EaselCatalog(STANDARD_EASEL_SIZES)

"""
Shared fixtures for darkroom easel tests.
"""

import pytest

from darkroom_easel.config import Settings, configure
from darkroom_easel.core.models import BorderSettings
from darkroom_easel.easel.cache import reset_fit_cache
from darkroom_easel.easel.catalog import EaselCatalog
from darkroom_easel.core.models import EaselSize


@pytest.fixture(autouse=True)
def isolated_settings():
    """Give every test fresh global settings and a fresh default fit cache."""
    settings = configure(Settings())
    reset_fit_cache()
    yield settings
    configure(Settings())
    reset_fit_cache()


@pytest.fixture
def portrait_8x10_settings():
    """8x10 portrait paper with a 3:2 image and half-inch border."""
    return BorderSettings(
        paper_size="8x10",
        aspect_ratio="3:2",
        min_border=0.5,
        is_landscape=False,
    )


@pytest.fixture
def landscape_8x10_settings():
    """The default preset: 35mm on 8x10 landscape."""
    return BorderSettings(
        paper_size="8x10",
        aspect_ratio="3:2",
        min_border=0.5,
        is_landscape=True,
    )


@pytest.fixture
def equal_area_catalog():
    """Two easels with the same area, in a known order."""
    return EaselCatalog(
        [
            EaselSize(label="9x12", width=12, height=9),
            EaselSize(label="6x18", width=18, height=6),
        ]
    )

"""Pytest configuration and shared fixtures."""

import pytest

from servinglabel.config import get_settings

# =============================================================================
# Settings
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make each test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Food Label Fixtures
# =============================================================================


@pytest.fixture
def branded_label_record():
    """Sample branded food record as returned by the nutrition database."""
    return {
        "fdcId": 1105904,
        "description": "WHOLE GRAIN RICE",
        "dataType": "Branded",
        "brandOwner": "Example Foods Inc.",
        "householdServingFullText": "1/4 cup (45 g)",
        "servingSize": 45.0,
        "servingSizeUnit": "g",
        "ingredients": "WHOLE GRAIN BROWN RICE.",
    }


@pytest.fixture
def popcorn_label_record():
    """Branded record whose serving text carries a nominal unit."""
    return {
        "fdcId": 2034567,
        "description": "MICROWAVE POPCORN",
        "householdServingFullText": "about 1 package",
        "servingSize": 23.0,
        "servingSizeUnit": "GRM",
    }


@pytest.fixture
def garbled_label_record():
    """Branded record whose serving text is not a quantity."""
    return {
        "fdcId": 3000001,
        "description": "MYSTERY SNACK",
        "householdServingFullText": "ONE HANDFUL",
        "servingSize": 30.0,
        "servingSizeUnit": "MLT",
    }

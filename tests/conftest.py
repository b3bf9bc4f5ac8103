import pytest

from catalog import CatalogClient
from config import API_KEY_SENTINEL


@pytest.fixture
def fallback_log() -> list:
    """Collects (operation, error) pairs reported by the catalog's fallback hook."""
    return []


@pytest.fixture
def offline_catalog(fallback_log) -> CatalogClient:
    return CatalogClient(
        API_KEY_SENTINEL,
        on_fallback=lambda operation, error: fallback_log.append((operation, error)),
    )


@pytest.fixture
def live_catalog(fallback_log) -> CatalogClient:
    return CatalogClient(
        "fake_key",
        on_fallback=lambda operation, error: fallback_log.append((operation, error)),
    )

"""Shared fixtures for the scrubbing test suite."""

import pytest

from scrubbing.engine.cache import PatternCache
from scrubbing.engine.scrub import Scrub


@pytest.fixture(autouse=True)
def restore_pattern_cache():
    """Keep capacity changes made by one test out of the next."""
    cache = PatternCache.get_instance()
    capacity = cache.capacity
    yield cache
    cache.capacity = capacity
    cache.reset()


@pytest.fixture
def empty_scrub():
    return Scrub("")


@pytest.fixture
def sentence():
    return (
        "żˇSeńor, the Chevrolet guys don't like     Dodge     guys, "
        "and and no one like MaZdA, Ola Senor?!    "
    )

# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - store            → empty insertion-ordered store
# - sorted_store     → empty store ordered case-insensitively
# - quiet_store      → empty store with the date comment suppressed
# - populate         → helper that sets b=222, c=333, a=111 in that order
# - clean_config     → isolated environment + fresh config singleton
#
# ==============================================

import pytest

from ordered_properties import OrderedStore, StoreBuilder
from ordered_properties import config

CONFIG_VARIABLES = (
    "ORDERED_PROPERTIES_XML_ENCODING",
    "ORDERED_PROPERTIES_STREAM_ENCODING",
    "ORDERED_PROPERTIES_LIST_VALUE_WIDTH",
)

SAMPLE_ENTRIES = [("b", "222"), ("c", "333"), ("a", "111")]


@pytest.fixture
def store():
    """Default store: insertion order, date comment shown."""
    return OrderedStore()


@pytest.fixture
def sorted_store():
    """Store ordered by lowercased key."""
    return StoreBuilder().with_ordering(str.lower).build()


@pytest.fixture
def quiet_store():
    """Insertion-ordered store that leaves out the date comment."""
    return StoreBuilder().with_suppress_date_in_comment(True).build()


@pytest.fixture
def populate():
    """Return a function that fills a store with the sample entries."""
    def _populate(target):
        for key, value in SAMPLE_ENTRIES:
            target.set_property(key, value)
        return target
    return _populate


@pytest.fixture
def clean_config(monkeypatch, tmp_path):
    """
    Run with no ORDERED_PROPERTIES_* variables set, no .env file in
    reach, and a config singleton that is re-read on first use.
    """
    for name in CONFIG_VARIABLES:
        # setenv first so that the deletion is undone at teardown, even
        # when load_dotenv() sets the variable during the test
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    config.reset_config()
    yield tmp_path
    config.reset_config()

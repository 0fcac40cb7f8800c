# ==============================================
# Tests for StoreBuilder
# ==============================================

import functools

from ordered_properties import OrderedStore, StoreBuilder


def reverse_compare(a, b):
    return (a < b) - (a > b)


class TestStoreBuilder:
    """Configuration of ordering and date suppression."""

    def test_defaults_match_plain_constructor(self):
        built = StoreBuilder().build()
        assert isinstance(built, OrderedStore)
        assert built.ordering is None
        assert built.suppress_date is False

    def test_with_ordering(self):
        built = StoreBuilder().with_ordering(str.lower).build()
        for key in ("b", "C", "a"):
            built.set_property(key, key)
        assert built.property_names() == ["a", "b", "C"]

    def test_with_comparator_via_cmp_to_key(self):
        built = StoreBuilder().with_ordering(functools.cmp_to_key(reverse_compare)).build()
        for key in ("b", "c", "a"):
            built.set_property(key, key)
        assert built.property_names() == ["c", "b", "a"]

    def test_ordering_none_restores_insertion_order(self):
        built = StoreBuilder().with_ordering(str.lower).with_ordering(None).build()
        for key in ("b", "c", "a"):
            built.set_property(key, key)
        assert built.property_names() == ["b", "c", "a"]

    def test_with_suppress_date(self):
        assert StoreBuilder().with_suppress_date_in_comment(True).build().suppress_date
        assert StoreBuilder().with_suppress_date_in_comment().build().suppress_date
        assert not StoreBuilder().with_suppress_date_in_comment(False).build().suppress_date

    def test_each_build_is_independent(self):
        builder = StoreBuilder().with_ordering(str.lower)
        first = builder.build()
        second = builder.build()
        first.set_property("a", "1")
        assert second.is_empty()
        assert first.ordering is second.ordering

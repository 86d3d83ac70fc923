"""
Tests for the generic Registry

Covers registration, lookup, ordering, both duplicate policies and freezing.
"""

import pytest

from pageflow.exceptions import ConfigurationSealedError, DuplicateRegistrationError, NotFoundError
from pageflow.registry import DuplicatePolicy, Registry


class TestRegistration:
    def test_register_then_lookup_returns_payload(self):
        registry = Registry("widget")
        payload = object()

        registry.register("nav", payload)

        assert registry.lookup("nav") is payload

    def test_register_returns_payload(self):
        registry = Registry("widget")
        assert registry.register("nav", "payload") == "payload"

    def test_contains_and_len(self):
        registry = Registry("widget")
        registry.register("a", 1)
        registry.register("b", 2)

        assert "a" in registry
        assert "c" not in registry
        assert len(registry) == 2

    def test_get_returns_default_for_unknown(self):
        registry = Registry("widget")
        assert registry.get("missing") is None
        assert registry.get("missing", 5) == 5


class TestLookup:
    def test_lookup_unknown_name_raises_not_found(self):
        registry = Registry("theme")

        with pytest.raises(NotFoundError) as exc_info:
            registry.lookup("rainbow")

        assert exc_info.value.registry == "theme"
        assert exc_info.value.name == "rainbow"
        assert "rainbow" in str(exc_info.value)

    def test_not_found_is_a_lookup_error(self):
        registry = Registry("theme")

        with pytest.raises(LookupError):
            registry.lookup("rainbow")


class TestAll:
    def test_all_yields_entries_in_registration_order(self):
        registry = Registry("widget")
        for index, name in enumerate(["c", "a", "b"]):
            registry.register(name, index)

        assert list(registry.all()) == [0, 1, 2]

    def test_all_is_restartable(self):
        registry = Registry("widget")
        registry.register("a", 1)
        registry.register("b", 2)

        entries = registry.all()

        assert list(entries) == list(entries) == [1, 2]

    def test_all_is_lazy(self):
        registry = Registry("widget")
        entries = registry.all()

        registry.register("late", 1)

        assert list(entries) == [1]

    def test_names_in_registration_order(self):
        registry = Registry("widget")
        registry.register("b", 1)
        registry.register("a", 2)

        assert registry.names() == ["b", "a"]


class TestDuplicatePolicy:
    def test_reject_policy_raises_on_duplicate(self):
        registry = Registry("page type", policy=DuplicatePolicy.REJECT)
        registry.register("video", 1)

        with pytest.raises(DuplicateRegistrationError) as exc_info:
            registry.register("video", 2)

        assert exc_info.value.name == "video"

    def test_reject_policy_keeps_first_payload(self):
        registry = Registry("page type", policy=DuplicatePolicy.REJECT)
        registry.register("video", 1)

        with pytest.raises(DuplicateRegistrationError):
            registry.register("video", 2)

        assert registry.lookup("video") == 1

    def test_reject_is_default_policy(self):
        assert Registry("anything").policy is DuplicatePolicy.REJECT

    def test_replace_policy_last_write_wins(self):
        registry = Registry("theme", policy=DuplicatePolicy.REPLACE)
        registry.register("default", 1)
        registry.register("default", 2)

        assert registry.lookup("default") == 2
        assert len(registry) == 1

    def test_replace_keeps_original_position(self):
        registry = Registry("theme", policy=DuplicatePolicy.REPLACE)
        registry.register("a", 1)
        registry.register("b", 2)
        registry.register("a", 3)

        assert list(registry.all()) == [3, 2]


class TestFreeze:
    def test_register_after_freeze_raises(self):
        registry = Registry("theme")
        registry.freeze()

        with pytest.raises(ConfigurationSealedError):
            registry.register("late", 1)

    def test_lookup_still_works_after_freeze(self):
        registry = Registry("theme")
        registry.register("default", 1)
        registry.freeze()

        assert registry.frozen
        assert registry.lookup("default") == 1

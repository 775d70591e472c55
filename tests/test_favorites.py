"""Tests for the session favorites tracker."""

from services.favorites import FavoritesRegistry, FavoritesTracker


class TestFavoritesTracker:
    def test_toggle_adds_then_removes(self) -> None:
        tracker = FavoritesTracker()
        assert tracker.toggle("1") is True
        assert tracker.is_favorited("1")
        assert tracker.toggle("1") is False
        assert not tracker.is_favorited("1")

    def test_double_toggle_restores_state(self) -> None:
        tracker = FavoritesTracker(["2", "5"])
        before = tracker.ids()
        tracker.toggle("3")
        tracker.toggle("3")
        tracker.toggle("5")
        tracker.toggle("5")
        assert sorted(tracker.ids()) == sorted(before)

    def test_insertion_order(self) -> None:
        tracker = FavoritesTracker()
        for property_id in ("b", "a", "c"):
            tracker.toggle(property_id)
        assert tracker.ids() == ["b", "a", "c"]
        assert len(tracker) == 3
        assert "a" in tracker

    def test_clear(self) -> None:
        tracker = FavoritesTracker(["1"])
        tracker.clear()
        assert tracker.ids() == []

    def test_is_favorited_is_pure(self) -> None:
        tracker = FavoritesTracker()
        assert not tracker.is_favorited("9")
        assert tracker.ids() == []


class TestFavoritesRegistry:
    def test_sessions_are_isolated(self) -> None:
        registry = FavoritesRegistry()
        registry.for_session("alice").toggle("1")
        assert registry.for_session("alice").is_favorited("1")
        assert not registry.for_session("bob").is_favorited("1")

    def test_end_session(self) -> None:
        registry = FavoritesRegistry()
        registry.for_session("alice").toggle("1")
        registry.end_session("alice")
        assert registry.for_session("alice").ids() == []

    def test_get_does_not_register(self) -> None:
        registry = FavoritesRegistry()
        assert registry.get("carol") is None
        assert len(registry) == 0
        registry.for_session("carol").toggle("2")
        assert registry.get("carol").ids() == ["2"]
        assert len(registry) == 1

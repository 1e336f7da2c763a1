"""Unit tests for favorites."""
import pytest

from app.services.store.data_manager import FAVORITES_GROUP
from app.services.store.errors import ItemNotFoundError


class TestFavorites:
    """Test toggle_favorite and get_favorite_items."""

    def test_toggle_on_and_off(self, data_manager):
        data_manager.toggle_favorite(1)
        assert [item.id for item in data_manager.get_favorite_items()] == [1]
        assert data_manager.get_item(1).is_favorite is True

        data_manager.toggle_favorite(1)
        assert data_manager.get_favorite_items() == []
        assert data_manager.get_item(1).is_favorite is False

    def test_catalog_order(self, data_manager):
        data_manager.toggle_favorite(3)
        data_manager.toggle_favorite(1)

        assert [item.id for item in data_manager.get_favorite_items()] == [1, 3]

    def test_unknown_id(self, data_manager, recorder):
        data_manager.subscribe("favorites", recorder)

        with pytest.raises(ItemNotFoundError):
            data_manager.toggle_favorite(99)

        assert data_manager.get_favorite_items() == []
        assert len(recorder.calls) == 1

    def test_independent_of_favorites_group(self, data_manager, pizza):
        """Test the favorite flag and the Favorites group do not affect each other."""
        data_manager.toggle_favorite(2)
        assert data_manager.get_items_in_group(FAVORITES_GROUP) == []

        data_manager.add_to_group(pizza, FAVORITES_GROUP)
        assert [item.id for item in data_manager.get_favorite_items()] == [2]

    def test_group_entries_keep_flag_from_when_added(self, data_manager, pizza):
        data_manager.add_to_group(pizza, "Lunch")
        data_manager.toggle_favorite(1)

        assert data_manager.get_items_in_group("Lunch")[0].is_favorite is False

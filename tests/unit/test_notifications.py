"""Unit tests for change notification channels."""
import pytest

from app.services.notifications.channel import Channel, CurrentValueChannel
from app.services.store.data_manager import FAVORITES_GROUP
from app.services.store.errors import (
    GroupNotFoundError,
    InvalidGroupNameError,
    ProtectedGroupError,
)


class TestCurrentValueChannel:
    """Test the replay-latest channel."""

    def test_replays_current_value_on_subscribe(self, recorder):
        channel = CurrentValueChannel("test", 1)
        channel.publish(2)

        channel.subscribe(recorder)

        assert recorder.calls == [2]

    def test_delivers_in_publish_order(self, recorder):
        channel = CurrentValueChannel("test", 0)
        channel.subscribe(recorder)

        channel.publish(1)
        channel.publish(2)

        assert recorder.calls == [0, 1, 2]

    def test_publish_from_subscriber_is_queued(self, recorder):
        channel = CurrentValueChannel("test", 0)

        def bump(value):
            if value == 1:
                channel.publish(2)

        channel.subscribe(bump)
        channel.subscribe(recorder)
        channel.publish(1)

        assert recorder.calls == [0, 1, 2]

        late = []
        channel.subscribe(late.append)
        assert late == [2]

    def test_unsubscribe(self, recorder):
        channel = CurrentValueChannel("test", 0)
        subscription = channel.subscribe(recorder)

        subscription.unsubscribe()
        subscription.unsubscribe()
        channel.publish(1)

        assert recorder.calls == [0]
        assert subscription.active is False

    def test_failing_subscriber_does_not_block_others(self, recorder, caplog):
        channel = CurrentValueChannel("test", 0)

        def broken(value):
            if value:
                raise RuntimeError("boom")

        channel.subscribe(broken)
        channel.subscribe(recorder)
        channel.publish(1)

        assert recorder.calls == [0, 1]
        assert "Subscriber on 'test' failed" in caplog.text


class TestDataManagerChannels:
    """Test notifications raised by the data manager."""

    def test_initial_snapshots(self, data_manager):
        received = {}
        for channel in Channel:
            data_manager.subscribe(channel, lambda value, c=channel: received.setdefault(c, value))

        assert received[Channel.GROUPS] == {FAVORITES_GROUP: []}
        assert received[Channel.FAVORITES] == []
        assert received[Channel.ORDERS] == {}

    def test_groups_channel(self, data_manager, recorder, pizza):
        data_manager.subscribe(Channel.GROUPS, recorder)

        data_manager.create_empty_group("Dinner")
        data_manager.add_to_group(pizza, "Lunch", quantity=2)
        data_manager.rename_group("Dinner", "Supper")
        data_manager.remove_group("Supper")
        data_manager.remove_from_group(pizza, "Lunch")

        assert len(recorder.calls) == 6
        assert list(recorder.calls[1]) == [FAVORITES_GROUP, "Dinner"]
        assert [item.id for item in recorder.calls[2]["Lunch"]] == [1, 1]
        assert "Supper" in recorder.calls[3]
        assert recorder.last == {FAVORITES_GROUP: []}

    def test_snapshot_reflects_state_at_publish(self, data_manager, recorder, pizza):
        data_manager.subscribe(Channel.GROUPS, recorder)

        data_manager.add_to_group(pizza, "Lunch")
        data_manager.add_to_group(pizza, "Lunch")

        assert len(recorder.calls[1]["Lunch"]) == 1
        assert len(recorder.calls[2]["Lunch"]) == 2

    def test_snapshot_cannot_change_state(self, data_manager, recorder, pizza):
        data_manager.subscribe(Channel.GROUPS, recorder)
        data_manager.add_to_group(pizza, "Lunch")

        recorder.last["Lunch"].clear()
        recorder.last["Hacked"] = []

        assert len(data_manager.get_items_in_group("Lunch")) == 1
        assert "Hacked" not in data_manager.get_groups()

    def test_state_updated_before_notify(self, data_manager, pizza):
        seen = []
        data_manager.subscribe(
            Channel.GROUPS, lambda _: seen.append(data_manager.get_items_in_group("Lunch"))
        )

        data_manager.add_to_group(pizza, "Lunch")

        assert [item.id for item in seen[-1]] == [1]

    def test_rejected_operations_do_not_notify(self, data_manager, recorder, pizza):
        data_manager.subscribe(Channel.GROUPS, recorder)

        with pytest.raises(InvalidGroupNameError):
            data_manager.create_empty_group("")
        with pytest.raises(ProtectedGroupError):
            data_manager.remove_group(FAVORITES_GROUP)
        with pytest.raises(ProtectedGroupError):
            data_manager.rename_group(FAVORITES_GROUP, "Liked")
        with pytest.raises(GroupNotFoundError):
            data_manager.remove_from_group(pizza, "Nope")

        assert len(recorder.calls) == 1

    def test_change_made_by_subscriber_delivered_after_current(self, data_manager, recorder, pizza):
        """Test a subscriber that changes the groups does not leave later subscribers stale."""

        def add_sides(groups):
            if "Lunch" in groups and "Sides" not in groups:
                data_manager.create_empty_group("Sides")

        data_manager.subscribe(Channel.GROUPS, add_sides)
        data_manager.subscribe(Channel.GROUPS, recorder)

        data_manager.add_to_group(pizza, "Lunch")

        assert [list(snapshot) for snapshot in recorder.calls] == [
            [FAVORITES_GROUP],
            [FAVORITES_GROUP, "Lunch"],
            [FAVORITES_GROUP, "Lunch", "Sides"],
        ]
        assert recorder.last == {
            name: data_manager.get_items_in_group(name) for name in data_manager.get_groups()
        }

    def test_favorites_channel(self, data_manager, recorder):
        data_manager.subscribe(Channel.FAVORITES, recorder)

        data_manager.toggle_favorite(2)
        data_manager.toggle_favorite(1)
        data_manager.toggle_favorite(2)

        assert [[item.id for item in snapshot] for snapshot in recorder.calls] == [
            [],
            [2],
            [1, 2],
            [1],
        ]

    def test_orders_channel(self, data_manager, recorder, pizza):
        data_manager.subscribe(Channel.ORDERS, recorder)

        data_manager.place_order()
        data_manager.add_to_group(pizza, "Lunch")
        data_manager.place_order()

        assert len(recorder.calls) == 2
        assert list(recorder.last) == [1]
        assert [item.id for item in recorder.last[1]["Lunch"]] == [1]

    def test_place_order_notifies_orders_then_groups(self, data_manager, pizza):
        events = []
        data_manager.subscribe(Channel.ORDERS, lambda _: events.append("orders"))
        data_manager.subscribe(Channel.GROUPS, lambda _: events.append("groups"))
        data_manager.add_to_group(pizza, "Lunch")
        events.clear()

        data_manager.place_order()

        assert events == ["orders", "groups"]

    def test_late_subscriber_gets_latest(self, data_manager, recorder, pizza):
        data_manager.add_to_group(pizza, "Lunch")
        data_manager.place_order()

        data_manager.subscribe(Channel.ORDERS, recorder)

        assert len(recorder.calls) == 1
        assert list(recorder.last) == [1]

"""Tests for the observable Node base."""

import pytest

from corkboard.ids import new_id
from corkboard.model.card import Card
from corkboard.model.node import Node


def test_node_gets_fresh_id():
    assert Node().id != Node().id


def test_node_keeps_given_id():
    value = new_id()
    node = Node(id=value)
    assert node.id == value


def test_node_canonicalizes_given_id():
    value = new_id()
    assert Node(id=value.upper()).id == value


def test_node_rejects_non_uuid_id():
    with pytest.raises(ValueError):
        Node(id="fixed")


# --- Watchers ---


def test_watch_fires_on_emit():
    events = []
    node = Node()
    node.watch(lambda n, k, old, new: events.append((n, k, old, new)))
    node._emit("name", "a", "b")
    assert events == [(node, "name", "a", "b")]


def test_unwatch():
    events = []
    node = Node()
    unwatch = node.watch(lambda n, k, old, new: events.append(1))
    node._emit("name", "a", "b")
    unwatch()
    node._emit("name", "b", "c")
    assert len(events) == 1


def test_unwatch_twice_is_safe():
    node = Node()
    unwatch = node.watch(lambda n, k, old, new: None)
    unwatch()
    unwatch()
    assert node._watchers == []


def test_multiple_watchers():
    a_events = []
    b_events = []
    node = Node()
    node.watch(lambda n, k, old, new: a_events.append(1))
    node.watch(lambda n, k, old, new: b_events.append(1))
    node._emit("name", "a", "b")
    assert len(a_events) == 1
    assert len(b_events) == 1


def test_watcher_may_unwatch_itself():
    events = []
    node = Node()

    def once(n, k, old, new):
        events.append(1)
        unwatch()

    unwatch = node.watch(once)
    node._emit("name", "a", "b")
    node._emit("name", "b", "c")
    assert events == [1]


def test_version_increments():
    node = Node()
    assert node._version == 0
    node._emit("name", "a", "b")
    assert node._version == 1


# --- Relays ---


def test_adopt_relays_child_changes():
    events = []
    parent = Node()
    child = Card("x", list_id=parent.id)
    parent._adopt(child)
    parent.watch(lambda n, k, old, new: events.append((n, k, old, new)))
    child.set_content("y")
    assert events == [(child, "content", "x", "y")]


def test_adopt_twice_relays_once():
    events = []
    parent = Node()
    child = Card("x", list_id=parent.id)
    parent._adopt(child)
    parent._adopt(child)
    parent.watch(lambda n, k, old, new: events.append(1))
    child.set_content("y")
    assert len(events) == 1


def test_release_stops_relay():
    events = []
    parent = Node()
    child = Card("x", list_id=parent.id)
    parent._adopt(child)
    parent.watch(lambda n, k, old, new: events.append(1))
    parent._release(child)
    child.set_content("y")
    assert events == []
    assert parent._relays == {}


def test_release_unknown_child_is_noop():
    parent = Node()
    parent._release(Card("x", list_id=parent.id))
    assert parent._relays == {}


def test_suppressing_blocks_relay_only():
    events = []
    parent = Node()
    child = Card("x", list_id=parent.id)
    parent._adopt(child)
    parent.watch(lambda n, k, old, new: events.append(k))
    with parent._suppressing():
        child.set_content("y")
        parent._emit("name", "a", "b")
    child.set_content("z")
    assert events == ["name", "content"]


def test_suppressing_nests():
    events = []
    parent = Node()
    child = Card("x", list_id=parent.id)
    parent._adopt(child)
    parent.watch(lambda n, k, old, new: events.append(k))
    with parent._suppressing():
        with parent._suppressing():
            pass
        child.set_content("y")
    assert events == []

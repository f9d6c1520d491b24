import pytest

from meeple.game.bag import Bag


def test_add_until_full():
    bag = Bag()
    for kind in ("egg", "egg", "farmer", "firework", "blue-tile"):
        assert bag.add(kind)
    assert bag.is_full
    assert not bag.add("gold-token")
    assert bag.items() == ["egg", "egg", "farmer", "firework", "blue-tile"]


def test_remove_takes_leftmost_match():
    bag = Bag()
    for kind in ("egg", "farmer", "egg"):
        bag.add(kind)
    assert bag.remove("egg")
    assert bag.items() == ["farmer", "egg"]


def test_remove_absent_kind_is_noop():
    bag = Bag()
    bag.add("egg")
    assert not bag.remove("farmer")
    assert bag.items() == ["egg"]


def test_items_is_a_copy():
    bag = Bag()
    bag.add("egg")
    bag.items().append("farmer")
    assert len(bag) == 1
    assert "farmer" not in bag


def test_clear():
    bag = Bag(capacity=2)
    bag.add("egg")
    bag.clear()
    assert len(bag) == 0
    assert not bag.contains("egg")


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        Bag(capacity=0)

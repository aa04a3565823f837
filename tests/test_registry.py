import pytest

from conftest import make_dish, make_station
from kitchen import StationRegistry


@pytest.fixture
def registry():
    registry = StationRegistry()
    for name in ["A", "B", "C"]:
        registry.add_station(make_station(name))
    return registry


def test_add_station_appends_in_order(registry):
    assert registry.names() == ["A", "B", "C"]
    assert len(registry) == 3


def test_add_station_rejects_duplicate_names(registry):
    assert registry.add_station(make_station("B")) is False
    assert registry.names() == ["A", "B", "C"]


def test_remove_station(registry):
    assert registry.remove_station("B") is True
    assert registry.names() == ["A", "C"]
    assert registry.remove_station("B") is False


def test_find_station(registry):
    assert registry.find_station("C").name == "C"
    assert registry.find_station("c") is None
    assert registry.get_station_index("C") == 2
    assert registry.get_station_index("Z") == -1


def test_move_station_to_front(registry):
    assert registry.move_station_to_front("C") is True
    assert registry.names() == ["C", "A", "B"]


def test_move_front_station_is_a_no_op(registry):
    assert registry.move_station_to_front("A") is True
    assert registry.names() == ["A", "B", "C"]


def test_move_missing_station_fails(registry):
    assert registry.move_station_to_front("Z") is False
    assert registry.names() == ["A", "B", "C"]


def test_merge_stations_combines_dishes_and_stock():
    registry = StationRegistry()
    soup = make_dish("Soup", Onion=1)
    registry.add_station(make_station("X", dishes=[soup], Onion=2, Salt=1))
    registry.add_station(make_station("Y", dishes=[make_dish("Soup"), make_dish("Stew")], Onion=3, Beef=4))

    assert registry.merge_stations("X", "Y") is True

    merged = registry.find_station("X")
    assert [d.name for d in merged.get_dishes()] == ["Soup", "Soup", "Stew"]
    assert merged.get_dishes()[0] is soup
    assert merged.stock == {"Onion": 5, "Salt": 1, "Beef": 4}
    assert registry.names() == ["X"]


def test_merge_stations_requires_both(registry):
    assert registry.merge_stations("A", "Z") is False
    assert registry.merge_stations("Z", "A") is False
    assert registry.merge_stations("A", "A") is False
    assert registry.names() == ["A", "B", "C"]

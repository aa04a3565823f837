from conftest import make_station
from kitchen import Ingredient


def test_add_backup_ingredient_merges_by_name(manager):
    manager.add_backup_ingredient(Ingredient("Flour", 2))
    assert manager.add_backup_ingredient(Ingredient("Flour", 3)) is True
    manager.add_backup_ingredient(Ingredient("flour", 1))

    assert manager.get_backup_ingredients() == [Ingredient("Flour", 5), Ingredient("flour", 1)]


def test_add_backup_ingredients_replaces_pool(manager):
    manager.add_backup_ingredient(Ingredient("Flour", 2))

    assert manager.add_backup_ingredients([Ingredient("Eggs", 4), Ingredient("Milk", 0)]) is True

    assert manager.get_backup_ingredients() == [Ingredient("Eggs", 4)]


def test_add_backup_ingredients_merges_duplicates(manager):
    manager.add_backup_ingredients([Ingredient("Eggs", 4), Ingredient("Eggs", 2)])
    assert manager.get_backup_ingredients() == [Ingredient("Eggs", 6)]


def test_clear_backup_ingredients(manager):
    manager.add_backup_ingredients([Ingredient("Eggs", 4)])
    manager.clear_backup_ingredients()
    assert manager.get_backup_ingredients() == []


def test_replenish_moves_stock_to_station(manager):
    manager.add_station(make_station("Grill", Flour=1))
    manager.add_backup_ingredient(Ingredient("Flour", 5))

    assert manager.replenish_station_ingredient_from_backup("Grill", "Flour", 2) is True

    assert manager.find_station("Grill").get_quantity("Flour") == 3
    assert manager.backup.get_quantity("Flour") == 3


def test_replenish_removes_depleted_backup_entry(manager):
    manager.add_station(make_station("Grill"))
    manager.add_backup_ingredient(Ingredient("Flour", 2))

    assert manager.replenish_station_ingredient_from_backup("Grill", "Flour", 2) is True

    assert "Flour" not in manager.backup
    assert manager.get_backup_ingredients() == []


def test_replenish_failures_mutate_nothing(manager):
    manager.add_station(make_station("Grill", Flour=1))
    manager.add_backup_ingredient(Ingredient("Flour", 1))

    assert manager.replenish_station_ingredient_from_backup("Grill", "Flour", 2) is False
    assert manager.replenish_station_ingredient_from_backup("Grill", "Sugar", 1) is False
    assert manager.replenish_station_ingredient_from_backup("Oven", "Flour", 1) is False
    assert manager.replenish_station_ingredient_from_backup("Grill", "Flour", -1) is False

    assert manager.find_station("Grill").stock == {"Flour": 1}
    assert manager.get_backup_ingredients() == [Ingredient("Flour", 1)]

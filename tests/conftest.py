"""
Pytest configuration and shared fixtures for the station manager tests.
"""
import pytest

import config
from config import Settings
from kitchen import Dish, Ingredient, KitchenStation, StationManager


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep environment overrides and cached settings out of each test."""
    for var in ("KITCHEN_EAGER_REPLENISHMENT", "KITCHEN_DEFAULT_LAYOUT", "LOG_LEVEL", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def manager(settings):
    return StationManager(settings=settings)


def make_dish(name, **ingredients):
    """Dish needing ``ingredients`` given as name=quantity keywords."""
    return Dish(name=name, ingredients=[Ingredient(n, q) for n, q in ingredients.items()])


def make_station(name, dishes=(), **stock):
    return KitchenStation.with_stock(
        name,
        ingredients=[Ingredient(n, q) for n, q in stock.items()],
        dishes=dishes
    )


@pytest.fixture
def flour_kitchen(manager):
    """Grill knows DishA (2 Flour) but holds no Flour; queue is [DishA, DishB]."""
    grill = make_station("Grill", dishes=[make_dish("DishA", Flour=2)], Flour=0)
    manager.add_station(grill)
    manager.add_dish_to_queue(make_dish("DishA", Flour=2))
    manager.add_dish_to_queue(make_dish("DishB", Eggs=1))
    return manager

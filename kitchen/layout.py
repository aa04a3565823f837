"""
Kitchen layout files: stations, menu, backup stock and orders described in YAML.
"""

from typing import Dict, List, Optional
from pathlib import Path
import logging

import yaml
from pydantic import BaseModel, Field, NonNegativeInt

from config import Settings
from kitchen_types import DishType, CuisineType, DietaryRestriction
from metrics.collector import MetricsCollector
from .manager import StationManager
from .models import Dish, DietaryRequest, Ingredient
from .station import KitchenStation

logger = logging.getLogger(__name__)


class DishSpec(BaseModel):
    name: str = Field(..., description="Dish name")
    dish_type: DishType = Field(default=DishType.MAIN_COURSE, description="Menu course")
    cuisine: CuisineType = Field(default=CuisineType.OTHER, description="Cuisine")
    prep_time: NonNegativeInt = Field(default=0, description="Preparation time in minutes")
    price: float = Field(default=0.0, description="Menu price")
    ingredients: Dict[str, NonNegativeInt] = Field(default={}, description="Required ingredients")

    def to_dish(self) -> Dish:
        return Dish(
            name=self.name,
            ingredients=[Ingredient(name, qty) for name, qty in self.ingredients.items()],
            dish_type=self.dish_type,
            cuisine=self.cuisine,
            prep_time=self.prep_time,
            price=self.price
        )


class StationSpec(BaseModel):
    name: str = Field(..., description="Station name")
    stock: Dict[str, NonNegativeInt] = Field(default={}, description="Initial ingredient stock")
    dishes: List[str] = Field(default=[], description="Menu dishes this station prepares")


class OrderSpec(BaseModel):
    dish: str = Field(..., description="Menu dish name")
    dietary: List[DietaryRestriction] = Field(default=[], description="Dietary accommodations")


class KitchenLayout(BaseModel):
    menu: List[DishSpec] = Field(default=[], description="Known dishes")
    stations: List[StationSpec] = Field(default=[], description="Stations in attempt order")
    backup_ingredients: Dict[str, NonNegativeInt] = Field(default={}, description="Shared backup stock")
    orders: List[OrderSpec] = Field(default=[], description="Dish queue in order")

    def find_dish(self, name: str) -> DishSpec:
        for spec in self.menu:
            if spec.name == name:
                return spec
        raise ValueError(f"Dish not on the menu: {name}")


def load_layout(path: Path) -> KitchenLayout:
    """Parse and validate a layout YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    layout = KitchenLayout(**data)
    logger.info(
        f"Loaded layout {path}: {len(layout.stations)} stations, "
        f"{len(layout.menu)} dishes, {len(layout.orders)} orders"
    )
    return layout


def build_manager(
    layout: KitchenLayout,
    settings: Optional[Settings] = None,
    collector: Optional[MetricsCollector] = None
) -> StationManager:
    """Create a station manager populated from ``layout``.

    Every station and every order gets its own dish instance.
    """
    manager = StationManager(settings=settings, collector=collector)

    for spec in layout.stations:
        station = KitchenStation.with_stock(
            spec.name,
            ingredients=[Ingredient(name, qty) for name, qty in spec.stock.items()],
            dishes=[layout.find_dish(dish_name).to_dish() for dish_name in spec.dishes]
        )
        if not manager.add_station(station):
            raise ValueError(f"Duplicate station in layout: {spec.name}")

    manager.add_backup_ingredients(
        [Ingredient(name, qty) for name, qty in layout.backup_ingredients.items()]
    )

    for order in layout.orders:
        dish = layout.find_dish(order.dish).to_dish()
        request = None
        if order.dietary:
            request = DietaryRequest.from_names([r.value for r in order.dietary])
        manager.add_dish_to_queue(dish, request)

    return manager

"""
Kitchen stations: a local ingredient stock plus the dishes a station knows.
"""

from typing import Dict, List, Optional, Any, Iterable
from dataclasses import dataclass, field
import logging

from .models import Dish, Ingredient

logger = logging.getLogger(__name__)


@dataclass
class KitchenStation:
    """A workstation holding an ingredient stock and a set of known dishes."""
    name: str
    dishes: List[Dish] = field(default_factory=list)
    stock: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def with_stock(
        cls,
        name: str,
        ingredients: Iterable[Ingredient] = (),
        dishes: Iterable[Dish] = ()
    ) -> "KitchenStation":
        station = cls(name=name)
        for ingredient in ingredients:
            station.replenish_station_ingredients(ingredient)
        for dish in dishes:
            station.assign_dish_to_station(dish)
        return station

    def get_name(self) -> str:
        return self.name

    def get_dishes(self) -> List[Dish]:
        return list(self.dishes)

    def get_ingredients_stock(self) -> List[Ingredient]:
        return [Ingredient(name, quantity) for name, quantity in self.stock.items()]

    def get_quantity(self, ingredient_name: str) -> int:
        return self.stock.get(ingredient_name, 0)

    def assign_dish_to_station(self, dish: Optional[Dish]) -> bool:
        """Add a dish to the station's repertoire. Duplicates are kept."""
        if dish is None:
            return False
        self.dishes.append(dish)
        return True

    def replenish_station_ingredients(self, ingredient: Ingredient) -> None:
        """Add to the stock, summing onto an existing entry of the same name."""
        self.stock[ingredient.name] = self.stock.get(ingredient.name, 0) + ingredient.quantity

    def find_dish(self, dish_name: str) -> Optional[Dish]:
        for dish in self.dishes:
            if dish.name == dish_name:
                return dish
        return None

    def can_prepare(self, dish: Dish) -> bool:
        """Whether the station knows the dish, regardless of current stock."""
        return self.find_dish(dish.name) is not None

    def can_complete_order(self, dish_name: str) -> bool:
        """Whether the station knows the dish and its stock covers it right now."""
        dish = self.find_dish(dish_name)
        if dish is None:
            return False
        return all(
            self.stock.get(name, 0) >= quantity
            for name, quantity in dish.required_quantities().items()
        )

    def prepare_dish(self, dish_name: str) -> bool:
        """Consume the ingredients for one portion of ``dish_name``.

        Nothing is deducted unless every required quantity is available.
        Stock entries that reach zero are removed.
        """
        if not self.can_complete_order(dish_name):
            return False

        dish = self.find_dish(dish_name)
        for name, quantity in dish.required_quantities().items():
            if quantity == 0:
                continue
            remaining = self.stock[name] - quantity
            if remaining == 0:
                del self.stock[name]
            else:
                self.stock[name] = remaining

        logger.debug(f"{self.name} consumed ingredients for {dish_name}")
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dishes": [dish.name for dish in self.dishes],
            "stock": dict(self.stock),
        }

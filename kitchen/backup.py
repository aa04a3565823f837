"""
Backup ingredient pool shared by every station.
"""

from typing import Dict, Iterable, List, Optional
import logging

from .models import Ingredient

logger = logging.getLogger(__name__)


class BackupIngredientPool:
    """Flat stock of spare ingredients. Quantities are always positive."""

    def __init__(self, ingredients: Optional[Iterable[Ingredient]] = None):
        self._stock: Dict[str, int] = {}
        if ingredients:
            self.replace(ingredients)

    def __len__(self) -> int:
        return len(self._stock)

    def __contains__(self, ingredient_name: str) -> bool:
        return ingredient_name in self._stock

    def get_quantity(self, ingredient_name: str) -> int:
        return self._stock.get(ingredient_name, 0)

    def get_ingredients(self) -> List[Ingredient]:
        return [Ingredient(name, quantity) for name, quantity in self._stock.items()]

    def replace(self, ingredients: Iterable[Ingredient]) -> None:
        """Overwrite the whole pool."""
        self._stock = {}
        for ingredient in ingredients:
            self.add(ingredient)

    def add(self, ingredient: Ingredient) -> None:
        if ingredient.quantity == 0 and ingredient.name not in self._stock:
            return
        self._stock[ingredient.name] = self._stock.get(ingredient.name, 0) + ingredient.quantity

    def clear(self) -> None:
        self._stock.clear()

    def has(self, ingredient_name: str, quantity: int) -> bool:
        return ingredient_name in self._stock and self._stock[ingredient_name] >= quantity

    def covers(self, requirements: Dict[str, int]) -> bool:
        """Whether every ``name -> quantity`` requirement can be drawn at once."""
        return all(self.has(name, quantity) for name, quantity in requirements.items())

    def take(self, ingredient_name: str, quantity: int) -> bool:
        """Withdraw ``quantity``. Entries that reach zero are removed."""
        if quantity < 0 or not self.has(ingredient_name, quantity):
            return False

        remaining = self._stock[ingredient_name] - quantity
        if remaining == 0:
            del self._stock[ingredient_name]
        else:
            self._stock[ingredient_name] = remaining
        return True

"""
Value objects for dishes and the ingredients they require.
"""

from typing import Dict, List, Optional, Any, Set
from dataclasses import dataclass, field
import logging

from kitchen_types import DishType, CuisineType, DietaryRestriction

logger = logging.getLogger(__name__)


@dataclass
class Ingredient:
    """Named quantity of an ingredient. Identity is the exact name."""
    name: str
    quantity: int = 0

    def __post_init__(self):
        if self.quantity < 0:
            raise ValueError(f"Ingredient quantity cannot be negative: {self.name}={self.quantity}")

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "quantity": self.quantity}


# Ingredients dropped from a dish for each restriction
DIETARY_EXCLUSIONS: Dict[DietaryRestriction, Set[str]] = {
    DietaryRestriction.VEGETARIAN: {"Beef", "Chicken", "Pork", "Bacon", "Fish", "Shrimp"},
    DietaryRestriction.VEGAN: {"Beef", "Chicken", "Pork", "Bacon", "Fish", "Shrimp", "Honey"},
    DietaryRestriction.NUT_FREE: {"Peanuts", "Almonds", "Walnuts", "Pecans", "Cashews"},
    DietaryRestriction.LOW_SODIUM: {"Salt"},
}

# Ingredients swapped for an alternative for each restriction
DIETARY_SUBSTITUTES: Dict[DietaryRestriction, Dict[str, str]] = {
    DietaryRestriction.VEGAN: {
        "Butter": "Vegan Butter",
        "Milk": "Oat Milk",
        "Cheese": "Vegan Cheese",
        "Eggs": "Egg Replacer",
        "Cream": "Coconut Cream",
    },
    DietaryRestriction.GLUTEN_FREE: {
        "Flour": "Gluten-Free Flour",
        "Pasta": "Gluten-Free Pasta",
        "Bread": "Gluten-Free Bread",
    },
    DietaryRestriction.LOW_SUGAR: {
        "Sugar": "Sugar Substitute",
    },
}


@dataclass
class DietaryRequest:
    """Dietary accommodations requested alongside an order."""
    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    nut_free: bool = False
    low_sodium: bool = False
    low_sugar: bool = False

    @property
    def restrictions(self) -> List[DietaryRestriction]:
        return [r for r in DietaryRestriction if getattr(self, r.value)]

    @classmethod
    def from_names(cls, names: List[str]) -> "DietaryRequest":
        """Build a request from restriction names such as ``["vegan", "nut_free"]``."""
        request = cls()
        for name in names:
            restriction = DietaryRestriction(name.lower())
            setattr(request, restriction.value, True)
        return request


@dataclass
class Dish:
    """A dish with the ordered list of ingredients it requires."""
    name: str
    ingredients: List[Ingredient] = field(default_factory=list)
    dish_type: DishType = DishType.MAIN_COURSE
    cuisine: CuisineType = CuisineType.OTHER
    prep_time: int = 0  # minutes
    price: float = 0.0
    dietary_accommodations: List[DietaryRestriction] = field(default_factory=list)

    def apply_dietary_request(self, request: Optional[DietaryRequest]) -> None:
        """Adjust the ingredient list in place for the requested restrictions.

        Excluded ingredients are dropped, substitutable ones are renamed and
        the dish name is left untouched so stations still recognise it.
        """
        if request is None:
            return

        for restriction in request.restrictions:
            excluded = DIETARY_EXCLUSIONS.get(restriction, set())
            substitutes = DIETARY_SUBSTITUTES.get(restriction, {})

            adjusted = []
            for ingredient in self.ingredients:
                if ingredient.name in excluded:
                    continue
                if ingredient.name in substitutes:
                    ingredient = Ingredient(substitutes[ingredient.name], ingredient.quantity)
                adjusted.append(ingredient)
            self.ingredients = adjusted

            if restriction not in self.dietary_accommodations:
                self.dietary_accommodations.append(restriction)

        logger.debug(
            f"Applied dietary request to {self.name}: "
            f"{[r.value for r in self.dietary_accommodations]}"
        )

    def required_quantities(self) -> Dict[str, int]:
        """Total quantity needed per ingredient name."""
        totals: Dict[str, int] = {}
        for ingredient in self.ingredients:
            totals[ingredient.name] = totals.get(ingredient.name, 0) + ingredient.quantity
        return totals

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dish_type": self.dish_type.value,
            "cuisine": self.cuisine.value,
            "prep_time": self.prep_time,
            "price": self.price,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "dietary_accommodations": [r.value for r in self.dietary_accommodations],
        }

"""
Kitchen station management package.
"""

from .models import Ingredient, Dish, DietaryRequest
from .station import KitchenStation
from .registry import StationRegistry
from .backup import BackupIngredientPool
from .manager import StationManager

__all__ = [
    "Ingredient",
    "Dish",
    "DietaryRequest",
    "KitchenStation",
    "StationRegistry",
    "BackupIngredientPool",
    "StationManager"
]

"""
Type definitions for the kitchen station manager
"""
from enum import Enum


class DishType(Enum):
    """Menu course of a dish"""
    APPETIZER = "appetizer"
    MAIN_COURSE = "main_course"
    DESSERT = "dessert"
    SIDE_DISH = "side_dish"


class CuisineType(Enum):
    """Types of cuisine"""
    ITALIAN = "italian"
    FRENCH = "french"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    INDIAN = "indian"
    MEXICAN = "mexican"
    AMERICAN = "american"
    MEDITERRANEAN = "mediterranean"
    OTHER = "other"


class DietaryRestriction(Enum):
    """Dietary accommodations a dish can be adjusted for"""
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GLUTEN_FREE = "gluten_free"
    NUT_FREE = "nut_free"
    LOW_SODIUM = "low_sodium"
    LOW_SUGAR = "low_sugar"


class PreparationEvent(Enum):
    """Events emitted while the manager works through the dish queue"""
    ATTEMPT = "attempt"
    SKIPPED = "skipped"
    PREPARED = "prepared"
    INSUFFICIENT_STOCK = "insufficient_stock"
    REPLENISHED = "replenished"
    REPLENISH_FAILED = "replenish_failed"
    RETRY_FAILED = "retry_failed"
    NOT_PREPARED = "not_prepared"
    REQUEUED = "requeued"

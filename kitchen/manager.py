"""
Station manager: drives the dish queue across the registered stations,
falling back to the shared backup pool when a station runs short.
"""

from typing import Dict, List, Optional, Any, Iterable, TextIO
from collections import deque
import logging
import sys

from config import Settings, get_settings
from kitchen_types import PreparationEvent
from metrics.collector import MetricsCollector
from .backup import BackupIngredientPool
from .models import Dish, DietaryRequest, Ingredient
from .registry import StationRegistry
from .station import KitchenStation

logger = logging.getLogger(__name__)


class StationManager:
    """Owns the station registry, the backup ingredient pool and the dish queue."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        collector: Optional[MetricsCollector] = None,
        eager_replenishment: Optional[bool] = None
    ):
        self.settings = settings or get_settings()
        self.registry = StationRegistry()
        self.backup = BackupIngredientPool()
        self.collector = collector or MetricsCollector()
        self._dish_queue: deque = deque()

        if eager_replenishment is None:
            eager_replenishment = self.settings.kitchen.eager_replenishment
        self.eager_replenishment = eager_replenishment

        logger.info("Station manager initialized")

    # Station registry

    def add_station(self, station: KitchenStation) -> bool:
        return self.registry.add_station(station)

    def remove_station(self, station_name: str) -> bool:
        return self.registry.remove_station(station_name)

    def find_station(self, station_name: str) -> Optional[KitchenStation]:
        return self.registry.find_station(station_name)

    def move_station_to_front(self, station_name: str) -> bool:
        return self.registry.move_station_to_front(station_name)

    def merge_stations(self, station_name1: str, station_name2: str) -> bool:
        return self.registry.merge_stations(station_name1, station_name2)

    def get_stations(self) -> List[KitchenStation]:
        return list(self.registry)

    def assign_dish_to_station(self, station_name: str, dish: Dish) -> bool:
        station = self.find_station(station_name)
        if station is None:
            return False
        return station.assign_dish_to_station(dish)

    def replenish_ingredient_at_station(self, station_name: str, ingredient: Ingredient) -> bool:
        station = self.find_station(station_name)
        if station is None:
            return False
        station.replenish_station_ingredients(ingredient)
        return True

    def can_complete_order(self, dish_name: str) -> bool:
        """Whether any station can prepare ``dish_name`` from its current stock."""
        return any(station.can_complete_order(dish_name) for station in self.registry)

    def prepare_dish_at_station(self, station_name: str, dish_name: str) -> bool:
        station = self.find_station(station_name)
        if station is None or not station.can_complete_order(dish_name):
            return False
        return station.prepare_dish(dish_name)

    def find_station_for_dish(self, dish: Dish) -> Optional[KitchenStation]:
        for station in self.registry:
            if station.can_prepare(dish):
                return station
        return None

    # Backup ingredients

    def get_backup_ingredients(self) -> List[Ingredient]:
        return self.backup.get_ingredients()

    def add_backup_ingredients(self, ingredients: Iterable[Ingredient]) -> bool:
        """Replace the whole backup pool with ``ingredients``."""
        self.backup.replace(ingredients)
        return True

    def add_backup_ingredient(self, ingredient: Ingredient) -> bool:
        self.backup.add(ingredient)
        return True

    def clear_backup_ingredients(self) -> None:
        self.backup.clear()

    def replenish_station_ingredient_from_backup(
        self,
        station_name: str,
        ingredient_name: str,
        quantity: int
    ) -> bool:
        """Move ``quantity`` of an ingredient from the backup pool to a station.

        Either both sides change or neither does.
        """
        if quantity < 0:
            logger.warning(f"Rejected negative replenishment of {ingredient_name}: {quantity}")
            return False
        if not self.backup.has(ingredient_name, quantity):
            return False

        station = self.find_station(station_name)
        if station is None:
            return False

        self.backup.take(ingredient_name, quantity)
        station.replenish_station_ingredients(Ingredient(ingredient_name, quantity))
        return True

    # Dish queue

    @property
    def queue_size(self) -> int:
        return len(self._dish_queue)

    def get_dish_queue(self) -> List[Dish]:
        return list(self._dish_queue)

    def set_dish_queue(self, dishes: Iterable[Dish]) -> None:
        self._dish_queue = deque(dish for dish in dishes if dish is not None)

    def add_dish_to_queue(self, dish: Optional[Dish], request: Optional[DietaryRequest] = None) -> bool:
        """Append a dish, adjusting it for ``request`` first when one is given."""
        if dish is None:
            return False
        if request is not None:
            dish.apply_dietary_request(request)
        self._dish_queue.append(dish)
        return True

    def display_dish_queue(self, stream: Optional[TextIO] = None) -> None:
        out = stream or sys.stdout
        for dish in self._dish_queue:
            print(dish.name, file=out)

    def clear_dish_queue(self) -> None:
        released = len(self._dish_queue)
        self._dish_queue.clear()
        logger.debug(f"Released {released} queued dishes")

    # Preparation

    def prepare_next_dish(self) -> bool:
        """Try to prepare the dish at the head of the queue.

        Stations are tried in registry order. A capable station that runs
        short is topped up from the backup pool and retried once. The dish
        stays at the head of the queue if no station manages it.
        """
        if not self._dish_queue:
            return False

        dish = self._dish_queue[0]
        logger.info(f"PREPARING DISH: {dish.name}")

        for station in self.registry:
            logger.info(f"{station.name} attempting to prepare {dish.name}...")
            self.collector.record(PreparationEvent.ATTEMPT, dish.name, station.name)

            if not station.can_prepare(dish):
                logger.info(f"{station.name}: Dish not available. Moving to next station...")
                self.collector.record(PreparationEvent.SKIPPED, dish.name, station.name)
                continue

            if station.prepare_dish(dish.name):
                self._complete(dish, station)
                return True

            logger.info(f"{station.name}: Insufficient ingredients. Replenishing ingredients...")
            self.collector.record(PreparationEvent.INSUFFICIENT_STOCK, dish.name, station.name)

            if not self._replenish_for_dish(station, dish):
                logger.info(
                    f"{station.name}: Unable to replenish ingredients. "
                    f"Failed to prepare {dish.name}."
                )
                self.collector.record(PreparationEvent.REPLENISH_FAILED, dish.name, station.name)
                continue

            logger.info(f"{station.name}: Ingredients replenished.")
            if station.prepare_dish(dish.name):
                self._complete(dish, station)
                return True

            logger.info(f"{station.name}: Unable to prepare {dish.name} after replenishing.")
            self.collector.record(PreparationEvent.RETRY_FAILED, dish.name, station.name)

        logger.info(f"{dish.name} was not prepared.")
        self.collector.record(PreparationEvent.NOT_PREPARED, dish.name)
        return False

    def process_all_dishes(self) -> int:
        """Give every queued dish one preparation attempt.

        Dishes that fail are rotated to the back, so they end up at the tail
        in their original relative order. Returns the number prepared.
        """
        prepared = 0
        for _ in range(len(self._dish_queue)):
            if self.prepare_next_dish():
                prepared += 1
                continue

            dish = self._dish_queue.popleft()
            self._dish_queue.append(dish)
            self.collector.record(PreparationEvent.REQUEUED, dish.name)

        logger.info("All dishes have been processed.")
        return prepared

    def _complete(self, dish: Dish, station: KitchenStation) -> None:
        logger.info(f"{station.name}: Successfully prepared {dish.name}.")
        self.collector.record(PreparationEvent.PREPARED, dish.name, station.name)
        self._dish_queue.popleft()

    def _replenish_for_dish(self, station: KitchenStation, dish: Dish) -> bool:
        if self.eager_replenishment:
            replenished = True
            for ingredient in dish.ingredients:
                moved = self.replenish_station_ingredient_from_backup(
                    station.name, ingredient.name, ingredient.quantity
                )
                if moved:
                    self.collector.record(
                        PreparationEvent.REPLENISHED, dish.name, station.name,
                        ingredient.name, ingredient.quantity
                    )
                replenished = moved and replenished
            return replenished

        requirements = dish.required_quantities()
        if not self.backup.covers(requirements):
            return False
        for name, quantity in requirements.items():
            self.replenish_station_ingredient_from_backup(station.name, name, quantity)
            self.collector.record(
                PreparationEvent.REPLENISHED, dish.name, station.name, name, quantity
            )
        return True

    # Status

    def get_kitchen_status(self) -> Dict[str, Any]:
        """Snapshot of stations, queue, backup pool and preparation metrics."""
        return {
            "stations": [station.to_dict() for station in self.registry],
            "dish_queue": [dish.name for dish in self._dish_queue],
            "backup_ingredients": {i.name: i.quantity for i in self.backup.get_ingredients()},
            "eager_replenishment": self.eager_replenishment,
            "metrics": self.collector.get_summary(),
        }

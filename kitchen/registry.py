"""
Ordered registry of kitchen stations.
"""

from typing import Iterator, List, Optional
import logging

from .station import KitchenStation

logger = logging.getLogger(__name__)


class StationRegistry:
    """Stations in preparation-attempt order. Names are unique."""

    def __init__(self):
        self._stations: List[KitchenStation] = []

    def __len__(self) -> int:
        return len(self._stations)

    def __iter__(self) -> Iterator[KitchenStation]:
        return iter(list(self._stations))

    def __contains__(self, station_name: str) -> bool:
        return self.get_station_index(station_name) != -1

    def names(self) -> List[str]:
        return [station.name for station in self._stations]

    def add_station(self, station: KitchenStation) -> bool:
        """Append a station to the end of the registry."""
        if station is None:
            return False
        if station.name in self:
            logger.warning(f"Station already registered: {station.name}")
            return False
        self._stations.append(station)
        return True

    def remove_station(self, station_name: str) -> bool:
        index = self.get_station_index(station_name)
        if index == -1:
            return False
        del self._stations[index]
        return True

    def find_station(self, station_name: str) -> Optional[KitchenStation]:
        for station in self._stations:
            if station.name == station_name:
                return station
        return None

    def get_station_index(self, station_name: str) -> int:
        for index, station in enumerate(self._stations):
            if station.name == station_name:
                return index
        return -1

    def move_station_to_front(self, station_name: str) -> bool:
        index = self.get_station_index(station_name)
        if index == -1:
            return False
        if index > 0:
            self._stations.insert(0, self._stations.pop(index))
        return True

    def merge_stations(self, target_name: str, source_name: str) -> bool:
        """Fold ``source_name`` into ``target_name`` and drop the source.

        The source's dishes are appended to the target (duplicates kept) and
        its stock is summed into the target's by ingredient name.
        """
        if target_name == source_name:
            return False

        target = self.find_station(target_name)
        source = self.find_station(source_name)
        if target is None or source is None:
            return False

        for dish in source.get_dishes():
            target.assign_dish_to_station(dish)
        for ingredient in source.get_ingredients_stock():
            target.replenish_station_ingredients(ingredient)

        self.remove_station(source_name)
        logger.info(f"Merged station {source_name} into {target_name}")
        return True

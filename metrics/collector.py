"""
Metrics Collector for the station manager
Records preparation events and summarises them with pandas
"""

import pandas as pd
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from pathlib import Path
from datetime import datetime
from collections import defaultdict
import logging

from kitchen_types import PreparationEvent

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ["timestamp", "event", "dish", "station", "ingredient", "quantity"]


@dataclass
class PreparationRecord:
    """One event logged while working through the dish queue"""
    event: PreparationEvent
    dish: str
    station: Optional[str] = None
    ingredient: Optional[str] = None
    quantity: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "event": self.event.value,
            "dish": self.dish,
            "station": self.station,
            "ingredient": self.ingredient,
            "quantity": self.quantity,
        }


class MetricsCollector:
    """Collect and analyse preparation events"""

    def __init__(self):
        self.records: List[PreparationRecord] = []
        self.counters: Dict[str, int] = defaultdict(int)

    def record(
        self,
        event: PreparationEvent,
        dish: str,
        station: Optional[str] = None,
        ingredient: Optional[str] = None,
        quantity: Optional[int] = None
    ) -> PreparationRecord:
        record = PreparationRecord(
            event=event,
            dish=dish,
            station=station,
            ingredient=ingredient,
            quantity=quantity
        )
        self.records.append(record)
        self.counters[event.value] += 1
        return record

    def count(self, event: PreparationEvent) -> int:
        return self.counters.get(event.value, 0)

    def reset(self) -> None:
        self.records.clear()
        self.counters.clear()

    def to_dataframe(self) -> pd.DataFrame:
        """All records as a DataFrame, one row per event"""
        if not self.records:
            return pd.DataFrame(columns=RECORD_COLUMNS)
        return pd.DataFrame([r.to_dict() for r in self.records], columns=RECORD_COLUMNS)

    def summarize_by_station(self) -> pd.DataFrame:
        """Event counts per station, one column per event type"""
        df = self.to_dataframe()
        df = df[df["station"].notna()]
        if df.empty:
            return pd.DataFrame()

        summary = df.groupby(["station", "event"]).size().unstack(fill_value=0)
        summary.columns.name = None
        return summary

    def success_rate(self) -> float:
        """Share of dish attempts that ended with the dish prepared"""
        prepared = self.count(PreparationEvent.PREPARED)
        failed = self.count(PreparationEvent.NOT_PREPARED)
        total = prepared + failed
        if total == 0:
            return 0.0
        return prepared / total

    def get_summary(self) -> Dict[str, Any]:
        return {
            "total_events": len(self.records),
            "dishes_prepared": self.count(PreparationEvent.PREPARED),
            "dishes_not_prepared": self.count(PreparationEvent.NOT_PREPARED),
            "replenishments": self.count(PreparationEvent.REPLENISHED),
            "failed_replenishments": self.count(PreparationEvent.REPLENISH_FAILED),
            "success_rate": round(self.success_rate(), 3),
        }

    def export_to_csv(self, output_dir: str = "results") -> Optional[Path]:
        """Write all records to a timestamped CSV file"""
        if not self.records:
            logger.info("No preparation events to export")
            return None

        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        filepath = directory / f"preparation_events_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
        self.to_dataframe().to_csv(filepath, index=False)

        logger.info(f"Exported {len(self.records)} preparation events to {filepath}")
        return filepath

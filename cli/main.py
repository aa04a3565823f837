"""
Command Line Interface using Fire - run kitchen layouts through the station manager
"""
import fire
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from config import Config, load_settings
from kitchen.layout import load_layout, build_manager
from kitchen.manager import StationManager

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class KitchenCLI:
    """Command-line interface for the kitchen station manager"""

    def __init__(self, config_path: str = "configs/config.yaml"):
        """Initialize CLI with configuration"""
        self.config_path = Path(config_path)
        self.config: Config = load_settings(self.config_path)
        logging.getLogger().setLevel(self.config.log_level.upper())

    def _resolve_layout(self, layout: str) -> Path:
        if layout:
            return Path(layout)
        if self.config.kitchen.default_layout:
            return self.config.kitchen.default_layout
        raise ValueError("No layout given and KITCHEN_DEFAULT_LAYOUT is not set")

    def _load_manager(self, layout: str) -> StationManager:
        path = self._resolve_layout(layout)
        if not path.exists():
            logger.error(f"Layout file not found: {path}")
            raise FileNotFoundError(path)
        return build_manager(load_layout(path), settings=self.config)

    def queue(self, layout: str = "") -> None:
        """Print the dish queue, one dish per line

        Args:
            layout: Path to a kitchen layout YAML file
        """
        manager = self._load_manager(layout)
        manager.display_dish_queue()

    def prepare_next(self, layout: str = "") -> bool:
        """Attempt the dish at the head of the queue

        Args:
            layout: Path to a kitchen layout YAML file
        """
        manager = self._load_manager(layout)
        prepared = manager.prepare_next_dish()
        print("Prepared" if prepared else "Not prepared")
        return prepared

    def run(self, layout: str = "", export: str = "") -> int:
        """Process every queued dish once and show what is left

        Args:
            layout: Path to a kitchen layout YAML file
            export: Directory to write the preparation event CSV into
        """
        manager = self._load_manager(layout)
        total = manager.queue_size
        prepared = manager.process_all_dishes()

        print(f"\nPrepared {prepared} of {total} dishes")
        if manager.queue_size:
            print("Remaining queue:")
            manager.display_dish_queue()
        if export:
            manager.collector.export_to_csv(export)
        return prepared

    def status(self, layout: str = "", process: bool = False) -> None:
        """Show stations, backup stock and queue as JSON

        Args:
            layout: Path to a kitchen layout YAML file
            process: Process all dishes before reporting
        """
        manager = self._load_manager(layout)
        if process:
            manager.process_all_dishes()
        print(json.dumps(manager.get_kitchen_status(), indent=2))

    def report(self, layout: str = "") -> None:
        """Process all dishes and summarise preparation events per station

        Args:
            layout: Path to a kitchen layout YAML file
        """
        manager = self._load_manager(layout)
        manager.process_all_dishes()

        summary = manager.collector.get_summary()
        print("\n=== Preparation Summary ===")
        for key, value in summary.items():
            print(f"{key}: {value}")

        by_station = manager.collector.summarize_by_station()
        if not by_station.empty:
            print("\nEvents by station:")
            print(by_station.to_string())

    def version(self) -> None:
        """Show version information"""
        print("Kitchen Station Manager")
        print("Version: 1.0.0")


def main(argv: Optional[list] = None):
    """Main CLI entry point"""
    args = list(sys.argv[1:] if argv is None else argv)

    if args and args[0].endswith('.yaml') and not args[0].startswith('-'):
        config_path = args.pop(0)
    else:
        config_path = "configs/config.yaml"

    cli = KitchenCLI(config_path)

    try:
        fire.Fire(cli, command=args)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

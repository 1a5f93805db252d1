"""
Ordered collection of every tracked driver.
"""
from typing import Iterator, List, Optional

from monitoring.tracking_driver import UsageTrackingDriver


class DriverRegistry:
    """
    Insertion-ordered registry of tracked drivers.

    Entries are never removed. Not thread-safe; the application drives it
    from a single thread.
    """

    def __init__(self):
        self._drivers: List[UsageTrackingDriver] = []

    def append(self, driver: UsageTrackingDriver) -> None:
        self._drivers.append(driver)

    def find(self, label: str) -> Optional[UsageTrackingDriver]:
        """Return the first driver registered under `label`, or None."""
        for driver in self._drivers:
            if driver.label == label:
                return driver
        return None

    def labels(self) -> List[str]:
        return [driver.label for driver in self._drivers]

    def __iter__(self) -> Iterator[UsageTrackingDriver]:
        return iter(list(self._drivers))

    def __len__(self) -> int:
        return len(self._drivers)

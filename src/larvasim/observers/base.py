"""
Base class for observers.

IMPORTANT: Observers read larva state but never modify it. They're
diagnostic tools for measuring crawl speed, heading and wave shape.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from larvasim.core.larva import Larva


class Observer(ABC):
    """
    Base class for observers bound to one larva.

    Subclasses record whatever they measure in update() and summarize
    it in get_measurements().
    """

    def __init__(self, larva: "Larva", name: str = ""):
        self.larva = larva
        self.name = name
        self._tick = 0

    @abstractmethod
    def update(self, tick: int) -> None:
        """
        Record the larva state for the current tick.

        Args:
            tick: The scheduler tick number
        """
        ...

    @abstractmethod
    def get_measurements(self) -> dict:
        """
        Return recorded measurements from this observer.

        Returns:
            Dict with observer-specific measurements
        """
        ...

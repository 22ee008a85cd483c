"""
Stopping policies for the search loop.

A budget is started once per decision and asked after every iteration
whether the search may continue.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Callable, Optional


class SearchBudget(ABC):
    """When to stop iterating."""

    def start(self) -> None:
        """Called once before the first iteration of a decision."""
        pass

    @abstractmethod
    def exhausted(self, iterations: int) -> bool:
        """True once no further iteration should run."""
        pass


class IterationBudget(SearchBudget):
    """Fixed number of select/expand/simulate iterations."""

    def __init__(self, iterations: int):
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations}")
        self.iterations = iterations

    def exhausted(self, iterations: int) -> bool:
        return iterations >= self.iterations

    def __repr__(self) -> str:
        return f"IterationBudget({self.iterations})"


class DeadlineBudget(SearchBudget):
    """
    Iterate until `seconds` of wall-clock time have passed since start().

    `max_iterations` optionally caps the count as well. At least
    `min_iterations` run regardless of the clock.
    """

    def __init__(
        self,
        seconds: float,
        max_iterations: Optional[int] = None,
        min_iterations: int = 1,
        clock: Callable[[], float] = time.monotonic,
    ):
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")
        self.seconds = seconds
        self.max_iterations = max_iterations
        self.min_iterations = min_iterations
        self._clock = clock
        self._deadline: Optional[float] = None

    def start(self) -> None:
        self._deadline = self._clock() + self.seconds

    def exhausted(self, iterations: int) -> bool:
        if self._deadline is None:
            raise RuntimeError("DeadlineBudget.start() was not called")
        if self.max_iterations is not None and iterations >= self.max_iterations:
            return True
        if iterations < self.min_iterations:
            return False
        return self._clock() >= self._deadline

    def __repr__(self) -> str:
        return f"DeadlineBudget({self.seconds}s, max_iterations={self.max_iterations})"

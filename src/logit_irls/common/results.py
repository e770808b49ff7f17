"""Classification result container."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class CategoricalResults:
    """Probabilities for a two-class prediction, indexed by class."""

    p0: float
    p1: float

    def get_prob(self, category: int) -> float:
        if category == 0:
            return self.p0
        if category == 1:
            return self.p1
        raise IndexError(f'Category {category} out of range for 2 classes')

    def most_likely(self) -> int:
        """Index of the most probable class; ties go to class 0."""
        return 1 if self.p1 > self.p0 else 0

    def __iter__(self) -> Iterator[float]:
        yield self.p0
        yield self.p1

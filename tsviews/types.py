"""
Point type produced by every view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

I = TypeVar("I")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DataPoint(Generic[I, T]):
    """
    A single (index, value) pair.

    Owned views fill it with shallow copies of the channel elements,
    by-reference views with the channel objects themselves.
    """

    index: I
    value: T

    def as_tuple(self) -> tuple[I, T]:
        return self.index, self.value

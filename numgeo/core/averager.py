"""Streaming arithmetic mean with O(1) memory.

The running mean is updated in place for every value,

    current = (current * count + value) / (count + 1)

which is mathematically the same as ``sum / count`` but never stores the sum
or the values. Each update rounds again, so very long streams accumulate a
little more rounding error than a compensated sum would. Non-finite inputs are
not rejected: one NaN or infinity poisons the mean until :meth:`clear`.
"""
from __future__ import annotations

import warnings
from typing import Iterable, Optional

import numpy as np


class Averager:
    """Mutable running-mean accumulator.

    Not thread-safe; share an instance between writers only under an
    external lock.

    Example
    -------
        >>> Averager().average(1, 2, 3).average(4).current()
        2.5
    """

    __slots__ = ('_current_average', '_times_averaged')

    def __init__(self, starting_number: Optional[float] = None):
        if starting_number is None:
            self._current_average = 0.0
            self._times_averaged = 0
        else:
            self._current_average = float(starting_number)
            self._times_averaged = 1

    def average(self, *values) -> 'Averager':
        """Fold each value into the mean, left to right. Returns ``self`` for chaining."""
        for value in values:
            self._current_average = (
                (self._current_average * self._times_averaged + float(value))
                / (self._times_averaged + 1)
            )
            self._times_averaged += 1
        return self

    def average_all(self, values: Iterable[float]) -> 'Averager':
        """Fold every element of an iterable or array (flattened, in C order)."""
        if isinstance(values, np.ndarray):
            values = values.ravel()
        for value in values:
            self.average(value)
        return self

    def current(self) -> float:
        return self._current_average

    def count(self) -> int:
        return self._times_averaged

    def clear(self) -> 'Averager':
        """Forget all history; the instance behaves as freshly constructed."""
        self._current_average = 0.0
        self._times_averaged = 0
        return self

    def __float__(self) -> float:
        return self.current()

    def __int__(self) -> int:
        warnings.warn(
            "int(Averager) truncates the running mean; use float(averager) or averager.current() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return int(self.current())

    def __repr__(self) -> str:
        return f"Averager(current={self._current_average!r}, count={self._times_averaged})"


__all__ = ['Averager']

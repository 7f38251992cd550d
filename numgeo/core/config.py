"""Tolerance configuration shared by the comparison kernel and the segment oracle."""
from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Union

from .constants import DEFAULT_FRACTION_TOLERANCE, DEFAULT_INTEGER_TOLERANCE
from .numeric import NumberKind


@dataclass(frozen=True)
class ToleranceConfig:
    """Default tolerances applied when a caller passes ``tolerance=None``.

    Attributes
    ----------
    fraction : float
        Allowed absolute difference for fractional (floating-point) operands.
    integer : int
        Allowed absolute difference when every operand is an integer.
    """
    fraction: float = DEFAULT_FRACTION_TOLERANCE
    integer: int = DEFAULT_INTEGER_TOLERANCE

    def __post_init__(self):
        if self.fraction < 0:
            raise ValueError(f"fraction tolerance must be non-negative, got {self.fraction!r}")
        if self.integer < 0:
            raise ValueError(f"integer tolerance must be non-negative, got {self.integer!r}")

    def for_kind(self, kind: NumberKind) -> Union[int, float]:
        if kind is NumberKind.INTEGER:
            return self.integer
        return self.fraction


_config_lock = RLock()
_active_config: ToleranceConfig = ToleranceConfig()


def get_tolerance_config() -> ToleranceConfig:
    with _config_lock:
        return _active_config


def set_tolerance_config(config: ToleranceConfig) -> ToleranceConfig:
    """Install ``config`` as the process-wide default and return the previous one."""
    global _active_config
    with _config_lock:
        previous = _active_config
        _active_config = config
    return previous


def reset_tolerance_config() -> None:
    set_tolerance_config(ToleranceConfig())


__all__ = ['ToleranceConfig', 'get_tolerance_config', 'set_tolerance_config', 'reset_tolerance_config']

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from numgeo.core.averager import Averager
from numgeo.core.constants import INT32_MAX, INT32_MIN
from numgeo.core.numeric import (
    NumberKind, clamped_int32, fraction_value, integer_value, is_native_fraction,
    is_native_integer, kind_of, promote,
)


@pytest.mark.parametrize("value, kind", [
    (3, NumberKind.INTEGER),
    (True, NumberKind.INTEGER),
    (np.int64(3), NumberKind.INTEGER),
    (2.5, NumberKind.FRACTION),
    (np.float32(2.5), NumberKind.FRACTION),
    (Fraction(1, 3), NumberKind.OTHER),
    (Decimal('1.5'), NumberKind.OTHER),
    (Averager(2.0), NumberKind.OTHER),
])
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_native_predicates():
    assert is_native_integer(4) and not is_native_fraction(4)
    assert is_native_fraction(4.0) and not is_native_integer(4.0)
    assert not is_native_integer(Fraction(4)) and not is_native_fraction(Fraction(4))


def test_value_extraction():
    assert integer_value(np.int16(7)) == 7 and type(integer_value(np.int16(7))) is int
    assert integer_value(-2.9) == -2
    assert fraction_value(Fraction(1, 4)) == 0.25
    assert fraction_value(Averager(1.5)) == 1.5
    with pytest.raises(TypeError):
        fraction_value('1.0')


def test_promote_rules():
    assert promote(2, 3) == (NumberKind.INTEGER, 2, 3)
    kind, l, r = promote(2, 3.5)
    assert kind is NumberKind.FRACTION and isinstance(l, float) and r == 3.5
    kind, l, r = promote(Fraction(1, 2), 1)
    assert kind is NumberKind.OTHER and (l, r) == (0.5, 1.0)


def test_clamped_int32():
    assert clamped_int32(5) == 5
    assert clamped_int32(2 ** 40) == INT32_MAX
    assert clamped_int32(-(2 ** 40)) == INT32_MIN
    assert clamped_int32(0.5) == 0.5
    assert clamped_int32(-1e20) == float(INT32_MIN)
    assert isinstance(clamped_int32(1e20), float)
    assert np.isnan(clamped_int32(float('nan')))

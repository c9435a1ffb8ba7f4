
import enum
import functools
from dataclasses import dataclass
from typing import Union

import numpy


class ValueType(enum.Enum):
    INTEGER = 'integer'
    REAL = 'real'
    BOOLEAN = 'boolean'
    STRING = 'string'


DATA_TYPES = {
    ValueType.INTEGER: int,
    ValueType.REAL: float,
    ValueType.BOOLEAN: bool,
    ValueType.STRING: str,
}


@dataclass(frozen=True)
class Value:
    """An immutable tagged scalar, as stored inside an `Args`."""
    type: ValueType
    data: Union[int, float, bool, str]

    def __post_init__(self):
        # `bool` is a subclass of `int`, so compare exact types
        if type(self.data) is not DATA_TYPES[self.type]:
            raise TypeError(
                f'{self.type.value} value must be {DATA_TYPES[self.type].__name__}, got {self.data!r}'
            )


# Storable values should be one of
#  - `str`, `bool`, `int`, or `float`
#  - the numpy scalar equivalents, which are stored as the builtin type
#  - an already tagged `Value`

@functools.singledispatch
def to_value(value) -> Value:
    raise TypeError(f'unsupported argument value type: {type(value)}')

@to_value.register
def _(value: Value) -> Value:
    return value

# `bool` has to be registered separately since it's a subclass of `int`
@to_value.register
def _(value: Union[bool, numpy.bool_]) -> Value:
    return Value(ValueType.BOOLEAN, bool(value))

@to_value.register
def _(value: Union[int, numpy.integer]) -> Value:
    return Value(ValueType.INTEGER, int(value))

@to_value.register
def _(value: Union[float, numpy.floating]) -> Value:
    return Value(ValueType.REAL, float(value))

@to_value.register
def _(value: str) -> Value:
    return Value(ValueType.STRING, str(value))

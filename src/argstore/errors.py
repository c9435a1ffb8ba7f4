
from .values import ValueType


class ArgsError(Exception):
    """Base class for every error raised by argstore."""


class MalformedConstructionError(ArgsError, ValueError):
    """Raised when an `Args` can't be built from the given pairs or string."""


class MissingRequiredArgumentError(ArgsError, KeyError):
    """Raised by a mandatory `get_*` when neither store defines the key."""

    def __init__(self, key:str):
        self.key = key
        super().__init__(key)

    def __str__(self):
        return f'missing required argument "{self.key}"'


class TypeMismatchError(ArgsError, TypeError):
    """Raised when a stored value's type isn't the one that was asked for."""

    def __init__(self, key:str, stored:ValueType, requested:ValueType):
        self.key = key
        self.stored = stored
        self.requested = requested
        super().__init__(
            f'argument "{key}" holds {stored.value}, not {requested.value}'
        )

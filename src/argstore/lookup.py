"""
Layered lookup of named arguments.

A key is searched for in the instance store, then in the fallback store (the
process-wide `global_args()` unless told otherwise), and only then is the
caller's default used. The instance always shadows the fallback, and the
fallback always shadows the default.
"""

from .errors import MissingRequiredArgumentError, TypeMismatchError
from .global_args import global_args
from .values import ValueType


# marks "no default given", since `None` is a reasonable default
MISSING = object()


def resolve(instance, fallback, key:str, requested:ValueType, default=MISSING):
    if fallback is None:
        fallback = global_args()

    for store in (instance, fallback):
        value = store.get(key)
        if value is not None:
            break
    else:
        if default is MISSING:
            raise MissingRequiredArgumentError(key)
        return default

    if value.type is not requested:
        raise TypeMismatchError(key, value.type, requested)
    return value.data


class Lookup:
    """
    Typed read-only view over an instance store and a fallback store.

    `Args.get_*` already does this against the global store; a `Lookup` is
    only needed to fall back on some other store.

    > defaults = Args('Maxm=100')
    > Lookup(Args('Cutoff', 1e-8), defaults).get_int('Maxm')  # -> 100
    """

    def __init__(self, instance, fallback=None):
        self.instance = instance
        self.fallback = fallback

    def defined(self, key:str) -> bool:
        fallback = global_args() if self.fallback is None else self.fallback
        return self.instance.defined(key) or fallback.defined(key)

    def get_int(self, key:str, default=MISSING) -> int:
        return resolve(self.instance, self.fallback, key, ValueType.INTEGER, default)

    def get_real(self, key:str, default=MISSING) -> float:
        return resolve(self.instance, self.fallback, key, ValueType.REAL, default)

    def get_bool(self, key:str, default=MISSING) -> bool:
        return resolve(self.instance, self.fallback, key, ValueType.BOOLEAN, default)

    def get_string(self, key:str, default=MISSING) -> str:
        return resolve(self.instance, self.fallback, key, ValueType.STRING, default)

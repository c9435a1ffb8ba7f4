
import contextlib
from collections.abc import Iterator, Mapping
from typing import Any, Optional

from .errors import MalformedConstructionError
from .lookup import MISSING, resolve
from .parse import parse_spec
from .values import Value, ValueType, to_value


class Args:
    """
    Ordered store of named arguments, mapping string keys to scalar values
    (`int`, `float`, `bool` or `str`).

    Functions take an `Args` in place of a long list of optional parameters
    and read whichever keys they understand, falling back on the global store
    and then on a default:

    > def dmrg(psi, args:Args=None):
    >     args = Args() if args is None else args
    >     cutoff = args.get_real('Cutoff', 1e-5)
    >     maxm = args.get_int('Maxm', 5000)

    An `Args` can be built from
        - alternating keys and values: `Args('Cutoff', 1e-10, 'Maxm', 500)`
        - a single string: `Args('Cutoff=1E-10,Maxm=500')`
        - a dict or another `Args`: `Args({'Cutoff': 1e-10})`
        - keywords, applied after everything else: `Args(Cutoff=1e-10)`

    Later entries overwrite earlier ones with the same key.
    """

    # the global store swaps this out for a real lock
    _lock = contextlib.nullcontext()

    def __init__(self, *items, **kwargs):
        self._values: dict[str, Value] = {}

        match items:
            case (str() as spec,):
                for key, value in parse_spec(spec):
                    self._values[key] = value
            case (Args() as other,):
                self._values.update(other.items())
            case (Mapping() as mapping,):
                self._add_pairs(list(mapping.items()))
            case _:
                if len(items) % 2 != 0:
                    raise MalformedConstructionError(
                        f'expected alternating keys and values, got {len(items)} items'
                    )
                self._add_pairs(list(zip(items[::2], items[1::2])))

        self._add_pairs(list(kwargs.items()))

    def _add_pairs(self, pairs:list):
        for key, value in pairs:
            if not isinstance(key, str):
                raise MalformedConstructionError(
                    f'argument names must be strings, got {key!r}'
                )
            try:
                self._values[key] = to_value(value)
            except TypeError as e:
                raise MalformedConstructionError(f'argument "{key}": {e}') from e

    def add(self, key:str, value) -> 'Args':
        """Set `key` to `value`, replacing any previous value."""
        if not isinstance(key, str):
            raise TypeError(f'argument names must be strings, got {key!r}')
        value = to_value(value)
        with self._lock:
            self._values[key] = value
        return self

    def defined(self, key:str) -> bool:
        with self._lock:
            return key in self._values

    def get(self, key:str) -> Optional[Value]:
        with self._lock:
            return self._values.get(key)

    def remove(self, key:str) -> 'Args':
        with self._lock:
            self._values.pop(key, None)
        return self

    def update(self, other) -> 'Args':
        """Merge in the entries of `other`, which win on overlapping keys."""
        if not isinstance(other, Args):
            other = Args(other)
        with self._lock:
            self._values.update(other.items())
        return self

    def clear(self):
        with self._lock:
            self._values.clear()

    def copy(self) -> 'Args':
        # `Value`s are immutable so a shallow copy is enough, and the copy
        # never shares the global lock
        return Args(self)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    # __getstate__ and __setstate__ are used for pickling and unpickling
    # Only the entries are kept, so an unpickled global store is a plain store
    def __getstate__(self):
        return dict(self.items())

    def __setstate__(self, state):
        self._values = dict(state)

    def items(self) -> list[tuple[str, Value]]:
        with self._lock:
            return list(self._values.items())

    def to_dict(self) -> dict[str, Any]:
        return {key: value.data for key, value in self.items()}

    def get_int(self, key:str, default=MISSING) -> int:
        return resolve(self, None, key, ValueType.INTEGER, default)

    def get_real(self, key:str, default=MISSING) -> float:
        return resolve(self, None, key, ValueType.REAL, default)

    def get_bool(self, key:str, default=MISSING) -> bool:
        return resolve(self, None, key, ValueType.BOOLEAN, default)

    def get_string(self, key:str, default=MISSING) -> str:
        return resolve(self, None, key, ValueType.STRING, default)

    def __contains__(self, key) -> bool:
        return self.defined(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter([key for key, _ in self.items()])

    def __eq__(self, other):
        if not isinstance(other, Args):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    __hash__ = None

    def __repr__(self):
        entries = ', '.join(f'{key}={value.data!r}' for key, value in self.items())
        return f'Args({entries})'

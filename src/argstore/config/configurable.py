
import functools
import inspect
from collections.abc import Mapping

from ..args import Args


def as_args(value) -> Args:
    """
    Build an `Args` from whatever was passed where one is expected.
    An `Args` is returned as-is, so the caller's changes stay visible to them.
    """
    match value:
        case Args():
            return value
        case None:
            return Args()
        case str() | Mapping():
            return Args(value)
        case tuple() | list():
            return Args(*value)
    raise TypeError(f'cannot build Args from {type(value)}')


def accepts_args(fn=None, *, name:str='args'):
    """
    Function decorator converting the parameter called `name` into an `Args`.

    Callers can then pass a literal at the call site instead of building a
    store themselves:
    > @accepts_args
    > def dmrg(psi, args=None):
    >     return args.get_int('Maxm', 5000)
    >
    > dmrg(psi)                               # empty Args
    > dmrg(psi, ('Maxm', 500, 'Quiet', True)) # alternating pairs
    > dmrg(psi, 'Maxm=500,Quiet=true')        # one-line string
    > dmrg(psi, args={'Maxm': 500})
    """
    def decorator(fn):
        assert not isinstance(fn, type), f'{fn}: @accepts_args should decorate __init__, not the class'

        sig = inspect.signature(fn)
        assert name in sig.parameters, f'{fn.__name__} has no parameter "{name}"'

        @functools.wraps(fn)
        def decorated(*args, **kwargs):
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()
            bound.arguments[name] = as_args(bound.arguments.get(name))
            return fn(*bound.args, **bound.kwargs)
        return decorated

    if fn is not None:
        return decorator(fn)
    return decorator

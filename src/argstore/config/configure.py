
import argparse
import json
import logging
import re
from collections.abc import Mapping

from ..args import Args
from ..errors import MalformedConstructionError
from ..global_args import LOCK, global_args


logger = logging.getLogger(__name__)


def configure_from_args(argv:list[str]=None) -> Args:
    """
    Add entries from the command line to the global store, permanently.

    Each `-c`/`--config` option is either a JSON object with scalar members,
    or a `Key1=Value1,Key2=Value2` string. Other command line arguments are
    left alone.

    > python train.py -c Maxm=500 -c '{"Cutoff": 1e-10, "Quiet": true}'
    """
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument('-c', '--config', type=str, action='append', default=[])
    args, _ = parser.parse_known_args(argv)

    config = Args()
    for c in args.config:
        if re.match(r'\{.*\}', c.strip(), re.DOTALL):
            try:
                j = json.loads(c)
            except json.JSONDecodeError as e:
                raise MalformedConstructionError(f'invalid JSON config {c!r}: {e}') from e
            if not isinstance(j, dict):
                raise MalformedConstructionError(f'JSON config must be an object: {c!r}')
            config.update(Args(j))
            continue

        config.update(Args(c))

    logger.debug('adding %d command line argument(s) to the global store', len(config))
    global_args().update(config)
    return config


def configure(source:Args|Mapping|str=None, **kwargs):
    """

    Basic usage is to set global argument(s) within a context.
    > with argstore.configure(Cutoff=1e-10, Maxm=500):
    >     ...

    The global store gets its previous contents back on exit, whatever was
    added to it in the meantime. Configures can be defined ahead of time and
    chained together to avoid excessive tabbing.
    > defaults = argstore.configure('Cutoff=1E-8,Maxm=200')
    > quiet = argstore.configure(Quiet=True)
    > with defaults, quiet:
    >     ...
    """
    match source:
        case None:
            config = Args()
        case Args() | Mapping() | str():
            config = Args(source)
        case _:
            raise TypeError(f'invalid/unknown source for argstore.configure: {source!r}')

    config.update(kwargs)
    return ArgsConfigManager(config)


class ArgsConfigManager:
    def __init__(self, config:Args, target:Args=None):
        self.config = config
        self.target = global_args() if target is None else target
        self.prev = []

    def __enter__(self):
        with LOCK:
            self.prev.append(self.target.copy())
            self.target.update(self.config)
        logger.debug('configured global arguments: %r', self.config)
        return self.target

    def __exit__(self, exc_type, exc_value, exc_traceback):
        with LOCK:
            prev = self.prev.pop()
            self.target.clear()
            self.target.update(prev)
        logger.debug('restored global arguments: %r', prev)

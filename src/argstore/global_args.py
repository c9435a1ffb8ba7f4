
"""
The process-wide fallback store consulted by every `get_*` lookup.

It's created empty the first time `global_args()` is called and lives until
the process exits. Anything added to it is visible to every later lookup that
doesn't find the key in its own store:

> global_args().add('DoPrint', True)

Prefer the `configure` context manager for temporary changes (e.g. in tests),
since it restores the previous contents on exit.
"""

import threading


# guards every read and write made through the global store
LOCK = threading.RLock()

_GLOBAL_ARGS = None


def global_args():
    global _GLOBAL_ARGS
    with LOCK:
        if _GLOBAL_ARGS is None:
            from .args import Args
            _GLOBAL_ARGS = Args()
            _GLOBAL_ARGS._lock = LOCK
        return _GLOBAL_ARGS


from .values import Value, ValueType, to_value
from .errors import (
    ArgsError,
    MalformedConstructionError,
    MissingRequiredArgumentError,
    TypeMismatchError,
)
from .args import Args
from .global_args import global_args
from .lookup import Lookup, resolve
from .parse import parse_literal, parse_spec
from .config import (
    ArgsConfigManager,
    accepts_args,
    as_args,
    configure,
    configure_from_args,
)

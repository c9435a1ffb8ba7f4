from .configurable import accepts_args, as_args
from .configure import ArgsConfigManager, configure, configure_from_args

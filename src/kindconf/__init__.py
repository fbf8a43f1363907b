"""KindConf - Runtime kind-checked configuration forms.

Declare typed parameters with defaults, then merge overrides from value maps,
string maps and ``key=value`` command line arguments while keeping every
parameter's kind fixed and frozen parameters unchanged.
"""
# ruff: noqa: F401

from .exceptions import ConfigError, KindConfError
from .form import Form
from .parameter import Parameter
from .parser import parse_args, parse_key_value_pairs
from .persistence import dump_value_map, load_value_map
from .utils import parse_value
from .value import Kind, Value

__version__ = "0.1.0"

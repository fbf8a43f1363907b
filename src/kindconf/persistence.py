"""YAML persistence of form value maps.

A value map is written as a flat YAML mapping of key to scalar. Reading it back
yields ``Value`` instances ready for ``Form.merge_value_map``, which re-checks
every key and kind against the form's declarations.
"""

import logging
import re
from typing import IO, Any, Dict, Mapping, Optional

import yaml

from .exceptions import ConfigError
from .value import Value

_logger = logging.getLogger(__name__)


class ValueMapLoader(yaml.SafeLoader):
    """Safe YAML loader that also reads exponent-only floats such as ``1e-3``."""


# YAML 1.1 only resolves floats that contain a dot
ValueMapLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(r"^[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)[eE][-+]?[0-9]+$"),
    list("-+0123456789."),
)


def dump_value_map(value_map: Mapping[str, Value], stream: Optional[IO[str]] = None) -> Optional[str]:
    """Dump a value map as YAML.

    Args:
        value_map: Values by key  # (e.g. from Form.value_map())
        stream: Stream to write to  # (None returns the YAML text)

    Returns:
        YAML text when ``stream`` is None
    """
    data = {key: value.native for key, value in value_map.items()}
    _logger.debug("Dumping %d config values as YAML", len(data))
    return yaml.safe_dump(data, stream, default_flow_style=False, sort_keys=True)


def load_value_map(stream: Any) -> Dict[str, Value]:
    """Load a value map from YAML.

    Args:
        stream: Stream to read YAML from  # (file-like object or string)

    Returns:
        Values by key

    Raises:
        ConfigError: If an entry is not a bool, int, float or string
    """
    data = yaml.load(stream, Loader=ValueMapLoader)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("", "is not a mapping of config values")

    result = {}  # Dict[str, Value] (loaded values)
    for key, native in data.items():
        try:
            result[str(key)] = Value.of(native)
        except (TypeError, OverflowError) as e:
            raise ConfigError(str(key), "is not a scalar value") from e
    _logger.debug("Loaded %d config values from YAML", len(result))
    return result

"""HDF5 persistence of form value maps.

Each key becomes a scalar dataset in an ``h5py.Group`` whose dtype follows the
value's kind. Requires the ``hdf5`` extra (h5py and numpy).
"""

import logging
from typing import Dict, Mapping

import h5py
import numpy as np

from .exceptions import ConfigError
from .form import Form
from .value import Kind, Value

_logger = logging.getLogger(__name__)

_STRING_DTYPE = h5py.string_dtype(encoding="utf-8")


def write(group: h5py.Group, value_map: Mapping[str, Value]) -> None:
    """Write one scalar dataset per key into ``group``.

    Args:
        group: Target group  # (an open h5py.File is also a group)
        value_map: Values by key  # (e.g. from Form.value_map())
    """
    for key, value in value_map.items():
        if value.kind is Kind.BOOL:
            group.create_dataset(key, data=np.bool_(value.as_bool()))
        elif value.kind is Kind.INT:
            group.create_dataset(key, data=np.int64(value.as_int()))
        elif value.kind is Kind.FLOAT:
            group.create_dataset(key, data=np.float64(value.as_float()))
        elif value.kind is Kind.STRING:
            group.create_dataset(key, data=value.as_string(), dtype=_STRING_DTYPE)
        else:
            raise AssertionError(f"Unhandled kind {value.kind!r}")
    _logger.debug("Wrote %d config values to %s", len(value_map), group.name)


def write_form(group: h5py.Group, name: str, form: Form) -> h5py.Group:
    """Write a form's values into a new subgroup ``name`` of ``group``.

    Returns:
        The created subgroup
    """
    form_group = group.create_group(name)
    write(form_group, form.value_map())
    return form_group


def read(group: h5py.Group) -> Dict[str, Value]:
    """Read the scalar datasets of ``group`` back into a value map.

    Raises:
        ConfigError: If a dataset is not a scalar of a supported dtype
    """
    result = {}  # Dict[str, Value] (values by dataset name)
    for key, dataset in group.items():
        if not isinstance(dataset, h5py.Dataset) or dataset.shape != ():
            raise ConfigError(key, "is not a scalar value")
        result[key] = _read_scalar(key, dataset)
    _logger.debug("Read %d config values from %s", len(result), group.name)
    return result


def _read_scalar(key: str, dataset: h5py.Dataset) -> Value:
    if h5py.check_string_dtype(dataset.dtype) is not None:
        return Value.string(dataset.asstr()[()])

    kind = dataset.dtype.kind
    if kind == "b":
        return Value.bool_(bool(dataset[()]))
    if kind in "iu":
        try:
            return Value.int_(int(dataset[()]))
        except OverflowError as e:
            raise ConfigError(key, "has an unsupported dataset type") from e
    if kind == "f":
        return Value.float_(float(dataset[()]))
    raise ConfigError(key, "has an unsupported dataset type")

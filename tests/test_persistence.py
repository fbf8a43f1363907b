"""Test cases for YAML persistence of value maps."""

from pathlib import Path

import pytest
import yaml

from kindconf import ConfigError, Form, Value, dump_value_map, load_value_map


def test_dump_value_map(form: Form):
    text = dump_value_map(form.value_map())

    assert text.splitlines() == [
        "num_zones: 5000",
        "outdir: data",
        "quiet: false",
        "rk_order: 2",
        "tfinal: 0.2",
    ]


def test_value_map_survives_a_file(form: Form, tmp_path: Path):
    """Given a form with merged overrides
    When its value map is written to a YAML file and read back
    Then merging the loaded map into a fresh form restores the values
    """
    run_form = form.merge_args(["tfinal=0.4", "quiet=true", "outdir=true"])
    path = tmp_path / "run_config.yaml"

    with open(path, "w") as f:
        dump_value_map(run_form.value_map(), f)
    with open(path, "r") as f:
        loaded = load_value_map(f)

    assert loaded == run_form.value_map()
    assert loaded["outdir"] == Value.of("true")
    assert form.merge_value_map(loaded) == run_form


def test_loaded_values_are_kind_checked_on_merge(form: Form):
    loaded = load_value_map("tfinal: 1\nrk_order: 4\n")

    with pytest.raises(ConfigError) as exc_info:
        form.merge_value_map(loaded)
    assert exc_info.value.key == "tfinal"
    assert exc_info.value.why == "has the wrong type"


def test_load_rejects_structured_values():
    with pytest.raises(ConfigError) as exc_info:
        load_value_map("zones: [1, 2]\n")
    assert exc_info.value.key == "zones"
    assert exc_info.value.why == "is not a scalar value"

    with pytest.raises(ConfigError) as exc_info:
        load_value_map("outdir: null\n")
    assert exc_info.value.why == "is not a scalar value"


def test_load_requires_a_mapping():
    with pytest.raises(ConfigError) as exc_info:
        load_value_map("- 1\n- 2\n")
    assert exc_info.value.why == "is not a mapping of config values"

    assert load_value_map("") == {}


def test_load_reads_exponent_only_floats(form: Form):
    """Given a hand-written YAML file using exponent notation without a dot
    When loading and merging it into a form with a float item
    Then the values are read as floats and merge cleanly
    """
    loaded = load_value_map("tfinal: 1e-3\n")

    assert loaded["tfinal"] == Value.of(1e-3)
    assert form.merge_value_map(loaded).get("tfinal").as_float() == 1e-3
    assert load_value_map("a: 2E5\nb: -.5e+2\nc: 12\n") == {
        "a": Value.of(2e5),
        "b": Value.of(-50.0),
        "c": Value.of(12),
    }


def test_exponent_floats_do_not_change_global_yaml_loading():
    assert yaml.safe_load("x: 1e-3\n") == {"x": "1e-3"}

"""Test cases for key=value argument parsing."""

import sys

import pytest

from kindconf import ConfigError, KindConfError, parse_args, parse_key_value_pairs


def test_parse_key_value_pairs():
    assert parse_key_value_pairs(["tfinal=0.4", "rk_order=1", "quiet=true"]) == {
        "tfinal": "0.4",
        "rk_order": "1",
        "quiet": "true",
    }
    assert parse_key_value_pairs([]) == {}
    assert parse_key_value_pairs(iter(["a=1"])) == {"a": "1"}


def test_duplicate_keys():
    """Given the same key twice
    When duplicates are not allowed
    Then parsing fails, and when they are allowed the later value wins
    """
    with pytest.raises(ConfigError) as exc_info:
        parse_key_value_pairs(["a=1", "a=2"], allow_duplicates=False)
    assert exc_info.value.key == "a"
    assert exc_info.value.why == "duplicate parameter"

    assert parse_key_value_pairs(["a=1", "a=2"], allow_duplicates=True) == {"a": "2"}


@pytest.mark.parametrize("arg", ["a 2", "a=b=c", "=1", "a=", "=", ""])
def test_badly_formed_arguments(arg):
    with pytest.raises(ConfigError) as exc_info:
        parse_key_value_pairs([arg])
    assert exc_info.value.key == arg
    assert exc_info.value.why == "is a badly formed argument"


def test_config_error_is_a_kindconf_error():
    with pytest.raises(KindConfError):
        parse_key_value_pairs(["a 2"])


def test_parse_args_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "tfinal=0.4", "tfinal=0.8"])

    with pytest.raises(ConfigError):
        parse_args()
    assert parse_args(allow_duplicates=True) == {"tfinal": "0.8"}
    assert parse_args(["x=1"]) == {"x": "1"}

"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from matchkit.assertions import assert_that
from matchkit.config import MatchkitConfig, configure, get_config, load_config, reset_config
from matchkit.errors import MatchAssertionError
from matchkit.matchers import equal_to


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "matchkit.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = MatchkitConfig()
    assert cfg.max_repr_length == 200
    assert cfg.indent == "  "


def test_load_top_level_keys(tmp_yaml):
    path = tmp_yaml("""\
        max_repr_length: 40
        indent: "    "
    """)
    cfg = load_config(path)
    assert cfg.max_repr_length == 40
    assert cfg.indent == "    "
    assert get_config() is cfg


def test_load_nested_section(tmp_yaml):
    path = tmp_yaml("""\
        other_tool:
          setting: 1
        matchkit:
          max_repr_length: null
    """)
    cfg = load_config(path)
    assert cfg.max_repr_length is None


def test_load_rejects_unknown_keys(tmp_yaml):
    path = tmp_yaml("""\
        max_repr_length: 40
        colour: true
    """)
    with pytest.raises(ValidationError):
        load_config(path)


def test_load_rejects_non_mapping(tmp_yaml):
    path = tmp_yaml("""\
        - 1
        - 2
    """)
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(path)


def test_empty_file_gives_defaults(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == MatchkitConfig()


def test_max_repr_length_lower_bound():
    with pytest.raises(ValidationError):
        MatchkitConfig(max_repr_length=3)


def test_configure_invalid_keeps_previous():
    configure(max_repr_length=50)
    with pytest.raises(ValidationError):
        configure(max_repr_length=2)
    assert get_config().max_repr_length == 50


def test_reset_config():
    configure(indent="\t")
    assert reset_config() == MatchkitConfig()


def test_indent_applies_to_assertion_message():
    configure(indent="> ")
    with pytest.raises(MatchAssertionError) as exc_info:
        assert_that(1, equal_to(2))
    assert "\n> Because: equal_to(2): expected 2, got 1" in str(exc_info.value)

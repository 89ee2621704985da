"""Tests for properties text parsing."""

from __future__ import annotations

import pytest

from launcher.config import RuntimePropertiesFormatError, config_parse_properties


def test_config_parse_properties_reads_plain_pairs_without_coercion() -> None:
    """Keep keys and values as plain strings.

    Returns:
        None: Assertions validate parsed mapping.

    Raises:
        AssertionError: Raised when parsing coerces or drops values.
    """

    parsed = config_parse_properties("foo=bar\nport=3316\nenabled=true\n")

    assert parsed == {"foo": "bar", "port": "3316", "enabled": "true"}


def test_config_parse_properties_handles_separators_and_comments() -> None:
    """Accept `=`, `:` and whitespace separators and skip comment lines.

    Returns:
        None: Assertions validate separator handling.

    Raises:
        AssertionError: Raised when separators are mishandled.
    """

    text = "# comment\n! other comment\n\n  a = 1\nb:2\nc 3\nd\ne =  trailing  \n"

    parsed = config_parse_properties(text)

    assert parsed == {"a": "1", "b": "2", "c": "3", "d": "", "e": "trailing  "}


def test_config_parse_properties_joins_continuation_lines() -> None:
    """Join backslash-continued lines and strip continuation indentation.

    Returns:
        None: Assertions validate continuation handling.

    Raises:
        AssertionError: Raised when continuation lines are not joined.
    """

    text = "connection.url=jdbc:mysql://localhost:3316/openmrs\\\n    ?autoReconnect=true\r\nnext=value"

    parsed = config_parse_properties(text)

    assert parsed["connection.url"] == "jdbc:mysql://localhost:3316/openmrs?autoReconnect=true"
    assert parsed["next"] == "value"


def test_config_parse_properties_resolves_escapes() -> None:
    """Resolve escaped separators, control escapes and unicode escapes.

    Returns:
        None: Assertions validate escape handling.

    Raises:
        AssertionError: Raised when escapes are not resolved.
    """

    text = "key\\=with\\:separators=tab\\there\nunicode=caf\\u00e9\npath=C:\\\\openmrs\n"

    parsed = config_parse_properties(text)

    assert parsed["key=with:separators"] == "tab\there"
    assert parsed["unicode"] == "café"
    assert parsed["path"] == "C:\\openmrs"


def test_config_parse_properties_later_duplicate_wins() -> None:
    """Let later duplicate keys replace earlier values.

    Returns:
        None: Assertions validate duplicate handling.

    Raises:
        AssertionError: Raised when earlier values win.
    """

    assert config_parse_properties("a=1\na=2\n") == {"a": "2"}


def test_config_parse_properties_empty_text_yields_empty_mapping() -> None:
    """Parse empty content into an empty mapping.

    Returns:
        None: Assertions validate empty input handling.

    Raises:
        AssertionError: Raised when empty input fails.
    """

    assert config_parse_properties("") == {}


def test_config_parse_properties_rejects_malformed_unicode_escape() -> None:
    """Raise a format error for incomplete `\\uXXXX` escapes.

    Returns:
        None: Assertions validate malformed escape detection.

    Raises:
        AssertionError: Raised when malformed escapes are accepted.
    """

    with pytest.raises(RuntimePropertiesFormatError, match="Malformed"):
        config_parse_properties("bad=\\u12G4\n")

"""Java `.properties` text parsing for runtime configuration files."""

from __future__ import annotations

import re
from typing import Final, Iterator

_LINE_BREAK_PATTERN: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
_WHITESPACE: Final[str] = " \t\f"
_KEY_TERMINATORS: Final[str] = "=:"
_SIMPLE_ESCAPES: Final[dict[str, str]] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class RuntimePropertiesFormatError(ValueError):
    """Raised when properties text contains a malformed escape sequence."""


def config_parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a plain string mapping.

    Keys and values are kept as strings with no type coercion. Later
    duplicate keys replace earlier ones.

    Args:
        text: Decoded properties file content.

    Returns:
        dict[str, str]: Parsed key/value pairs in file order.

    Raises:
        RuntimePropertiesFormatError: Raised for malformed `\\uXXXX` escapes.
    """

    parsed_properties: dict[str, str] = {}
    for logical_line in _config_iter_logical_lines(text):
        raw_key, raw_value = _config_split_key_value(logical_line)
        parsed_properties[_config_unescape(raw_key)] = _config_unescape(raw_value)
    return parsed_properties


def _config_iter_logical_lines(text: str) -> Iterator[str]:
    """Yield logical lines with comments removed and continuations joined."""

    natural_lines = _LINE_BREAK_PATTERN.split(text)
    line_index = 0
    while line_index < len(natural_lines):
        line = natural_lines[line_index].lstrip(_WHITESPACE)
        line_index += 1
        if not line or line[0] in "#!":
            continue

        line_parts: list[str] = []
        while _config_has_continuation(line):
            line_parts.append(line[:-1])
            if line_index >= len(natural_lines):
                line = ""
                break
            line = natural_lines[line_index].lstrip(_WHITESPACE)
            line_index += 1
        line_parts.append(line)
        yield "".join(line_parts)


def _config_has_continuation(line: str) -> bool:
    trailing_backslashes = len(line) - len(line.rstrip("\\"))
    return trailing_backslashes % 2 == 1


def _config_split_key_value(logical_line: str) -> tuple[str, str]:
    """Split one logical line at the first unescaped separator."""

    position = 0
    line_length = len(logical_line)
    while position < line_length:
        character = logical_line[position]
        if character == "\\":
            position += 2
            continue
        if character in _KEY_TERMINATORS:
            return logical_line[:position], logical_line[position + 1 :].lstrip(_WHITESPACE)
        if character in _WHITESPACE:
            value_start = position
            while value_start < line_length and logical_line[value_start] in _WHITESPACE:
                value_start += 1
            if value_start < line_length and logical_line[value_start] in _KEY_TERMINATORS:
                value_start += 1
            return logical_line[:position], logical_line[value_start:].lstrip(_WHITESPACE)
        position += 1
    return logical_line, ""


def _config_unescape(raw_text: str) -> str:
    """Resolve backslash escapes in one key or value."""

    if "\\" not in raw_text:
        return raw_text

    resolved_characters: list[str] = []
    position = 0
    text_length = len(raw_text)
    while position < text_length:
        character = raw_text[position]
        position += 1
        if character != "\\":
            resolved_characters.append(character)
            continue
        if position >= text_length:
            break

        escaped_character = raw_text[position]
        position += 1
        if escaped_character == "u":
            hex_digits = raw_text[position : position + 4]
            if len(hex_digits) != 4 or any(digit not in "0123456789abcdefABCDEF" for digit in hex_digits):
                raise RuntimePropertiesFormatError(f"Malformed \\uxxxx encoding: \\u{hex_digits}")
            resolved_characters.append(chr(int(hex_digits, 16)))
            position += 4
            continue
        resolved_characters.append(_SIMPLE_ESCAPES.get(escaped_character, escaped_character))
    return "".join(resolved_characters)

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import math

import pytest

from esdown.esc.syntax.literal_reader import LiteralSyntaxError, read_literal


@pytest.mark.parametrize(
	"text, expected",
	[
		('"plain"', "plain"),
		("'single'", "single"),
		('"a\\tb"', "a\tb"),
		('"\\b\\f\\n\\r\\t\\v"', "\b\f\n\r\t\v"),
		('"\\x41\\u0042\\u{43}"', "ABC"),
		('"\\0"', "\0"),
		('"\\101"', "A"),
		('"it\\\'s \\"q\\" \\\\"', "it's \"q\" \\"),
		('"\\q"', "q"),
		('"line\\\ncontinued"', "linecontinued"),
		('"\\ud83d\\ude00"', "\U0001F600"),
		('"\\u{1F600}"', "\U0001F600"),
		('""', ""),
	],
)
def test_string_literals_decode(text: str, expected: str) -> None:
	assert read_literal(text) == expected


def test_unpaired_surrogate_survives() -> None:
	assert read_literal('"\\ud800x"') == "\ud800x"


@pytest.mark.parametrize(
	"text, expected",
	[
		("0", 0),
		("42", 42),
		("-7", -7),
		("1.5", 1.5),
		(".5", 0.5),
		("1e+21", 1e21),
		("1e-7", 1e-7),
		("0x1F", 31),
		("0o17", 15),
		("0b101", 5),
		("Infinity", math.inf),
		("-Infinity", -math.inf),
	],
)
def test_number_literals_decode(text: str, expected: float) -> None:
	assert read_literal(text) == expected


def test_nan_decodes() -> None:
	assert math.isnan(read_literal("NaN"))  # type: ignore[arg-type]


def test_keyword_literals_decode() -> None:
	assert read_literal("true") is True
	assert read_literal("false") is False
	assert read_literal("null") is None


@pytest.mark.parametrize("text", ['"unterminated', "'mixed\"", "abc", "1 2", "", '"a"b', "--1"])
def test_malformed_literals_raise(text: str) -> None:
	with pytest.raises(LiteralSyntaxError):
		read_literal(text)


def test_malformed_escapes_raise_with_column() -> None:
	with pytest.raises(LiteralSyntaxError, match="malformed") as excinfo:
		read_literal('"ab\\x4"')
	assert excinfo.value.column == 4
	with pytest.raises(LiteralSyntaxError, match="out of range"):
		read_literal('"\\u{110000}"')


def test_literal_syntax_error_is_a_value_error() -> None:
	with pytest.raises(ValueError):
		read_literal("nope")

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Decode the text of a literal token into its runtime value.

Lowering passes need the value behind a literal (`"use strict"`, a numeric
property key, a string used as a label) without re-scanning source. The text
is checked against a small lark grammar (`literal.lark`) and then decoded:

  '"a\\x41"'  -> 'aA'
  '0x1F'      -> 31
  '1e+21'     -> 1e21
  'null'      -> None

String escapes follow ECMAScript: `\\uXXXX` escapes are UTF-16 code units and
surrogate pairs are merged into one code point; unpaired surrogates survive
as-is.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Union, cast

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

LiteralValue = Union[str, int, float, bool, None]

_GRAMMAR_PATH = Path(__file__).with_name("literal.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	maybe_placeholders=False,
)


class LiteralSyntaxError(ValueError):
	"""
	Literal token text that does not spell a literal.

	Carries the 1-based column of the offending character (when known) so a
	caller holding the token's span can report a precise location.
	"""

	def __init__(self, message: str, *, column: Optional[int] = None) -> None:
		super().__init__(message)
		self.column = column


_ESCAPE = re.compile(
	r"""\\(?:
		u\{(?P<code_point>[0-9a-fA-F]+)\}
		| u(?P<unit>[0-9a-fA-F]{4})
		| x(?P<byte>[0-9a-fA-F]{2})
		| (?P<octal>[0-3][0-7]{0,2}|[4-7][0-7]?)
		| (?P<continuation>\r\n|[\n\r\u2028\u2029])
		| (?P<char>[\s\S])
	)""",
	re.VERBOSE,
)

_SINGLE_CHAR_ESCAPES = {
	"b": "\b",
	"f": "\f",
	"n": "\n",
	"r": "\r",
	"t": "\t",
	"v": "\v",
}


def _decode_string_body(body: str, *, offset: int) -> str:
	def _replace(match: re.Match[str]) -> str:
		if match.group("code_point") is not None:
			code_point = int(match.group("code_point"), 16)
			if code_point > 0x10FFFF:
				raise LiteralSyntaxError(
					f"code point escape out of range: {match.group(0)!r}",
					column=offset + match.start() + 1,
				)
			return chr(code_point)
		if match.group("unit") is not None:
			return chr(int(match.group("unit"), 16))
		if match.group("byte") is not None:
			return chr(int(match.group("byte"), 16))
		if match.group("octal") is not None:
			return chr(int(match.group("octal"), 8))
		if match.group("continuation") is not None:
			return ""
		char = match.group("char")
		if char in ("x", "u"):
			raise LiteralSyntaxError(
				f"malformed \\{char} escape",
				column=offset + match.start() + 1,
			)
		return _SINGLE_CHAR_ESCAPES.get(char, char)

	decoded = _ESCAPE.sub(_replace, body)
	# Merge UTF-16 surrogate pairs produced by consecutive \\uXXXX escapes.
	return decoded.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def _decode_number(tok: Token) -> Union[int, float]:
	text = tok.value
	if tok.type == "NAN":
		return float("nan")
	if tok.type == "INFINITY":
		return float("inf")
	if tok.type == "HEX":
		return int(text[2:], 16)
	if tok.type == "OCTAL":
		return int(text[2:], 8)
	if tok.type == "BINARY":
		return int(text[2:], 2)
	if any(c in text for c in ".eE"):
		return float(text)
	return int(text, 10)


def _build_literal(tree: Tree) -> LiteralValue:
	kind = tree.data
	if kind == "true":
		return True
	if kind == "false":
		return False
	if kind == "null":
		return None
	if kind == "string":
		tok = cast(Token, tree.children[0])
		return _decode_string_body(tok.value[1:-1], offset=1)
	if kind == "number":
		toks = [c for c in tree.children if isinstance(c, Token)]
		negative = toks[0].type == "MINUS"
		value = _decode_number(toks[-1])
		return -value if negative else value
	raise TypeError(f"unexpected literal tree {kind!r}")


def read_literal(text: str) -> LiteralValue:
	"""Decode literal token text. Raises LiteralSyntaxError on malformed text."""
	try:
		tree = _PARSER.parse(text)
	except UnexpectedInput as exc:
		raise LiteralSyntaxError(
			f"invalid literal {text!r}",
			column=getattr(exc, "column", None),
		) from exc
	return _build_literal(tree)


__all__ = ["LiteralSyntaxError", "LiteralValue", "read_literal"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token kinds.

Each member's value is the source text of the token (operators, keywords,
punctuators). The three "open" kinds (identifiers, string and number
literals) carry a descriptive value instead; their text lives on the token.
"""

from __future__ import annotations

from enum import Enum


class TokenType(Enum):
	# Open kinds
	IDENTIFIER = "identifier"
	STRING = "string literal"
	NUMBER = "number literal"

	# Literal keywords
	TRUE = "true"
	FALSE = "false"
	NULL = "null"

	# Declaration keywords
	VAR = "var"
	LET = "let"
	CONST = "const"

	# Keyword operators
	VOID = "void"
	TYPEOF = "typeof"
	DELETE = "delete"
	IN = "in"
	INSTANCEOF = "instanceof"

	# Assignment
	EQUAL = "="
	PLUS_EQUAL = "+="
	MINUS_EQUAL = "-="
	STAR_EQUAL = "*="
	SLASH_EQUAL = "/="
	PERCENT_EQUAL = "%="
	AMPERSAND_EQUAL = "&="
	BAR_EQUAL = "|="
	CARET_EQUAL = "^="
	LEFT_SHIFT_EQUAL = "<<="
	RIGHT_SHIFT_EQUAL = ">>="
	UNSIGNED_RIGHT_SHIFT_EQUAL = ">>>="

	# Arithmetic and bitwise
	PLUS = "+"
	MINUS = "-"
	STAR = "*"
	SLASH = "/"
	PERCENT = "%"
	AMPERSAND = "&"
	BAR = "|"
	CARET = "^"
	TILDE = "~"
	LEFT_SHIFT = "<<"
	RIGHT_SHIFT = ">>"
	UNSIGNED_RIGHT_SHIFT = ">>>"
	PLUS_PLUS = "++"
	MINUS_MINUS = "--"

	# Logical and comparison
	BANG = "!"
	AND = "&&"
	OR = "||"
	EQUAL_EQUAL = "=="
	NOT_EQUAL = "!="
	EQUAL_EQUAL_EQUAL = "==="
	NOT_EQUAL_EQUAL = "!=="
	OPEN_ANGLE = "<"
	CLOSE_ANGLE = ">"
	LESS_EQUAL = "<="
	GREATER_EQUAL = ">="

	# Punctuators
	COMMA = ","
	DOT_DOT_DOT = "..."

	def __str__(self) -> str:
		return self.value

	@property
	def is_assignment_operator(self) -> bool:
		return self in _ASSIGNMENT_OPERATORS


_ASSIGNMENT_OPERATORS = frozenset(
	{
		TokenType.EQUAL,
		TokenType.PLUS_EQUAL,
		TokenType.MINUS_EQUAL,
		TokenType.STAR_EQUAL,
		TokenType.SLASH_EQUAL,
		TokenType.PERCENT_EQUAL,
		TokenType.AMPERSAND_EQUAL,
		TokenType.BAR_EQUAL,
		TokenType.CARET_EQUAL,
		TokenType.LEFT_SHIFT_EQUAL,
		TokenType.RIGHT_SHIFT_EQUAL,
		TokenType.UNSIGNED_RIGHT_SHIFT_EQUAL,
	}
)


__all__ = ["TokenType"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lexical units.

Tokens are immutable. Tokens produced by the scanner carry a `Span`; tokens
built by the codegen factory carry `location=None`, which is what marks them
as synthetic.

  Token           operators, keywords, boolean literals
  IdentifierToken names (type is always IDENTIFIER)
  LiteralToken    string/number/null literals, text kept exactly as written
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from esdown.esc.core.span import Span
from esdown.esc.syntax.literal_reader import read_literal
from esdown.esc.syntax.token_type import TokenType


@dataclass(frozen=True)
class Token:
	type: TokenType
	location: Optional[Span] = field(default=None, kw_only=True)

	@property
	def is_synthetic(self) -> bool:
		return self.location is None

	def __str__(self) -> str:
		return self.type.value


@dataclass(frozen=True)
class IdentifierToken(Token):
	value: str
	type: TokenType = field(default=TokenType.IDENTIFIER, init=False)

	def __str__(self) -> str:
		return self.value


@dataclass(frozen=True)
class LiteralToken(Token):
	value: str

	@property
	def processed_value(self) -> Union[str, int, float, bool, None]:
		"""
		The literal's runtime value, decoded from its source text.

		`"a\\tb"` yields the three characters `a`, TAB, `b`; `0x10` yields 16.
		"""
		return read_literal(self.value)

	def __str__(self) -> str:
		return self.value


__all__ = ["Token", "IdentifierToken", "LiteralToken"]

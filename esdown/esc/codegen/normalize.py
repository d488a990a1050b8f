# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Input normalization for the tree factory.

Builders accept names in several shapes and children either as one sequence
or as separate arguments. Every coercion lives here exactly once; builders in
`factory` and `derived` call these instead of inspecting inputs themselves.

Name coercions:

  input                  to_binding_identifier      to_identifier_expression
  ---------------------  -------------------------  -------------------------
  "x"                    new token "x"              new token "x"
  IdentifierToken        wrapped                    wrapped
  BindingIdentifier      returned unchanged         its token, its location
  IdentifierExpression   its token, its location    returned unchanged

Conversions between the two node shapes reuse the existing token rather than
rebuilding one from the name text.
"""

from __future__ import annotations

from typing import Sequence, Tuple, Union

from esdown.esc.syntax.tokens import IdentifierToken
from esdown.esc.syntax.trees import BindingIdentifier, IdentifierExpression, ParseTree

NameLike = Union[str, IdentifierToken, BindingIdentifier, IdentifierExpression]
TokenLike = Union[str, IdentifierToken]


def to_identifier_token(name: TokenLike) -> IdentifierToken:
	if isinstance(name, IdentifierToken):
		return name
	if isinstance(name, str):
		return IdentifierToken(name)
	raise TypeError(f"expected a name or IdentifierToken, got {type(name).__name__}")


def to_binding_identifier(name: NameLike) -> BindingIdentifier:
	"""Coerce `name` into declaration position."""
	if isinstance(name, BindingIdentifier):
		return name
	if isinstance(name, IdentifierExpression):
		return BindingIdentifier(name.identifier_token, location=name.location)
	if isinstance(name, (str, IdentifierToken)):
		return BindingIdentifier(to_identifier_token(name))
	raise TypeError(f"cannot bind {type(name).__name__} as an identifier")


def to_identifier_expression(name: NameLike) -> IdentifierExpression:
	"""Coerce `name` into reference position."""
	if isinstance(name, IdentifierExpression):
		return name
	if isinstance(name, BindingIdentifier):
		return IdentifierExpression(name.identifier_token, location=name.location)
	if isinstance(name, (str, IdentifierToken)):
		return IdentifierExpression(to_identifier_token(name))
	raise TypeError(f"cannot reference {type(name).__name__} as an identifier")


def tree_list(items: Sequence[object]) -> Tuple[ParseTree, ...]:
	"""
	Canonical "one sequence or several elements" rule.

	`items` is the positional argument tuple of a variadic builder. When its
	first element is itself a list or tuple, that sequence supplies the
	elements (any further items are appended after it); otherwise every item
	is an element. The result is always a fresh tuple:

	  tree_list(())            -> ()
	  tree_list(([a, b],))     -> (a, b)
	  tree_list((a, b))        -> (a, b)
	  tree_list(([a], b))      -> (a, b)
	"""
	if not items:
		return ()
	head = items[0]
	if isinstance(head, (list, tuple)):
		return tuple(head) + tuple(items[1:])  # type: ignore[arg-type]
	return tuple(items)  # type: ignore[arg-type]


__all__ = [
	"NameLike",
	"TokenLike",
	"to_identifier_token",
	"to_binding_identifier",
	"to_identifier_expression",
	"tree_list",
]

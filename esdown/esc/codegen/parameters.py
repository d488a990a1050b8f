# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Formal parameter lists and the argument lists that forward them.

Synthetic functions that need N parameters but have no source names for them
use positional names (`$0`, `$1`, ...). A wrapper that must pass its whole
signature through to an inner call builds its argument list with
`create_argument_list_from_parameter_list`:

  function($0, $1, ...$2) { return inner($0, $1, ...$2); }
"""

from __future__ import annotations

from typing import Sequence, Union

from esdown.esc.codegen.factory import (
	create_binding_element,
	create_empty_parameter_list,
	create_identifier_expression,
	create_rest_parameter,
	create_spread_expression,
)
from esdown.esc.syntax.predefined import parameter_name
from esdown.esc.syntax.tokens import IdentifierToken
from esdown.esc.syntax.trees import (
	ArgumentList,
	BindingElement,
	BindingIdentifier,
	FormalParameterList,
	IdentifierExpression,
	ParseTree,
	RestParameter,
)

ParameterSpec = Union[str, int, IdentifierToken, Sequence[str]]


def _positional_parameters(count: int, has_rest_params: bool) -> FormalParameterList:
	parameters = []
	for index in range(count):
		name = parameter_name(index)
		if has_rest_params and index == count - 1:
			parameters.append(create_rest_parameter(name))
		else:
			parameters.append(create_binding_element(name))
	return FormalParameterList(tuple(parameters))


def create_parameter_list(*args: ParameterSpec) -> FormalParameterList:
	"""
	Build a parameter list from one of:

	  create_parameter_list("a", "b")     named parameters
	  create_parameter_list(["a", "b"])   the same, from a sequence
	  create_parameter_list(token)        a single parameter
	  create_parameter_list(3)            $0, $1, $2
	"""
	if not args:
		return create_empty_parameter_list()
	first = args[0]
	if isinstance(first, bool):
		raise TypeError("parameter count must be an int, not bool")
	if isinstance(first, int):
		return _positional_parameters(first, has_rest_params=False)
	if isinstance(first, IdentifierToken):
		return FormalParameterList((create_binding_element(first),))
	if isinstance(first, str):
		return FormalParameterList(tuple(create_binding_element(name) for name in args))  # type: ignore[arg-type]
	if isinstance(first, (list, tuple)):
		return FormalParameterList(tuple(create_binding_element(name) for name in first))
	raise TypeError(f"cannot build a parameter list from {type(first).__name__}")


def create_parameter_list_with_rest_params(count: int) -> FormalParameterList:
	"""`count` positional parameters, the last one a rest parameter."""
	return _positional_parameters(count, has_rest_params=True)


def create_parameter_reference(index: int) -> IdentifierExpression:
	"""Reference to the `index`-th positional parameter."""
	return create_identifier_expression(parameter_name(index))


def _forward_parameter(parameter: ParseTree) -> ParseTree:
	if isinstance(parameter, RestParameter):
		return create_spread_expression(create_identifier_expression(parameter.identifier))
	if isinstance(parameter, BindingElement) and isinstance(parameter.binding, BindingIdentifier):
		return create_identifier_expression(parameter.binding)
	if isinstance(parameter, BindingIdentifier):
		return create_identifier_expression(parameter)
	# TODO: rebuild destructuring patterns as array/object literals on the
	# argument side; until then they are forwarded unchanged.
	return parameter


def create_argument_list_from_parameter_list(formal_parameter_list: FormalParameterList) -> ArgumentList:
	"""
	Arguments that pass every declared parameter through, in order.

	A trailing rest parameter is forwarded as a spread of its reference.
	"""
	return ArgumentList(tuple(_forward_parameter(p) for p in formal_parameter_list.parameters))


def create_argument_list_for_arity(count: int) -> ArgumentList:
	"""Forwarding arguments for `create_parameter_list(count)`: `$0, ..., $count-1`."""
	return create_argument_list_from_parameter_list(create_parameter_list(count))


__all__ = [
	"ParameterSpec",
	"create_parameter_list",
	"create_parameter_list_with_rest_params",
	"create_parameter_reference",
	"create_argument_list_from_parameter_list",
	"create_argument_list_for_arity",
]

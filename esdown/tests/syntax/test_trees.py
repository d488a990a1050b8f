# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import dataclasses

import pytest

from esdown.esc.core.span import Span
from esdown.esc.syntax.token_type import TokenType
from esdown.esc.syntax.tokens import IdentifierToken, Token
from esdown.esc.syntax import trees as T


def _ref(name: str) -> T.IdentifierExpression:
	return T.IdentifierExpression(IdentifierToken(name))


def test_every_node_class_has_a_distinct_type_tag() -> None:
	classes = [
		value
		for value in vars(T).values()
		if isinstance(value, type) and issubclass(value, T.ParseTree) and value is not T.ParseTree
	]
	tags = [cls.type for cls in classes]
	assert len(tags) == len(set(tags))
	assert set(tags) == set(T.ParseTreeType)


def test_nodes_are_frozen_and_structurally_equal() -> None:
	a = T.Block((T.ExpressionStatement(_ref("x")),))
	b = T.Block((T.ExpressionStatement(_ref("x")),))
	assert a == b
	with pytest.raises(dataclasses.FrozenInstanceError):
		a.statements = ()  # type: ignore[misc]


def test_location_marks_parsed_nodes() -> None:
	parsed = T.ThisExpression(location=Span(file="a.js", line=1, column=1))
	assert not parsed.is_synthetic
	assert T.ThisExpression().is_synthetic


def test_iter_child_trees_skips_tokens_and_flattens_tuples() -> None:
	x, y = _ref("x"), _ref("y")
	op = T.BinaryOperator(x, Token(TokenType.PLUS), y)
	assert list(op.iter_child_trees()) == [x, y]
	args = T.ArgumentList((x, y))
	call = T.CallExpression(_ref("f"), args)
	assert list(call.iter_child_trees()) == [_ref("f"), args]
	assert list(args.iter_child_trees()) == [x, y]


def test_binary_operator_knows_assignments() -> None:
	assign = T.BinaryOperator(_ref("a"), Token(TokenType.EQUAL), _ref("b"))
	add = T.BinaryOperator(_ref("a"), Token(TokenType.PLUS), _ref("b"))
	assert assign.is_assignment
	assert not add.is_assignment


def test_formal_parameter_list_rest_detection() -> None:
	plain = T.FormalParameterList((T.BindingElement(T.BindingIdentifier(IdentifierToken("a"))),))
	rest = T.FormalParameterList((T.RestParameter(T.BindingIdentifier(IdentifierToken("r"))),))
	assert not plain.has_rest_parameter
	assert rest.has_rest_parameter
	assert not T.FormalParameterList(()).has_rest_parameter

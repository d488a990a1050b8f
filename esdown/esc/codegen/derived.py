# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Composite lowering idioms built from the structural builders.

Each helper returns the canonical tree for one idiom the lowering passes
emit repeatedly:

  create_scoped_expression(b)         (function() { b }).call(this)
  create_bound_call(f, t)             f.bind(t)
  create_call_call(f, t, a, b)        f.call(t, a, b)
  create_define_property(o, "k", d)   Object.defineProperty(o, "k", {...d})
  create_object_create(p, d)          Object.create(p, d)
  create_object_freeze(v)             Object.freeze(v)
  create_assign_state_statement(3)    $state = 3;

Scoped blocks give block-scoped bindings a function scope of their own. The
wrapper changes the meaning of `return`, `break` and `continue` that leave
the block, and of `arguments`; callers only apply it where the block has
none of those. Nothing here checks.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Union

from esdown.esc.codegen.factory import (
	create_argument_list,
	create_assignment_statement,
	create_block,
	create_boolean_literal,
	create_call_expression,
	create_empty_parameter_list,
	create_expression_statement,
	create_function_expression,
	create_identifier_expression,
	create_member_expression,
	create_number_literal,
	create_object_literal_expression,
	create_paren_expression,
	create_property_name_assignment,
	create_string_literal,
	create_this_expression,
)
from esdown.esc.codegen.normalize import tree_list
from esdown.esc.syntax import predefined
from esdown.esc.syntax.trees import (
	Block,
	CallExpression,
	ExpressionStatement,
	FunctionExpression,
	ObjectLiteralExpression,
	ParseTree,
)

DescriptorValue = Union[bool, ParseTree]


# Scoped blocks

def create_scoped_expression(block: Block) -> CallExpression:
	return create_call_call(
		create_paren_expression(create_function_expression(create_empty_parameter_list(), block)),
		create_this_expression(),
	)


def create_scoped_block(block: Block) -> ExpressionStatement:
	return create_expression_statement(create_scoped_expression(block))


def create_scoped_statements(*statements: Union[ParseTree, Sequence[ParseTree]]) -> ExpressionStatement:
	return create_scoped_block(create_block(tree_list(statements)))


# Calls through Function.prototype

def create_bound_call(func: ParseTree, this_tree: ParseTree) -> CallExpression:
	"""`func.bind(this_tree)`; a function literal callee is parenthesized first."""
	if isinstance(func, FunctionExpression):
		func = create_paren_expression(func)
	return create_call_expression(
		create_member_expression(func, predefined.BIND),
		create_argument_list(this_tree),
	)


def create_call_call(
	func: ParseTree,
	this_expression: ParseTree,
	*args: Union[ParseTree, Sequence[ParseTree]],
) -> CallExpression:
	"""`func.call(this_expression, ...args)`; args as a sequence or as arguments."""
	return create_call_expression(
		create_member_expression(func, predefined.CALL),
		create_argument_list((this_expression,) + tree_list(args)),
	)


def create_call_call_statement(func: ParseTree, this_expression: ParseTree, *args: ParseTree) -> ExpressionStatement:
	return create_expression_statement(create_call_call(func, this_expression, args))


# Object model

def create_property_descriptor(descr: Mapping[str, DescriptorValue]) -> ObjectLiteralExpression:
	"""
	Object literal for a property descriptor.

	Booleans become `true`/`false` literals; trees are used as given. Entries
	keep the mapping's order.
	"""
	entries = []
	for name, value in descr.items():
		if not isinstance(value, ParseTree):
			value = create_boolean_literal(bool(value))
		entries.append(create_property_name_assignment(name, value))
	return create_object_literal_expression(entries)


def create_define_property(
	tree: ParseTree,
	name: Union[str, ParseTree],
	descr: Mapping[str, DescriptorValue],
) -> CallExpression:
	"""`Object.defineProperty(tree, name, descriptor)`; a str name becomes a string literal."""
	if isinstance(name, str):
		name = create_string_literal(name)
	return create_call_expression(
		create_member_expression(predefined.OBJECT, predefined.DEFINE_PROPERTY),
		create_argument_list(tree, name, create_property_descriptor(descr)),
	)


def create_object_create(
	proto_expression: ParseTree,
	descriptors: Optional[ObjectLiteralExpression] = None,
) -> CallExpression:
	args = [proto_expression]
	if descriptors is not None:
		args.append(descriptors)
	return create_call_expression(
		create_member_expression(predefined.OBJECT, predefined.CREATE),
		create_argument_list(args),
	)


def create_object_freeze(value: ParseTree) -> CallExpression:
	return create_call_expression(
		create_member_expression(predefined.OBJECT, predefined.FREEZE),
		create_argument_list(value),
	)


def create_object_prevent_extensions(value: ParseTree) -> CallExpression:
	return create_call_expression(
		create_member_expression(predefined.OBJECT, predefined.PREVENT_EXTENSIONS),
		create_argument_list(value),
	)


# Generator state machine

def create_assign_state_statement(state: int) -> ExpressionStatement:
	"""
	`$state = <state>;`

	The single step the generator transformer composes into its dispatch
	loop; the shape of the loop itself belongs to that transformer.
	"""
	return create_assignment_statement(
		create_identifier_expression(predefined.STATE),
		create_number_literal(state),
	)


__all__ = [
	"DescriptorValue",
	"create_scoped_expression",
	"create_scoped_block",
	"create_scoped_statements",
	"create_bound_call",
	"create_call_call",
	"create_call_call_statement",
	"create_property_descriptor",
	"create_define_property",
	"create_object_create",
	"create_object_freeze",
	"create_object_prevent_extensions",
	"create_assign_state_statement",
]

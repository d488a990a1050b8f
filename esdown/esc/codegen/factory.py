# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Synthetic parse tree factory: tokens and one builder per production.

Lowering passes use these instead of calling node constructors directly so
that names, literals and child lists always arrive in canonical form. Every
builder returns a fresh, fully populated node with `location=None`; nothing
here caches, counts or mutates.

Builders that take children "as a list or as arguments" accept either form
(`create_block([a, b])` and `create_block(a, b)` build equal trees); see
`normalize.tree_list`.

Composite lowering idioms (scoped blocks, bound calls, property descriptors,
generator state assignments) live in `derived`; parameter and forwarding
argument lists live in `parameters`.
"""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal
from typing import Optional, Sequence, Union

from esdown.esc.codegen.normalize import (
	NameLike,
	TokenLike,
	to_binding_identifier,
	to_identifier_expression,
	to_identifier_token,
	tree_list,
)
from esdown.esc.syntax import predefined
from esdown.esc.syntax.token_type import TokenType
from esdown.esc.syntax.tokens import IdentifierToken, LiteralToken, Token
from esdown.esc.syntax.trees import (
	ArgumentList,
	ArrayLiteralExpression,
	ArrayPattern,
	BinaryOperator,
	BindingElement,
	BindingIdentifier,
	Block,
	BreakStatement,
	CallExpression,
	CascadeExpression,
	CaseClause,
	Catch,
	ClassDeclaration,
	CommaExpression,
	ConditionalExpression,
	ContinueStatement,
	DefaultClause,
	DoWhileStatement,
	EmptyStatement,
	ExpressionStatement,
	Finally,
	ForInStatement,
	ForOfStatement,
	ForStatement,
	FormalParameterList,
	FunctionExpression,
	GetAccessor,
	IdentifierExpression,
	IfStatement,
	LabelledStatement,
	LiteralExpression,
	MemberExpression,
	MemberLookupExpression,
	NewExpression,
	ObjectLiteralExpression,
	ObjectPattern,
	ObjectPatternField,
	ParenExpression,
	ParseTree,
	PostfixExpression,
	Program,
	PropertyNameAssignment,
	RestParameter,
	ReturnStatement,
	SetAccessor,
	SpreadExpression,
	SpreadPatternElement,
	SwitchStatement,
	ThisExpression,
	ThrowStatement,
	Trees,
	TryStatement,
	UnaryExpression,
	VariableDeclaration,
	VariableDeclarationList,
	VariableStatement,
	WhileStatement,
	WithStatement,
	YieldExpression,
)

Number = Union[int, float]


# Tokens

def create_operator_token(operator: TokenType) -> Token:
	return Token(operator)


def create_identifier_token(identifier: str) -> IdentifierToken:
	return IdentifierToken(identifier)


_ARRAY_INDEX = re.compile(r"0|[1-9][0-9]*")


def _is_identifier_name(name: str) -> bool:
	# `$` is an identifier character in the target grammar but not in Python.
	return name.replace("$", "_").isidentifier()


def create_property_name_token(name: str) -> Token:
	"""
	Token for a property key in an object literal or accessor.

	  "foo"   -> IdentifierToken foo
	  "42"    -> NUMBER 42        (canonical array index)
	  "a-b"   -> STRING "a-b"     (anything else that is not an identifier)
	"""
	if _is_identifier_name(name):
		return create_identifier_token(name)
	if _ARRAY_INDEX.fullmatch(name):
		return LiteralToken(TokenType.NUMBER, name)
	return create_string_literal_token(name)


def create_string_literal_token(value: str) -> LiteralToken:
	# JSON string syntax is a subset of the target's string literal syntax, so
	# the encoded text reads back as exactly `value`.
	return LiteralToken(TokenType.STRING, json.dumps(value))


def create_boolean_literal_token(value: bool) -> Token:
	return Token(TokenType.TRUE if value else TokenType.FALSE)


def create_null_literal_token() -> LiteralToken:
	return LiteralToken(TokenType.NULL, "null")


def format_number(value: Number) -> str:
	"""
	Render a number the way the target runtime's `String(value)` does.

	Shortest round-trip digits, plain notation for decimal exponents in
	[-7, 21), exponent notation (`1e+21`, `1.5e-7`) outside it. Integers
	beyond the float range become `Infinity`, as `Number(value)` would.
	"""
	if isinstance(value, bool):
		raise TypeError("number literal must be an int or float, not bool")
	if isinstance(value, int):
		if abs(value) < 10**21:
			return str(value)
		try:
			value = float(value)
		except OverflowError:
			value = math.inf if value > 0 else -math.inf
	if value != value:
		return "NaN"
	if value == 0:
		return "0"
	if value < 0:
		return "-" + format_number(-value)
	if value == math.inf:
		return "Infinity"

	decimal = Decimal(repr(value)).normalize()
	_, digit_tuple, exponent = decimal.as_tuple()
	digits = "".join(str(d) for d in digit_tuple)
	k = len(digits)
	n = int(exponent) + k

	if k <= n <= 21:
		return digits + "0" * (n - k)
	if 0 < n <= 21:
		return digits[:n] + "." + digits[n:]
	if -6 < n <= 0:
		return "0." + "0" * (-n) + digits
	e = n - 1
	sign = "+" if e >= 0 else "-"
	mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
	return f"{mantissa}e{sign}{abs(e)}"


def create_number_literal_token(value: Number) -> LiteralToken:
	return LiteralToken(TokenType.NUMBER, format_number(value))


# Lists

def create_empty_list() -> list:
	return []


def create_empty_parameters() -> list:
	return []


def create_statement_list(*statements: Union[ParseTree, Sequence[ParseTree]]) -> Trees:
	"""Statements as one sequence (optionally followed by more) or as arguments."""
	return tree_list(statements)


# Literals

def create_string_literal(value: str) -> LiteralExpression:
	return LiteralExpression(create_string_literal_token(value))


def create_boolean_literal(value: bool) -> LiteralExpression:
	return LiteralExpression(create_boolean_literal_token(value))


def create_true_literal() -> LiteralExpression:
	return create_boolean_literal(True)


def create_false_literal() -> LiteralExpression:
	return create_boolean_literal(False)


def create_null_literal() -> LiteralExpression:
	return LiteralExpression(create_null_literal_token())


def create_number_literal(value: Number) -> LiteralExpression:
	return LiteralExpression(create_number_literal_token(value))


# Names

def create_binding_identifier(identifier: NameLike) -> BindingIdentifier:
	return to_binding_identifier(identifier)


def create_identifier_expression(identifier: NameLike) -> IdentifierExpression:
	return to_identifier_expression(identifier)


def create_undefined_expression() -> IdentifierExpression:
	return create_identifier_expression(predefined.UNDEFINED)


def create_this_expression(member_name: Optional[TokenLike] = None) -> ParseTree:
	"""`this`, or `this.member_name` when a member is given."""
	if member_name:
		return create_member_expression(create_this_expression(), member_name)
	return ThisExpression()


# Parameters

def create_binding_element(identifier: NameLike, initializer: Optional[ParseTree] = None) -> BindingElement:
	return BindingElement(create_binding_identifier(identifier), initializer)


def create_rest_parameter(identifier: NameLike) -> RestParameter:
	return RestParameter(create_binding_identifier(identifier))


def create_empty_parameter_list() -> FormalParameterList:
	return FormalParameterList(())


# Expressions

def create_argument_list(*args: Union[ParseTree, Sequence[ParseTree]]) -> ArgumentList:
	return ArgumentList(tree_list(args))


def create_empty_argument_list() -> ArgumentList:
	return ArgumentList(())


def create_array_literal_expression(*elements: Union[ParseTree, Sequence[ParseTree]]) -> ArrayLiteralExpression:
	return ArrayLiteralExpression(tree_list(elements))


def create_empty_array_literal_expression() -> ArrayLiteralExpression:
	return create_array_literal_expression()


def create_array_pattern(elements: Sequence[ParseTree]) -> ArrayPattern:
	return ArrayPattern(tuple(elements))


def create_assignment_expression(lhs: ParseTree, rhs: ParseTree) -> BinaryOperator:
	return BinaryOperator(lhs, create_operator_token(TokenType.EQUAL), rhs)


def create_binary_operator(left: ParseTree, operator: Token, right: ParseTree) -> BinaryOperator:
	return BinaryOperator(left, operator, right)


def create_call_expression(operand: ParseTree, args: Optional[ArgumentList] = None) -> CallExpression:
	return CallExpression(operand, args if args is not None else create_empty_argument_list())


def create_cascade_expression(operand: ParseTree, expressions: Sequence[ParseTree]) -> CascadeExpression:
	return CascadeExpression(operand, tuple(expressions))


def create_comma_expression(*expressions: Union[ParseTree, Sequence[ParseTree]]) -> CommaExpression:
	return CommaExpression(tree_list(expressions))


def create_conditional_expression(condition: ParseTree, left: ParseTree, right: ParseTree) -> ConditionalExpression:
	return ConditionalExpression(condition, left, right)


def create_function_expression(
	formal_parameter_list: FormalParameterList,
	function_body: Block,
	*,
	name: Optional[NameLike] = None,
	is_generator: bool = False,
) -> FunctionExpression:
	binding = create_binding_identifier(name) if name is not None else None
	return FunctionExpression(binding, is_generator, formal_parameter_list, function_body)


def create_get_accessor(name: Union[str, Token], body: Block) -> GetAccessor:
	if isinstance(name, str):
		name = create_property_name_token(name)
	return GetAccessor(name, body)


def create_set_accessor(name: Union[str, Token], parameter: TokenLike, body: Block) -> SetAccessor:
	if isinstance(name, str):
		name = create_property_name_token(name)
	return SetAccessor(name, to_identifier_token(parameter), body)


def create_member_expression(
	operand: Union[str, IdentifierToken, ParseTree],
	member_name: TokenLike,
	*member_names: TokenLike,
) -> MemberExpression:
	"""
	`operand.member_name[.more...]`.

	A name or token operand is a reference: `create_member_expression("Object",
	"defineProperty")` reads the global `Object`.
	"""
	if isinstance(operand, (str, IdentifierToken)):
		operand = create_identifier_expression(operand)
	tree = MemberExpression(operand, to_identifier_token(member_name))
	for name in member_names:
		tree = MemberExpression(tree, to_identifier_token(name))
	return tree


def create_member_lookup_expression(operand: ParseTree, member_expression: ParseTree) -> MemberLookupExpression:
	return MemberLookupExpression(operand, member_expression)


def create_new_expression(operand: ParseTree, args: Optional[ArgumentList] = None) -> NewExpression:
	return NewExpression(operand, args)


def create_object_literal_expression(
	*property_name_and_values: Union[ParseTree, Sequence[ParseTree]],
) -> ObjectLiteralExpression:
	return ObjectLiteralExpression(tree_list(property_name_and_values))


def create_property_name_assignment(identifier: Union[str, Token], value: ParseTree) -> PropertyNameAssignment:
	if isinstance(identifier, str):
		identifier = create_property_name_token(identifier)
	return PropertyNameAssignment(identifier, value)


def create_paren_expression(expression: ParseTree) -> ParenExpression:
	return ParenExpression(expression)


def create_postfix_expression(operand: ParseTree, operator: Token) -> PostfixExpression:
	return PostfixExpression(operand, operator)


def create_unary_expression(operator: Token, operand: ParseTree) -> UnaryExpression:
	return UnaryExpression(operator, operand)


def create_spread_expression(expression: ParseTree) -> SpreadExpression:
	return SpreadExpression(expression)


def create_void_0() -> ParenExpression:
	"""`(void 0)`, the unshadowable spelling of undefined."""
	return create_paren_expression(
		create_unary_expression(create_operator_token(TokenType.VOID), create_number_literal(0))
	)


# Patterns

def create_object_pattern(fields: Sequence[ParseTree]) -> ObjectPattern:
	return ObjectPattern(tuple(fields))


def create_object_pattern_field(identifier: NameLike, element: Optional[ParseTree]) -> ObjectPatternField:
	return ObjectPatternField(create_binding_identifier(identifier), element)


def create_spread_pattern_element(lvalue: ParseTree) -> SpreadPatternElement:
	return SpreadPatternElement(lvalue)


# Statements

def create_block(*statements: Union[ParseTree, Sequence[ParseTree]]) -> Block:
	return Block(tree_list(statements))


def create_empty_block() -> Block:
	return create_block()


def create_empty_statement() -> EmptyStatement:
	return EmptyStatement()


def create_expression_statement(expression: ParseTree) -> ExpressionStatement:
	return ExpressionStatement(expression)


def create_assignment_statement(lhs: ParseTree, rhs: ParseTree) -> ExpressionStatement:
	return create_expression_statement(create_assignment_expression(lhs, rhs))


def create_call_statement(operand: ParseTree, args: Optional[ArgumentList] = None) -> ExpressionStatement:
	return create_expression_statement(create_call_expression(operand, args))


def create_yield_statement(expression: Optional[ParseTree], is_yield_for: bool = False) -> ExpressionStatement:
	return create_expression_statement(YieldExpression(expression, is_yield_for))


def create_use_strict_directive() -> ExpressionStatement:
	return create_expression_statement(create_string_literal(predefined.USE_STRICT))


def create_break_statement(name: Optional[TokenLike] = None) -> BreakStatement:
	return BreakStatement(to_identifier_token(name) if name else None)


def create_continue_statement(name: Optional[TokenLike] = None) -> ContinueStatement:
	return ContinueStatement(to_identifier_token(name) if name else None)


def create_return_statement(expression: Optional[ParseTree] = None) -> ReturnStatement:
	return ReturnStatement(expression)


def create_throw_statement(value: ParseTree) -> ThrowStatement:
	return ThrowStatement(value)


def create_labelled_statement(name: TokenLike, statement: ParseTree) -> LabelledStatement:
	return LabelledStatement(to_identifier_token(name), statement)


def create_if_statement(
	condition: ParseTree,
	if_clause: ParseTree,
	else_clause: Optional[ParseTree] = None,
) -> IfStatement:
	return IfStatement(condition, if_clause, else_clause)


def create_while_statement(condition: ParseTree, body: ParseTree) -> WhileStatement:
	return WhileStatement(condition, body)


def create_do_while_statement(body: ParseTree, condition: ParseTree) -> DoWhileStatement:
	return DoWhileStatement(body, condition)


def create_for_statement(
	variables: Optional[ParseTree],
	condition: Optional[ParseTree],
	increment: Optional[ParseTree],
	body: ParseTree,
) -> ForStatement:
	return ForStatement(variables, condition, increment, body)


def create_for_in_statement(initializer: ParseTree, collection: ParseTree, body: ParseTree) -> ForInStatement:
	return ForInStatement(initializer, collection, body)


def create_for_of_statement(
	initializer: VariableDeclarationList,
	collection: ParseTree,
	body: ParseTree,
) -> ForOfStatement:
	return ForOfStatement(initializer, collection, body)


def create_with_statement(expression: ParseTree, body: ParseTree) -> WithStatement:
	return WithStatement(expression, body)


def create_case_clause(expression: ParseTree, statements: Sequence[ParseTree]) -> CaseClause:
	return CaseClause(expression, tuple(statements))


def create_default_clause(statements: Sequence[ParseTree]) -> DefaultClause:
	return DefaultClause(tuple(statements))


def create_switch_statement(expression: ParseTree, case_clauses: Sequence[ParseTree]) -> SwitchStatement:
	return SwitchStatement(expression, tuple(case_clauses))


def create_catch(identifier: NameLike, catch_body: Block) -> Catch:
	return Catch(create_binding_identifier(identifier), catch_body)


def create_finally(block: Block) -> Finally:
	return Finally(block)


def create_try_statement(body: Block, *handlers: Union[Catch, Finally, None]) -> TryStatement:
	"""
	`try body catch` / `try body finally` / `try body catch finally`.

	With one handler its kind decides the slot; with two they are
	`(catch_block, finally_block)` and either may be None.
	"""
	if len(handlers) == 1:
		(handler,) = handlers
		if isinstance(handler, Catch):
			return TryStatement(body, handler, None)
		if isinstance(handler, Finally):
			return TryStatement(body, None, handler)
		raise TypeError(f"expected Catch or Finally, got {type(handler).__name__}")
	if len(handlers) == 2:
		catch_block, finally_block = handlers
		return TryStatement(body, catch_block, finally_block)  # type: ignore[arg-type]
	raise TypeError(f"try statement takes one or two handlers, got {len(handlers)}")


# Declarations

_DECLARATION_LVALUES = (BindingIdentifier, ObjectPattern, ArrayPattern)


def create_variable_declaration(
	identifier: Union[NameLike, ObjectPattern, ArrayPattern],
	initializer: Optional[ParseTree] = None,
) -> VariableDeclaration:
	if not isinstance(identifier, _DECLARATION_LVALUES):
		identifier = create_binding_identifier(identifier)
	return VariableDeclaration(identifier, initializer)


def create_variable_declaration_list(
	binding: TokenType,
	identifier_or_declarations: Union[NameLike, ObjectPattern, ArrayPattern, Sequence[VariableDeclaration]],
	initializer: Optional[ParseTree] = None,
) -> VariableDeclarationList:
	"""
	`var|let|const` declaration list.

	Either a ready sequence of VariableDeclaration nodes, or a single name or
	pattern plus optional initializer.
	"""
	if isinstance(identifier_or_declarations, (list, tuple)):
		return VariableDeclarationList(binding, tuple(identifier_or_declarations))
	declaration = create_variable_declaration(identifier_or_declarations, initializer)
	return VariableDeclarationList(binding, (declaration,))


def create_variable_statement(
	list_or_binding: Union[VariableDeclarationList, TokenType],
	identifier: Union[NameLike, ObjectPattern, ArrayPattern, Sequence[VariableDeclaration], None] = None,
	initializer: Optional[ParseTree] = None,
) -> VariableStatement:
	if isinstance(list_or_binding, VariableDeclarationList):
		return VariableStatement(list_or_binding)
	if identifier is None:
		raise TypeError("a variable statement built from a binding kind needs an identifier")
	declarations = create_variable_declaration_list(list_or_binding, identifier, initializer)
	return VariableStatement(declarations)


def create_class_declaration(
	name: NameLike,
	super_class: Optional[ParseTree],
	elements: Sequence[ParseTree],
) -> ClassDeclaration:
	return ClassDeclaration(create_binding_identifier(name), super_class, tuple(elements))


def create_program(program_elements: Sequence[ParseTree]) -> Program:
	return Program(tuple(program_elements))


__all__ = [name for name in dir() if name.startswith("create_")] + ["format_number", "Number"]

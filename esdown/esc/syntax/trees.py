# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parse tree node catalog.

One frozen dataclass per grammar production. The parser builds these from
source (with a `location`); lowering passes build them through
`esdown.esc.codegen.factory` (with `location=None`).

Guiding rules:
- Nodes are immutable. A pass that changes a tree builds a new node.
- Sequence children are tuples, so equality is structural all the way down.
- Names have three distinct shapes depending on syntactic role:
    IdentifierToken       the raw lexical name
    BindingIdentifier     a name being declared (`var x`, params, catch)
    IdentifierExpression  a name being referenced (`x + 1`)
  Use `esdown.esc.codegen.normalize` to move between them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, auto
from typing import ClassVar, Iterator, Optional, Tuple

from esdown.esc.core.span import Span
from esdown.esc.syntax.token_type import TokenType
from esdown.esc.syntax.tokens import IdentifierToken, Token


class ParseTreeType(Enum):
	ARGUMENT_LIST = auto()
	ARRAY_LITERAL_EXPRESSION = auto()
	ARRAY_PATTERN = auto()
	BINARY_OPERATOR = auto()
	BINDING_ELEMENT = auto()
	BINDING_IDENTIFIER = auto()
	BLOCK = auto()
	BREAK_STATEMENT = auto()
	CALL_EXPRESSION = auto()
	CASCADE_EXPRESSION = auto()
	CASE_CLAUSE = auto()
	CATCH = auto()
	CLASS_DECLARATION = auto()
	COMMA_EXPRESSION = auto()
	CONDITIONAL_EXPRESSION = auto()
	CONTINUE_STATEMENT = auto()
	DEFAULT_CLAUSE = auto()
	DO_WHILE_STATEMENT = auto()
	EMPTY_STATEMENT = auto()
	EXPRESSION_STATEMENT = auto()
	FINALLY = auto()
	FOR_IN_STATEMENT = auto()
	FOR_OF_STATEMENT = auto()
	FOR_STATEMENT = auto()
	FORMAL_PARAMETER_LIST = auto()
	FUNCTION_EXPRESSION = auto()
	GET_ACCESSOR = auto()
	IDENTIFIER_EXPRESSION = auto()
	IF_STATEMENT = auto()
	LABELLED_STATEMENT = auto()
	LITERAL_EXPRESSION = auto()
	MEMBER_EXPRESSION = auto()
	MEMBER_LOOKUP_EXPRESSION = auto()
	NEW_EXPRESSION = auto()
	OBJECT_LITERAL_EXPRESSION = auto()
	OBJECT_PATTERN = auto()
	OBJECT_PATTERN_FIELD = auto()
	PAREN_EXPRESSION = auto()
	POSTFIX_EXPRESSION = auto()
	PROGRAM = auto()
	PROPERTY_NAME_ASSIGNMENT = auto()
	REST_PARAMETER = auto()
	RETURN_STATEMENT = auto()
	SET_ACCESSOR = auto()
	SPREAD_EXPRESSION = auto()
	SPREAD_PATTERN_ELEMENT = auto()
	SWITCH_STATEMENT = auto()
	THIS_EXPRESSION = auto()
	THROW_STATEMENT = auto()
	TRY_STATEMENT = auto()
	UNARY_EXPRESSION = auto()
	VARIABLE_DECLARATION = auto()
	VARIABLE_DECLARATION_LIST = auto()
	VARIABLE_STATEMENT = auto()
	WHILE_STATEMENT = auto()
	WITH_STATEMENT = auto()
	YIELD_EXPRESSION = auto()


Trees = Tuple["ParseTree", ...]


@dataclass(frozen=True)
class ParseTree:
	"""Base class for all parse tree nodes."""

	type: ClassVar[ParseTreeType]
	location: Optional[Span] = field(default=None, kw_only=True)

	@property
	def is_synthetic(self) -> bool:
		return self.location is None

	def iter_child_trees(self) -> Iterator["ParseTree"]:
		"""Yield direct child trees in field order (tokens are not trees)."""
		for f in fields(self):
			if f.name == "location":
				continue
			value = getattr(self, f.name)
			if isinstance(value, ParseTree):
				yield value
			elif isinstance(value, tuple):
				for item in value:
					if isinstance(item, ParseTree):
						yield item


# Names

@dataclass(frozen=True)
class BindingIdentifier(ParseTree):
	"""Name in declaration position."""
	type = ParseTreeType.BINDING_IDENTIFIER
	identifier_token: IdentifierToken


@dataclass(frozen=True)
class IdentifierExpression(ParseTree):
	"""Name in reference position."""
	type = ParseTreeType.IDENTIFIER_EXPRESSION
	identifier_token: IdentifierToken


# Expressions

@dataclass(frozen=True)
class ThisExpression(ParseTree):
	type = ParseTreeType.THIS_EXPRESSION


@dataclass(frozen=True)
class LiteralExpression(ParseTree):
	type = ParseTreeType.LITERAL_EXPRESSION
	literal_token: Token


@dataclass(frozen=True)
class ArrayLiteralExpression(ParseTree):
	type = ParseTreeType.ARRAY_LITERAL_EXPRESSION
	elements: Trees


@dataclass(frozen=True)
class ObjectLiteralExpression(ParseTree):
	type = ParseTreeType.OBJECT_LITERAL_EXPRESSION
	property_name_and_values: Trees


@dataclass(frozen=True)
class PropertyNameAssignment(ParseTree):
	"""`name: value` inside an object literal."""
	type = ParseTreeType.PROPERTY_NAME_ASSIGNMENT
	name: Token
	value: ParseTree


@dataclass(frozen=True)
class GetAccessor(ParseTree):
	type = ParseTreeType.GET_ACCESSOR
	name: Token
	body: "Block"


@dataclass(frozen=True)
class SetAccessor(ParseTree):
	type = ParseTreeType.SET_ACCESSOR
	name: Token
	parameter: IdentifierToken
	body: "Block"


@dataclass(frozen=True)
class ParenExpression(ParseTree):
	type = ParseTreeType.PAREN_EXPRESSION
	expression: ParseTree


@dataclass(frozen=True)
class MemberExpression(ParseTree):
	"""`operand.member_name`"""
	type = ParseTreeType.MEMBER_EXPRESSION
	operand: ParseTree
	member_name: IdentifierToken


@dataclass(frozen=True)
class MemberLookupExpression(ParseTree):
	"""`operand[member_expression]`"""
	type = ParseTreeType.MEMBER_LOOKUP_EXPRESSION
	operand: ParseTree
	member_expression: ParseTree


@dataclass(frozen=True)
class ArgumentList(ParseTree):
	type = ParseTreeType.ARGUMENT_LIST
	args: Trees


@dataclass(frozen=True)
class CallExpression(ParseTree):
	type = ParseTreeType.CALL_EXPRESSION
	operand: ParseTree
	args: ArgumentList


@dataclass(frozen=True)
class NewExpression(ParseTree):
	"""`new operand(args)`; `args` is None for the argument-less `new operand`."""
	type = ParseTreeType.NEW_EXPRESSION
	operand: ParseTree
	args: Optional[ArgumentList]


@dataclass(frozen=True)
class SpreadExpression(ParseTree):
	type = ParseTreeType.SPREAD_EXPRESSION
	expression: ParseTree


@dataclass(frozen=True)
class UnaryExpression(ParseTree):
	type = ParseTreeType.UNARY_EXPRESSION
	operator: Token
	operand: ParseTree


@dataclass(frozen=True)
class PostfixExpression(ParseTree):
	type = ParseTreeType.POSTFIX_EXPRESSION
	operand: ParseTree
	operator: Token


@dataclass(frozen=True)
class BinaryOperator(ParseTree):
	"""Binary and assignment operators alike; `operator` tells them apart."""
	type = ParseTreeType.BINARY_OPERATOR
	left: ParseTree
	operator: Token
	right: ParseTree

	@property
	def is_assignment(self) -> bool:
		return self.operator.type.is_assignment_operator


@dataclass(frozen=True)
class ConditionalExpression(ParseTree):
	type = ParseTreeType.CONDITIONAL_EXPRESSION
	condition: ParseTree
	left: ParseTree
	right: ParseTree


@dataclass(frozen=True)
class CommaExpression(ParseTree):
	type = ParseTreeType.COMMA_EXPRESSION
	expressions: Trees


@dataclass(frozen=True)
class CascadeExpression(ParseTree):
	"""`operand..a()..b()`: evaluate each expression against the same operand."""
	type = ParseTreeType.CASCADE_EXPRESSION
	operand: ParseTree
	expressions: Trees


@dataclass(frozen=True)
class YieldExpression(ParseTree):
	type = ParseTreeType.YIELD_EXPRESSION
	expression: Optional[ParseTree]
	is_yield_for: bool = False


@dataclass(frozen=True)
class FunctionExpression(ParseTree):
	type = ParseTreeType.FUNCTION_EXPRESSION
	name: Optional[BindingIdentifier]
	is_generator: bool
	formal_parameter_list: "FormalParameterList"
	function_body: "Block"


# Parameters and patterns

@dataclass(frozen=True)
class BindingElement(ParseTree):
	"""One formal parameter: a binding (name or pattern) plus optional default."""
	type = ParseTreeType.BINDING_ELEMENT
	binding: ParseTree
	initializer: Optional[ParseTree] = None


@dataclass(frozen=True)
class RestParameter(ParseTree):
	type = ParseTreeType.REST_PARAMETER
	identifier: BindingIdentifier


@dataclass(frozen=True)
class FormalParameterList(ParseTree):
	type = ParseTreeType.FORMAL_PARAMETER_LIST
	parameters: Trees

	@property
	def has_rest_parameter(self) -> bool:
		return bool(self.parameters) and isinstance(self.parameters[-1], RestParameter)


@dataclass(frozen=True)
class ArrayPattern(ParseTree):
	type = ParseTreeType.ARRAY_PATTERN
	elements: Trees


@dataclass(frozen=True)
class ObjectPattern(ParseTree):
	type = ParseTreeType.OBJECT_PATTERN
	fields: Trees


@dataclass(frozen=True)
class ObjectPatternField(ParseTree):
	"""`name: element` inside an object pattern."""
	type = ParseTreeType.OBJECT_PATTERN_FIELD
	name: BindingIdentifier
	element: Optional[ParseTree]


@dataclass(frozen=True)
class SpreadPatternElement(ParseTree):
	type = ParseTreeType.SPREAD_PATTERN_ELEMENT
	lvalue: ParseTree


# Statements

@dataclass(frozen=True)
class Block(ParseTree):
	type = ParseTreeType.BLOCK
	statements: Trees


@dataclass(frozen=True)
class EmptyStatement(ParseTree):
	type = ParseTreeType.EMPTY_STATEMENT


@dataclass(frozen=True)
class ExpressionStatement(ParseTree):
	type = ParseTreeType.EXPRESSION_STATEMENT
	expression: ParseTree


@dataclass(frozen=True)
class VariableDeclaration(ParseTree):
	"""`lvalue = initializer` inside a declaration list (lvalue may be a pattern)."""
	type = ParseTreeType.VARIABLE_DECLARATION
	lvalue: ParseTree
	initializer: Optional[ParseTree]


@dataclass(frozen=True)
class VariableDeclarationList(ParseTree):
	type = ParseTreeType.VARIABLE_DECLARATION_LIST
	declaration_type: TokenType  # VAR, LET or CONST
	declarations: Trees


@dataclass(frozen=True)
class VariableStatement(ParseTree):
	type = ParseTreeType.VARIABLE_STATEMENT
	declarations: VariableDeclarationList


@dataclass(frozen=True)
class IfStatement(ParseTree):
	type = ParseTreeType.IF_STATEMENT
	condition: ParseTree
	if_clause: ParseTree
	else_clause: Optional[ParseTree]


@dataclass(frozen=True)
class WhileStatement(ParseTree):
	type = ParseTreeType.WHILE_STATEMENT
	condition: ParseTree
	body: ParseTree


@dataclass(frozen=True)
class DoWhileStatement(ParseTree):
	type = ParseTreeType.DO_WHILE_STATEMENT
	body: ParseTree
	condition: ParseTree


@dataclass(frozen=True)
class ForStatement(ParseTree):
	type = ParseTreeType.FOR_STATEMENT
	initializer: Optional[ParseTree]
	condition: Optional[ParseTree]
	increment: Optional[ParseTree]
	body: ParseTree


@dataclass(frozen=True)
class ForInStatement(ParseTree):
	type = ParseTreeType.FOR_IN_STATEMENT
	initializer: ParseTree
	collection: ParseTree
	body: ParseTree


@dataclass(frozen=True)
class ForOfStatement(ParseTree):
	type = ParseTreeType.FOR_OF_STATEMENT
	initializer: ParseTree
	collection: ParseTree
	body: ParseTree


@dataclass(frozen=True)
class BreakStatement(ParseTree):
	type = ParseTreeType.BREAK_STATEMENT
	name: Optional[IdentifierToken]


@dataclass(frozen=True)
class ContinueStatement(ParseTree):
	type = ParseTreeType.CONTINUE_STATEMENT
	name: Optional[IdentifierToken]


@dataclass(frozen=True)
class ReturnStatement(ParseTree):
	type = ParseTreeType.RETURN_STATEMENT
	expression: Optional[ParseTree]


@dataclass(frozen=True)
class ThrowStatement(ParseTree):
	type = ParseTreeType.THROW_STATEMENT
	value: ParseTree


@dataclass(frozen=True)
class LabelledStatement(ParseTree):
	type = ParseTreeType.LABELLED_STATEMENT
	name: IdentifierToken
	statement: ParseTree


@dataclass(frozen=True)
class WithStatement(ParseTree):
	type = ParseTreeType.WITH_STATEMENT
	expression: ParseTree
	body: ParseTree


@dataclass(frozen=True)
class CaseClause(ParseTree):
	type = ParseTreeType.CASE_CLAUSE
	expression: ParseTree
	statements: Trees


@dataclass(frozen=True)
class DefaultClause(ParseTree):
	type = ParseTreeType.DEFAULT_CLAUSE
	statements: Trees


@dataclass(frozen=True)
class SwitchStatement(ParseTree):
	type = ParseTreeType.SWITCH_STATEMENT
	expression: ParseTree
	case_clauses: Trees


@dataclass(frozen=True)
class Catch(ParseTree):
	type = ParseTreeType.CATCH
	binding: BindingIdentifier
	catch_body: Block


@dataclass(frozen=True)
class Finally(ParseTree):
	type = ParseTreeType.FINALLY
	block: Block


@dataclass(frozen=True)
class TryStatement(ParseTree):
	type = ParseTreeType.TRY_STATEMENT
	body: Block
	catch_block: Optional[Catch]
	finally_block: Optional[Finally]


# Declarations and top level

@dataclass(frozen=True)
class ClassDeclaration(ParseTree):
	type = ParseTreeType.CLASS_DECLARATION
	name: BindingIdentifier
	super_class: Optional[ParseTree]
	elements: Trees


@dataclass(frozen=True)
class Program(ParseTree):
	type = ParseTreeType.PROGRAM
	program_elements: Trees


__all__ = [
	"ParseTree", "ParseTreeType", "Trees",
	"BindingIdentifier", "IdentifierExpression",
	"ThisExpression", "LiteralExpression", "ArrayLiteralExpression", "ObjectLiteralExpression",
	"PropertyNameAssignment", "GetAccessor", "SetAccessor", "ParenExpression",
	"MemberExpression", "MemberLookupExpression", "ArgumentList", "CallExpression", "NewExpression",
	"SpreadExpression", "UnaryExpression", "PostfixExpression", "BinaryOperator",
	"ConditionalExpression", "CommaExpression", "CascadeExpression", "YieldExpression",
	"FunctionExpression",
	"BindingElement", "RestParameter", "FormalParameterList",
	"ArrayPattern", "ObjectPattern", "ObjectPatternField", "SpreadPatternElement",
	"Block", "EmptyStatement", "ExpressionStatement",
	"VariableDeclaration", "VariableDeclarationList", "VariableStatement",
	"IfStatement", "WhileStatement", "DoWhileStatement", "ForStatement", "ForInStatement", "ForOfStatement",
	"BreakStatement", "ContinueStatement", "ReturnStatement", "ThrowStatement",
	"LabelledStatement", "WithStatement", "CaseClause", "DefaultClause", "SwitchStatement",
	"Catch", "Finally", "TryStatement",
	"ClassDeclaration", "Program",
]

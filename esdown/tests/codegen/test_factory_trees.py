# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from esdown.esc.codegen import factory as F
from esdown.esc.syntax import trees as T
from esdown.esc.syntax.token_type import TokenType
from esdown.esc.syntax.tokens import IdentifierToken, LiteralToken, Token


def _ref(name: str) -> T.IdentifierExpression:
	return T.IdentifierExpression(IdentifierToken(name))


def _stmt(name: str) -> T.ExpressionStatement:
	return T.ExpressionStatement(_ref(name))


def test_block_from_list_equals_block_from_elements() -> None:
	a, b = _stmt("a"), _stmt("b")
	assert F.create_block([a, b]) == F.create_block(a, b)
	assert F.create_block([a, b]).statements == (a, b)
	assert F.create_empty_block() == T.Block(())


def test_list_or_elements_is_uniform_across_builders() -> None:
	a, b = _ref("a"), _ref("b")
	assert F.create_argument_list([a, b]) == F.create_argument_list(a, b)
	assert F.create_comma_expression([a, b]) == F.create_comma_expression(a, b)
	assert F.create_array_literal_expression([a, b]) == F.create_array_literal_expression(a, b)
	assert F.create_statement_list([_stmt("a")], _stmt("b")) == (_stmt("a"), _stmt("b"))
	prop = F.create_property_name_assignment("k", a)
	assert F.create_object_literal_expression([prop]) == F.create_object_literal_expression(prop)


def test_empty_helpers() -> None:
	assert F.create_empty_argument_list().args == ()
	assert F.create_empty_array_literal_expression().elements == ()
	assert F.create_empty_parameter_list().parameters == ()
	assert F.create_empty_list() == [] and F.create_empty_parameters() == []


def test_literal_builders() -> None:
	assert F.create_string_literal("x").literal_token == LiteralToken(TokenType.STRING, '"x"')
	assert F.create_true_literal() == T.LiteralExpression(Token(TokenType.TRUE))
	assert F.create_false_literal() == T.LiteralExpression(Token(TokenType.FALSE))
	assert F.create_null_literal().literal_token.value == "null"
	assert F.create_number_literal(3).literal_token == LiteralToken(TokenType.NUMBER, "3")


def test_assignment_and_binary_operators() -> None:
	assign = F.create_assignment_expression(_ref("a"), _ref("b"))
	assert assign.operator == Token(TokenType.EQUAL)
	assert assign.is_assignment
	plus = F.create_binary_operator(_ref("a"), F.create_operator_token(TokenType.PLUS), _ref("b"))
	assert plus == T.BinaryOperator(_ref("a"), Token(TokenType.PLUS), _ref("b"))
	stmt = F.create_assignment_statement(_ref("a"), _ref("b"))
	assert stmt == T.ExpressionStatement(assign)


def test_member_expression_chains_and_coerces_operand() -> None:
	tree = F.create_member_expression("a", "b", IdentifierToken("c"), "d")
	assert tree == T.MemberExpression(
		T.MemberExpression(T.MemberExpression(_ref("a"), IdentifierToken("b")), IdentifierToken("c")),
		IdentifierToken("d"),
	)
	on_tree = F.create_member_expression(T.ThisExpression(), "x")
	assert on_tree.operand == T.ThisExpression()


def test_this_expression_with_member() -> None:
	assert F.create_this_expression() == T.ThisExpression()
	assert F.create_this_expression("value") == T.MemberExpression(T.ThisExpression(), IdentifierToken("value"))


def test_call_and_new_expressions() -> None:
	call = F.create_call_expression(_ref("f"))
	assert call.args == T.ArgumentList(())
	args = F.create_argument_list(_ref("x"))
	assert F.create_call_expression(_ref("f"), args).args is args
	assert F.create_call_statement(_ref("f")) == T.ExpressionStatement(call)
	assert F.create_new_expression(_ref("C"), args) == T.NewExpression(_ref("C"), args)
	assert F.create_new_expression(_ref("C")).args is None


def test_identifier_expression_and_undefined() -> None:
	assert F.create_identifier_expression("x") == _ref("x")
	binding = F.create_binding_identifier("x")
	assert F.create_identifier_expression(binding) == _ref("x")
	assert F.create_undefined_expression() == _ref("undefined")


def test_void_0() -> None:
	assert F.create_void_0() == T.ParenExpression(
		T.UnaryExpression(Token(TokenType.VOID), T.LiteralExpression(LiteralToken(TokenType.NUMBER, "0")))
	)


def test_accessors_use_property_name_tokens() -> None:
	body = F.create_empty_block()
	getter = F.create_get_accessor("size", body)
	assert getter.name == IdentifierToken("size")
	setter = F.create_set_accessor("0", "v", body)
	assert setter.name == LiteralToken(TokenType.NUMBER, "0")
	assert setter.parameter == IdentifierToken("v")
	assert F.create_property_name_assignment("my-key", _ref("x")).name.type is TokenType.STRING


def test_function_expression_defaults() -> None:
	params = F.create_empty_parameter_list()
	body = F.create_empty_block()
	fn = F.create_function_expression(params, body)
	assert fn == T.FunctionExpression(None, False, params, body)
	named = F.create_function_expression(params, body, name="gen", is_generator=True)
	assert named.name == T.BindingIdentifier(IdentifierToken("gen"))
	assert named.is_generator


def test_binding_element_and_rest_parameter() -> None:
	element = F.create_binding_element("a")
	assert element == T.BindingElement(T.BindingIdentifier(IdentifierToken("a")), None)
	with_default = F.create_binding_element("a", F.create_number_literal(1))
	assert with_default.initializer == F.create_number_literal(1)
	assert F.create_rest_parameter(_ref("r")).identifier == T.BindingIdentifier(IdentifierToken("r"))


def test_patterns() -> None:
	field = F.create_object_pattern_field("x", None)
	assert field.name == T.BindingIdentifier(IdentifierToken("x"))
	pattern = F.create_object_pattern([field])
	assert pattern.fields == (field,)
	spread = F.create_spread_pattern_element(_ref("rest"))
	assert F.create_array_pattern([spread]).elements == (spread,)


def test_control_flow_statements() -> None:
	body = F.create_block(_stmt("s"))
	cond = _ref("c")
	assert F.create_if_statement(cond, body).else_clause is None
	assert F.create_if_statement(cond, body, body).else_clause == body
	assert F.create_while_statement(cond, body) == T.WhileStatement(cond, body)
	assert F.create_do_while_statement(body, cond) == T.DoWhileStatement(body, cond)
	assert F.create_for_statement(None, None, None, body) == T.ForStatement(None, None, None, body)
	decls = F.create_variable_declaration_list(TokenType.VAR, "k")
	assert F.create_for_in_statement(decls, _ref("o"), body).initializer is decls
	assert F.create_for_of_statement(decls, _ref("xs"), body).collection == _ref("xs")
	assert F.create_with_statement(_ref("o"), body) == T.WithStatement(_ref("o"), body)


def test_jump_statements() -> None:
	assert F.create_break_statement() == T.BreakStatement(None)
	assert F.create_break_statement("outer").name == IdentifierToken("outer")
	assert F.create_continue_statement(IdentifierToken("l")) == T.ContinueStatement(IdentifierToken("l"))
	assert F.create_return_statement() == T.ReturnStatement(None)
	assert F.create_return_statement(_ref("x")).expression == _ref("x")
	assert F.create_throw_statement(_ref("e")) == T.ThrowStatement(_ref("e"))
	labelled = F.create_labelled_statement("outer", F.create_empty_statement())
	assert labelled == T.LabelledStatement(IdentifierToken("outer"), T.EmptyStatement())


def test_switch_statement() -> None:
	case = F.create_case_clause(F.create_number_literal(1), [_stmt("a"), F.create_break_statement()])
	default = F.create_default_clause([_stmt("b")])
	switch = F.create_switch_statement(_ref("x"), [case, default])
	assert switch.case_clauses == (case, default)
	assert case.statements[1] == T.BreakStatement(None)


def test_try_statement_forms() -> None:
	body = F.create_block(_stmt("risky"))
	catch = F.create_catch("e", F.create_empty_block())
	final = F.create_finally(F.create_empty_block())
	assert catch.binding == T.BindingIdentifier(IdentifierToken("e"))
	assert F.create_try_statement(body, final) == T.TryStatement(body, None, final)
	assert F.create_try_statement(body, catch) == T.TryStatement(body, catch, None)
	assert F.create_try_statement(body, catch, final) == T.TryStatement(body, catch, final)
	assert F.create_try_statement(body, None, final) == T.TryStatement(body, None, final)
	with pytest.raises(TypeError):
		F.create_try_statement(body)


def test_variable_declarations() -> None:
	one = F.create_number_literal(1)
	decl = F.create_variable_declaration("x", one)
	assert decl == T.VariableDeclaration(T.BindingIdentifier(IdentifierToken("x")), one)
	pattern = F.create_object_pattern([F.create_object_pattern_field("a", None)])
	assert F.create_variable_declaration(pattern, _ref("o")).lvalue is pattern

	single = F.create_variable_declaration_list(TokenType.LET, "x", one)
	assert single == T.VariableDeclarationList(TokenType.LET, (decl,))
	many = F.create_variable_declaration_list(TokenType.VAR, [decl, decl])
	assert many.declarations == (decl, decl)

	from_list = F.create_variable_statement(single)
	assert from_list == T.VariableStatement(single)
	assert F.create_variable_statement(TokenType.LET, "x", one) == from_list
	with pytest.raises(TypeError):
		F.create_variable_statement(TokenType.VAR)


def test_expression_builders() -> None:
	a, b, c = _ref("a"), _ref("b"), _ref("c")
	assert F.create_conditional_expression(a, b, c) == T.ConditionalExpression(a, b, c)
	assert F.create_paren_expression(a) == T.ParenExpression(a)
	inc = F.create_operator_token(TokenType.PLUS_PLUS)
	assert F.create_postfix_expression(a, inc) == T.PostfixExpression(a, inc)
	bang = F.create_operator_token(TokenType.BANG)
	assert F.create_unary_expression(bang, a) == T.UnaryExpression(bang, a)
	assert F.create_spread_expression(a) == T.SpreadExpression(a)
	assert F.create_member_lookup_expression(a, b) == T.MemberLookupExpression(a, b)
	assert F.create_cascade_expression(a, [b, c]).expressions == (b, c)


def test_yield_and_directives() -> None:
	stmt = F.create_yield_statement(_ref("v"))
	assert stmt == T.ExpressionStatement(T.YieldExpression(_ref("v"), False))
	assert F.create_yield_statement(_ref("it"), True).expression.is_yield_for  # type: ignore[attr-defined]
	directive = F.create_use_strict_directive()
	assert directive.expression.literal_token.processed_value == "use strict"  # type: ignore[attr-defined]


def test_class_declaration_and_program() -> None:
	cls = F.create_class_declaration("Point", None, [])
	assert cls == T.ClassDeclaration(T.BindingIdentifier(IdentifierToken("Point")), None, ())
	program = F.create_program([cls, F.create_empty_statement()])
	assert program.program_elements == (cls, T.EmptyStatement())


def test_builders_do_not_mutate_or_alias_caller_lists() -> None:
	statements = [_stmt("a")]
	block = F.create_block(statements)
	statements.append(_stmt("b"))
	assert block.statements == (_stmt("a"),)
	assert all(tree.is_synthetic for tree in block.iter_child_trees())

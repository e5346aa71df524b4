"""Parser tests: statements, precedence, literals and error reporting."""

import logging

import pytest

from larklang import lark_ast as ast
from larklang.config import config
from larklang.lexer import Lexer
from larklang.parser import Parser


def _parse(source):
	parser = Parser(Lexer(source))
	program = parser.parse_program()
	assert parser.errors == [], f"unexpected parser errors: {parser.errors}"
	return program


def _parse_errors(source):
	parser = Parser(Lexer(source))
	parser.parse_program()
	return parser.errors


def _single_expression(source):
	program = _parse(source)
	assert len(program.statements) == 1
	stmt = program.statements[0]
	assert isinstance(stmt, ast.ExpressionStatement)
	return stmt.expression


@pytest.mark.parametrize("source, name, value", [
	("let x = 5;", "x", "5"),
	("let y = true;", "y", "true"),
	("let foobar = y", "foobar", "y"),
])
def test_let_statements(source, name, value):
	program = _parse(source)
	stmt = program.statements[0]
	assert isinstance(stmt, ast.LetStatement)
	assert stmt.name.value == name
	assert str(stmt.value) == value


def test_return_statements():
	program = _parse("return 5; return 10; return add(15);")
	assert len(program.statements) == 3
	assert all(isinstance(s, ast.ReturnStatement) for s in program.statements)
	assert str(program.statements[2].return_value) == "add(15)"


@pytest.mark.parametrize("source, expected", [
	("-a * b", "((-a) * b)"),
	("!-a", "(!(-a))"),
	("a + b + c", "((a + b) + c)"),
	("a * b / c", "((a * b) / c)"),
	("a + b * c + d / e - f", "(((a + (b * c)) + (d / e)) - f)"),
	("3 + 4; -5 * 5", "(3 + 4)((-5) * 5)"),
	("5 > 4 == 3 < 4", "((5 > 4) == (3 < 4))"),
	("5 < 4 != 3 > 4", "((5 < 4) != (3 > 4))"),
	("true", "true"),
	("3 > 5 == false", "((3 > 5) == false)"),
	("1 + (2 + 3) + 4", "((1 + (2 + 3)) + 4)"),
	("-(5 + 5)", "(-(5 + 5))"),
	("!(true == true)", "(!(true == true))"),
	("a + add(b * c) + d", "((a + add((b * c))) + d)"),
	("add(a, b, 1, 2 * 3, 4 + 5, add(6, 7 * 8))", "add(a, b, 1, (2 * 3), (4 + 5), add(6, (7 * 8)))"),
	("a * [1, 2, 3, 4][b * c] * d", "((a * ([1, 2, 3, 4][(b * c)])) * d)"),
	("add(a * b[2], b[1], 2 * [1, 2][1])", "add((a * (b[2])), (b[1]), (2 * ([1, 2][1])))"),
])
def test_operator_precedence(source, expected):
	assert str(_parse(source)) == expected


def test_if_else_expression():
	expr = _single_expression("if (x < y) { x } else { y }")
	assert isinstance(expr, ast.IfExpression)
	assert str(expr.condition) == "(x < y)"
	assert len(expr.consequence.statements) == 1
	assert str(expr.alternative) == "y"


def test_if_without_else():
	expr = _single_expression("if (x) { x }")
	assert expr.alternative is None


def test_function_literal():
	expr = _single_expression("fn(x, y) { x + y; }")
	assert isinstance(expr, ast.FunctionLiteral)
	assert [p.value for p in expr.parameters] == ["x", "y"]
	assert str(expr.body) == "(x + y)"


@pytest.mark.parametrize("source, params", [
	("fn() {};", []),
	("fn(x) {};", ["x"]),
	("fn(x, y, z) {};", ["x", "y", "z"]),
])
def test_function_parameters(source, params):
	expr = _single_expression(source)
	assert [p.value for p in expr.parameters] == params


def test_call_expression():
	expr = _single_expression("add(1, 2 * 3, 4 + 5);")
	assert isinstance(expr, ast.CallExpression)
	assert str(expr.function) == "add"
	assert [str(a) for a in expr.arguments] == ["1", "(2 * 3)", "(4 + 5)"]


def test_string_literal():
	expr = _single_expression('"hello world";')
	assert isinstance(expr, ast.StringLiteral)
	assert expr.value == "hello world"


def test_array_literal_and_index():
	expr = _single_expression("[1, 2 * 2, 3 + 3][1]")
	assert isinstance(expr, ast.IndexExpression)
	assert isinstance(expr.left, ast.ArrayLiteral)
	assert [str(e) for e in expr.left.elements] == ["1", "(2 * 2)", "(3 + 3)"]


def test_hash_literal_keeps_pair_order():
	expr = _single_expression('{"one": 1, "two": 2, 3: 1 + 2}')
	assert isinstance(expr, ast.HashLiteral)
	assert [(str(k), str(v)) for k, v in expr.pairs] == [("one", "1"), ("two", "2"), ("3", "(1 + 2)")]


def test_empty_hash_literal():
	expr = _single_expression("{}")
	assert isinstance(expr, ast.HashLiteral)
	assert expr.pairs == []


@pytest.mark.parametrize("source, fragment", [
	("let = 5;", "Expected next token to be IDENT, got = instead"),
	("let x 5;", "Expected next token to be =, got INT instead"),
	("+5", "No prefix parse function for + found"),
	("9223372036854775808", "Could not parse 9223372036854775808 as integer"),
	('"oops', "Illegal token '\"oops'"),
	("if (x) { 1", "Unterminated block"),
	('{"a" 1}', "Expected next token to be :, got INT instead"),
])
def test_parser_errors(source, fragment):
	errors = _parse_errors(source)
	assert any(fragment in e for e in errors), errors


def test_errors_carry_positions():
	errors = _parse_errors("let x = 1;\nlet = 2;")
	assert errors[0].startswith("Line 2:5 - ")


def test_largest_int64_literal_parses():
	expr = _single_expression("9223372036854775807")
	assert expr.value == 2 ** 63 - 1


def test_trace_logs_nested_parse_functions(caplog):
	config.trace_parser = True
	caplog.set_level(logging.DEBUG, logger="larklang.parser.trace")
	_parse("1 + 2")
	messages = [r.getMessage() for r in caplog.records if r.name == "larklang.parser.trace"]
	assert "BEGIN parse_expression_statement" in messages
	assert any(m.strip() == "BEGIN parse_infix_expression" for m in messages)
	assert messages[-1] == "END parse_expression_statement"


def test_trace_is_silent_by_default(caplog):
	caplog.set_level(logging.DEBUG, logger="larklang.parser.trace")
	_parse("1 + 2")
	assert not [r for r in caplog.records if r.name == "larklang.parser.trace"]

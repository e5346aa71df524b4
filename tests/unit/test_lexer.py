"""Lexer tests: token kinds, literals, positions and illegal input."""

from larklang.lexer import Lexer, tokenize
from larklang.lark_token import (
	LET, IDENT, ASSIGN, INT, SEMICOLON, FUNCTION, LPAREN, RPAREN, COMMA, LBRACE,
	RBRACE, PLUS, BANG, MINUS, SLASH, ASTERISK, LT, GT, IF, ELSE, RETURN, TRUE,
	FALSE, EQ, NOT_EQ, STRING, LBRACKET, RBRACKET, COLON, ILLEGAL, EOF,
)


def test_next_token_covers_the_language():
	source = '''let five = 5;
let add = fn(x, y) {
  x + y;
};
!-/*5;
5 < 10 > 5;
if (5 < 10) {
	return true;
} else {
	return false;
}
10 == 10;
10 != 9;
"foobar"
"foo bar"
[1, 2];
{"foo": "bar"}
'''
	expected = [
		(LET, "let"), (IDENT, "five"), (ASSIGN, "="), (INT, "5"), (SEMICOLON, ";"),
		(LET, "let"), (IDENT, "add"), (ASSIGN, "="), (FUNCTION, "fn"), (LPAREN, "("),
		(IDENT, "x"), (COMMA, ","), (IDENT, "y"), (RPAREN, ")"), (LBRACE, "{"),
		(IDENT, "x"), (PLUS, "+"), (IDENT, "y"), (SEMICOLON, ";"),
		(RBRACE, "}"), (SEMICOLON, ";"),
		(BANG, "!"), (MINUS, "-"), (SLASH, "/"), (ASTERISK, "*"), (INT, "5"), (SEMICOLON, ";"),
		(INT, "5"), (LT, "<"), (INT, "10"), (GT, ">"), (INT, "5"), (SEMICOLON, ";"),
		(IF, "if"), (LPAREN, "("), (INT, "5"), (LT, "<"), (INT, "10"), (RPAREN, ")"), (LBRACE, "{"),
		(RETURN, "return"), (TRUE, "true"), (SEMICOLON, ";"),
		(RBRACE, "}"), (ELSE, "else"), (LBRACE, "{"),
		(RETURN, "return"), (FALSE, "false"), (SEMICOLON, ";"),
		(RBRACE, "}"),
		(INT, "10"), (EQ, "=="), (INT, "10"), (SEMICOLON, ";"),
		(INT, "10"), (NOT_EQ, "!="), (INT, "9"), (SEMICOLON, ";"),
		(STRING, "foobar"),
		(STRING, "foo bar"),
		(LBRACKET, "["), (INT, "1"), (COMMA, ","), (INT, "2"), (RBRACKET, "]"), (SEMICOLON, ";"),
		(LBRACE, "{"), (STRING, "foo"), (COLON, ":"), (STRING, "bar"), (RBRACE, "}"),
		(EOF, ""),
	]

	lexer = Lexer(source)
	for expected_type, expected_literal in expected:
		tok = lexer.next_token()
		assert (tok.type, tok.literal) == (expected_type, expected_literal)


def test_eof_is_sticky():
	lexer = Lexer("x")
	assert lexer.next_token().type == IDENT
	assert lexer.next_token().type == EOF
	assert lexer.next_token().type == EOF


def test_identifiers_may_contain_digits_and_underscores():
	tokens = tokenize("snake_case2 _x")
	assert [(t.type, t.literal) for t in tokens] == [
		(IDENT, "snake_case2"), (IDENT, "_x"), (EOF, ""),
	]


def test_string_escapes():
	tok = Lexer(r'"a\tb\n\"c\"\\"').next_token()
	assert tok.type == STRING
	assert tok.literal == 'a\tb\n"c"\\'


def test_unterminated_string_is_illegal():
	tok = Lexer('"never closed').next_token()
	assert tok.type == ILLEGAL
	assert tok.literal == '"never closed'


def test_unknown_character_is_illegal():
	tokens = tokenize("1 @ 2")
	assert [t.type for t in tokens] == [INT, ILLEGAL, INT, EOF]
	assert tokens[1].literal == "@"


def test_comments_are_skipped():
	tokens = tokenize("# heading\nlet x = 1; // trailing\n// last")
	assert [t.type for t in tokens] == [LET, IDENT, ASSIGN, INT, SEMICOLON, EOF]


def test_positions_are_tracked():
	tokens = tokenize("let x = 1;\n  x")
	assert (tokens[0].line, tokens[0].column) == (1, 1)
	assert (tokens[1].line, tokens[1].column) == (1, 5)
	last_ident = tokens[-2]
	assert last_ident.literal == "x"
	assert (last_ident.line, last_ident.column) == (2, 3)

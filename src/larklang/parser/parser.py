# src/larklang/parser/parser.py
from ..lark_token import (
    ILLEGAL, EOF, IDENT, INT, STRING, ASSIGN, PLUS, MINUS, BANG, ASTERISK, SLASH,
    LT, GT, EQ, NOT_EQ, COMMA, SEMICOLON, COLON, LPAREN, RPAREN, LBRACE, RBRACE,
    LBRACKET, RBRACKET, FUNCTION, LET, TRUE, FALSE, IF, ELSE, RETURN,
)
from ..lark_ast import (
    Program, LetStatement, ReturnStatement, ExpressionStatement, BlockStatement,
    Identifier, IntegerLiteral, StringLiteral, Boolean, PrefixExpression,
    InfixExpression, IfExpression, FunctionLiteral, CallExpression,
    ArrayLiteral, IndexExpression, HashLiteral,
)
from .tracing import traced

# Precedence constants
LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL, INDEX = 1, 2, 3, 4, 5, 6, 7, 8

INT64_MAX = 2 ** 63 - 1

precedences = {
    EQ: EQUALS, NOT_EQ: EQUALS,
    LT: LESSGREATER, GT: LESSGREATER,
    PLUS: SUM, MINUS: SUM,
    SLASH: PRODUCT, ASTERISK: PRODUCT,
    LPAREN: CALL,
    LBRACKET: INDEX,
}


class Parser:
    def __init__(self, lexer):
        self.lexer = lexer
        self.errors = []
        self.cur_token = None
        self.peek_token = None

        self.prefix_parse_fns = {
            IDENT: self.parse_identifier,
            INT: self.parse_integer_literal,
            STRING: self.parse_string_literal,
            BANG: self.parse_prefix_expression,
            MINUS: self.parse_prefix_expression,
            TRUE: self.parse_boolean,
            FALSE: self.parse_boolean,
            LPAREN: self.parse_grouped_expression,
            IF: self.parse_if_expression,
            FUNCTION: self.parse_function_literal,
            LBRACKET: self.parse_array_literal,
            LBRACE: self.parse_hash_literal,
        }
        self.infix_parse_fns = {
            PLUS: self.parse_infix_expression,
            MINUS: self.parse_infix_expression,
            SLASH: self.parse_infix_expression,
            ASTERISK: self.parse_infix_expression,
            EQ: self.parse_infix_expression,
            NOT_EQ: self.parse_infix_expression,
            LT: self.parse_infix_expression,
            GT: self.parse_infix_expression,
            LPAREN: self.parse_call_expression,
            LBRACKET: self.parse_index_expression,
        }
        self.next_token()
        self.next_token()

    def parse_program(self):
        program = Program()
        while not self.cur_token_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        return program

    # === STATEMENTS ===

    def parse_statement(self):
        if self.cur_token_is(LET):
            return self.parse_let_statement()
        elif self.cur_token_is(RETURN):
            return self.parse_return_statement()
        return self.parse_expression_statement()

    @traced("parse_let_statement")
    def parse_let_statement(self):
        if not self.expect_peek(IDENT):
            return None

        name = Identifier(value=self.cur_token.literal)

        if not self.expect_peek(ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(LOWEST)
        if value is None:
            return None

        if self.peek_token_is(SEMICOLON):
            self.next_token()

        return LetStatement(name=name, value=value)

    @traced("parse_return_statement")
    def parse_return_statement(self):
        self.next_token()
        return_value = self.parse_expression(LOWEST)
        if return_value is None:
            return None

        if self.peek_token_is(SEMICOLON):
            self.next_token()

        return ReturnStatement(return_value=return_value)

    @traced("parse_expression_statement")
    def parse_expression_statement(self):
        expression = self.parse_expression(LOWEST)
        if expression is None:
            return None

        if self.peek_token_is(SEMICOLON):
            self.next_token()

        return ExpressionStatement(expression=expression)

    def parse_block_statement(self):
        block = BlockStatement()
        self.next_token()

        while not self.cur_token_is(RBRACE) and not self.cur_token_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            self.next_token()

        if not self.cur_token_is(RBRACE):
            self._error("Unterminated block, expected '}'")

        return block

    # === EXPRESSIONS ===

    @traced("parse_expression")
    def parse_expression(self, precedence):
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token)
            return None

        left_exp = prefix()
        if left_exp is None:
            return None

        while not self.peek_token_is(SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left_exp

            self.next_token()
            left_exp = infix(left_exp)
            if left_exp is None:
                return None

        return left_exp

    def parse_identifier(self):
        return Identifier(value=self.cur_token.literal)

    def parse_integer_literal(self):
        try:
            value = int(self.cur_token.literal)
        except ValueError:
            value = None

        if value is None or value > INT64_MAX:
            self._error(f"Could not parse {self.cur_token.literal} as integer")
            return None
        return IntegerLiteral(value=value)

    def parse_string_literal(self):
        return StringLiteral(value=self.cur_token.literal)

    def parse_boolean(self):
        return Boolean(value=self.cur_token_is(TRUE))

    @traced("parse_prefix_expression")
    def parse_prefix_expression(self):
        operator = self.cur_token.literal
        self.next_token()
        right = self.parse_expression(PREFIX)
        if right is None:
            return None
        return PrefixExpression(operator=operator, right=right)

    @traced("parse_infix_expression")
    def parse_infix_expression(self, left):
        operator = self.cur_token.literal
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(left=left, operator=operator, right=right)

    def parse_grouped_expression(self):
        self.next_token()
        exp = self.parse_expression(LOWEST)
        if not self.expect_peek(RPAREN):
            return None
        return exp

    def parse_if_expression(self):
        if not self.expect_peek(LPAREN):
            return None

        self.next_token()
        condition = self.parse_expression(LOWEST)
        if condition is None:
            return None

        if not self.expect_peek(RPAREN):
            return None

        if not self.expect_peek(LBRACE):
            return None

        expression = IfExpression(condition=condition, consequence=self.parse_block_statement())

        if self.peek_token_is(ELSE):
            self.next_token()
            if not self.expect_peek(LBRACE):
                return None
            expression.alternative = self.parse_block_statement()

        return expression

    def parse_function_literal(self):
        if not self.expect_peek(LPAREN):
            return None

        parameters = self.parse_function_parameters()
        if parameters is None:
            return None

        if not self.expect_peek(LBRACE):
            return None

        return FunctionLiteral(parameters=parameters, body=self.parse_block_statement())

    def parse_function_parameters(self):
        identifiers = []

        if self.peek_token_is(RPAREN):
            self.next_token()
            return identifiers

        if not self.expect_peek(IDENT):
            return None
        identifiers.append(Identifier(value=self.cur_token.literal))

        while self.peek_token_is(COMMA):
            self.next_token()
            if not self.expect_peek(IDENT):
                return None
            identifiers.append(Identifier(value=self.cur_token.literal))

        if not self.expect_peek(RPAREN):
            return None

        return identifiers

    def parse_call_expression(self, function):
        arguments = self.parse_expression_list(RPAREN)
        if arguments is None:
            return None
        return CallExpression(function=function, arguments=arguments)

    def parse_array_literal(self):
        elements = self.parse_expression_list(RBRACKET)
        if elements is None:
            return None
        return ArrayLiteral(elements=elements)

    def parse_index_expression(self, left):
        self.next_token()
        index = self.parse_expression(LOWEST)
        if index is None:
            return None

        if not self.expect_peek(RBRACKET):
            return None

        return IndexExpression(left=left, index=index)

    def parse_hash_literal(self):
        pairs = []

        while not self.peek_token_is(RBRACE):
            self.next_token()
            key = self.parse_expression(LOWEST)
            if key is None:
                return None

            if not self.expect_peek(COLON):
                return None

            self.next_token()
            value = self.parse_expression(LOWEST)
            if value is None:
                return None

            pairs.append((key, value))

            if not self.peek_token_is(RBRACE) and not self.expect_peek(COMMA):
                return None

        if not self.expect_peek(RBRACE):
            return None

        return HashLiteral(pairs=pairs)

    def parse_expression_list(self, end):
        elements = []

        if self.peek_token_is(end):
            self.next_token()
            return elements

        self.next_token()
        element = self.parse_expression(LOWEST)
        if element is None:
            return None
        elements.append(element)

        while self.peek_token_is(COMMA):
            self.next_token()
            self.next_token()
            element = self.parse_expression(LOWEST)
            if element is None:
                return None
            elements.append(element)

        if not self.expect_peek(end):
            return None

        return elements

    # === ERRORS ===

    def _error(self, message, token=None):
        token = token or self.cur_token
        self.errors.append(f"Line {token.line}:{token.column} - {message}")

    def no_prefix_parse_fn_error(self, token):
        if token.type == ILLEGAL:
            self._error(f"Illegal token '{token.literal}'", token)
        else:
            self._error(f"No prefix parse function for {token.type} found", token)

    # === TOKEN UTILITIES ===

    def next_token(self):
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, t):
        return self.cur_token.type == t

    def peek_token_is(self, t):
        return self.peek_token.type == t

    def expect_peek(self, t):
        if self.peek_token_is(t):
            self.next_token()
            return True
        self._error(f"Expected next token to be {t}, got {self.peek_token.type} instead", self.peek_token)
        return False

    def peek_precedence(self):
        return precedences.get(self.peek_token.type, LOWEST)

    def cur_precedence(self):
        return precedences.get(self.cur_token.type, LOWEST)

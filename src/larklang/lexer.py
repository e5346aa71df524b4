# src/larklang/lexer.py
from .lark_token import (
    Token, lookup_ident, SINGLE_CHAR_TOKENS,
    ILLEGAL, EOF, INT, STRING, EQ, NOT_EQ,
)

_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '\\': '\\',
    '"': '"',
}


class Lexer:
    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self):
        if self.ch == '\n':
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        self.column += 1
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace_and_comments()

        line, column = self.line, self.column

        if self.ch == "":
            return Token(EOF, "", line, column)

        if self.is_letter(self.ch):
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal, line, column)

        if self.is_digit(self.ch):
            return Token(INT, self.read_number(), line, column)

        if self.ch == '"':
            literal, terminated = self.read_string()
            # Step past the closing quote
            self.read_char()
            if not terminated:
                return Token(ILLEGAL, '"' + literal, line, column)
            return Token(STRING, literal, line, column)

        if self.ch == '=' and self.peek_char() == '=':
            self.read_char()
            tok = Token(EQ, "==", line, column)
        elif self.ch == '!' and self.peek_char() == '=':
            self.read_char()
            tok = Token(NOT_EQ, "!=", line, column)
        elif self.ch in SINGLE_CHAR_TOKENS:
            tok = Token(SINGLE_CHAR_TOKENS[self.ch], self.ch, line, column)
        else:
            tok = Token(ILLEGAL, self.ch, line, column)

        self.read_char()
        return tok

    def __iter__(self):
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == EOF:
                return

    def skip_whitespace_and_comments(self):
        while True:
            while self.ch in (' ', '\t', '\n', '\r'):
                self.read_char()

            if self.ch == '#' or (self.ch == '/' and self.peek_char() == '/'):
                while self.ch != '\n' and self.ch != "":
                    self.read_char()
                continue
            return

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch) or self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_string(self):
        """Read a double-quoted string; returns (text, terminated)."""
        result = []
        while True:
            self.read_char()
            if self.ch == "":
                return ''.join(result), False
            if self.ch == '\\':
                self.read_char()
                if self.ch == "":
                    return ''.join(result), False
                result.append(_ESCAPES.get(self.ch, self.ch))
            elif self.ch == '"':
                return ''.join(result), True
            else:
                result.append(self.ch)

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'

    def is_digit(self, char):
        return '0' <= char <= '9'


def tokenize(source_code):
    """Lex a whole source string into a list of tokens ending with EOF."""
    return list(Lexer(source_code))

# src/larklang/lark_token.py

ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers + literals
IDENT = "IDENT"
INT = "INT"
STRING = "STRING"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
BANG = "!"
ASTERISK = "*"
SLASH = "/"

LT = "<"
GT = ">"
EQ = "=="
NOT_EQ = "!="

# Delimiters
COMMA = ","
SEMICOLON = ";"
COLON = ":"

LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"
LBRACKET = "["
RBRACKET = "]"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

KEYWORDS = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}

# Single characters that map straight to a token type
SINGLE_CHAR_TOKENS = {
    '=': ASSIGN,
    '+': PLUS,
    '-': MINUS,
    '!': BANG,
    '*': ASTERISK,
    '/': SLASH,
    '<': LT,
    '>': GT,
    ',': COMMA,
    ';': SEMICOLON,
    ':': COLON,
    '(': LPAREN,
    ')': RPAREN,
    '{': LBRACE,
    '}': RBRACE,
    '[': LBRACKET,
    ']': RBRACKET,
}


class Token:
    def __init__(self, type, literal, line=0, column=0):
        self.type = type
        self.literal = literal
        self.line = line
        self.column = column

    def __repr__(self):
        return f"Token({self.type}, '{self.literal}', line={self.line}, col={self.column})"


def lookup_ident(ident):
    return KEYWORDS.get(ident, IDENT)
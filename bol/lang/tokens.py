"""Token model for the Bol language.

Compound keywords (PROGRAM_START, PROGRAM_END, DECLARE, PRINT, ELSE_IF, CONTINUE) are spelled as two words in source
but are emitted as a single token: see Lexer.read_word.
"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    # compound keywords
    PROGRAM_START = "PROGRAM_START"  # bola saheb
    PROGRAM_END = "PROGRAM_END"      # yeto saheb
    DECLARE = "DECLARE"              # he ghe
    PRINT = "PRINT"                  # he bol
    ELSE_IF = "ELSE_IF"              # nahitr jr
    CONTINUE = "CONTINUE"            # pudhe ja

    # single-word keywords
    IF = "IF"
    ELSE = "ELSE"
    WHILE = "WHILE"
    BREAK = "BREAK"
    FUNCTION = "FUNCTION"
    RETURN = "RETURN"
    NULL = "NULL"
    TRUE = "TRUE"
    FALSE = "FALSE"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"

    # literals
    NUMBER = "NUMBER"
    STRING = "STRING"
    IDENTIFIER = "IDENTIFIER"

    # operators
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"
    EQ_EQ = "EQ_EQ"
    BANG_EQ = "BANG_EQ"
    LT = "LT"
    GT = "GT"
    LT_EQ = "LT_EQ"
    GT_EQ = "GT_EQ"
    ASSIGN = "ASSIGN"

    # punctuation
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    COMMA = "COMMA"

    NEWLINE = "NEWLINE"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    line: int

    def __repr__(self):
        return f"Token({self.kind.name}, {self.value!r}, line={self.line})"


COMPOUND_KEYWORDS = {
    "bola saheb": TokenKind.PROGRAM_START,
    "yeto saheb": TokenKind.PROGRAM_END,
    "he ghe": TokenKind.DECLARE,
    "he bol": TokenKind.PRINT,
    "nahitr jr": TokenKind.ELSE_IF,
    "pudhe ja": TokenKind.CONTINUE,
}

KEYWORDS = {
    "jr": TokenKind.IF,
    "nahitr": TokenKind.ELSE,
    "joparyant": TokenKind.WHILE,
    "thamb": TokenKind.BREAK,
    "karya": TokenKind.FUNCTION,
    "parat": TokenKind.RETURN,
    "shunya": TokenKind.NULL,
    "barobr": TokenKind.TRUE,
    "chuk": TokenKind.FALSE,
    "ani": TokenKind.AND,
    "kinva": TokenKind.OR,
    "nahi": TokenKind.NOT,
}

TWO_CHAR_OPERATORS = {
    "==": TokenKind.EQ_EQ,
    "!=": TokenKind.BANG_EQ,
    "<=": TokenKind.LT_EQ,
    ">=": TokenKind.GT_EQ,
}

OPERATORS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.ASSIGN,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
}

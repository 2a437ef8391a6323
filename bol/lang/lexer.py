r"""Lexical analysis for the Bol language: converts raw source text into a flat list of Tokens.

Token grammar can be loosely defined as follows:

```
<newline>    ::= "\n"                           ; statement delimiter, never emitted twice in a row
<comment>    ::= "--" <char>*                   ; runs to end of line, produces no token
<string>     ::= '"' (<char> | "\n")* '"'       ; "\n" escape is the only escape; raw newlines are illegal
<number>     ::= <digit>+ ("." <digit>+)?       ; no exponent, no sign
<word>       ::= [A-Za-z_] [A-Za-z0-9_]*        ; keyword or identifier
<compound>   ::= <word> (" " | "\t")+ <word>    ; only if the pair is listed in COMPOUND_KEYWORDS
```
"""

import re

from bol.lang.error import LexError
from bol.lang.tokens import COMPOUND_KEYWORDS, KEYWORDS, OPERATORS, TWO_CHAR_OPERATORS, Token, TokenKind


WORD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
NUMBER = re.compile(r"[0-9]+(\.[0-9]+)?")


class Lexer:
    """Single left-to-right scan over source. Use tokenize to get the token list."""

    def __init__(self, source):
        self.source = source
        self.pos = 0
        self.line = 1
        self.tokens = []

    def tokenize(self):
        """Tokenizes the entire source. The returned list always ends with a single EOF token."""
        while self.pos < len(self.source):
            self.read_next()
        self.emit(TokenKind.EOF, "")
        return self.tokens

    def read_next(self):
        char = self.source[self.pos]

        if char == "\n":
            if self.tokens and self.tokens[-1].kind is not TokenKind.NEWLINE:
                self.emit(TokenKind.NEWLINE, "\\n")
            self.pos += 1
            self.line += 1

        elif char in " \t\r":
            self.pos += 1

        elif self.source.startswith("--", self.pos):
            end = self.source.find("\n", self.pos)
            self.pos = len(self.source) if end == -1 else end

        elif char == "\"":
            self.read_string()

        elif char.isdigit() and char.isascii():
            self.read_number()

        elif WORD.match(char):
            self.read_word()

        else:
            self.read_symbol()

    def read_string(self):
        start_line = self.line
        self.pos += 1  # opening quote
        chars = []

        while self.pos < len(self.source) and self.source[self.pos] != "\"":
            char = self.source[self.pos]
            if char == "\n":
                raise LexError(f"unterminated string on line {start_line}", start_line, "\"")

            if self.source.startswith("\\n", self.pos):
                chars.append("\n")
                self.pos += 2
            else:
                chars.append(char)
                self.pos += 1

        if self.pos >= len(self.source):
            raise LexError(f"unterminated string starting on line {start_line}", start_line, "\"")

        self.pos += 1  # closing quote
        self.emit(TokenKind.STRING, "".join(chars))

    def read_number(self):
        match = NUMBER.match(self.source, self.pos)
        self.pos = match.end()
        self.emit(TokenKind.NUMBER, match.group())

    def read_word(self):
        """Reads a word, then tries to extend it with the next word on the same line into a compound keyword. If the
        pair is not a compound keyword, the position is rewound to just after the first word.
        """
        word = self.consume_word()
        after_word = self.pos

        peek = after_word
        while peek < len(self.source) and self.source[peek] in " \t":
            peek += 1

        next_word = WORD.match(self.source, peek)
        if next_word:
            compound = f"{word} {next_word.group()}"
            if compound in COMPOUND_KEYWORDS:
                self.pos = next_word.end()
                self.emit(COMPOUND_KEYWORDS[compound], compound)
                return

        self.pos = after_word
        self.emit(KEYWORDS.get(word, TokenKind.IDENTIFIER), word)

    def consume_word(self):
        match = WORD.match(self.source, self.pos)
        self.pos = match.end()
        return match.group()

    def read_symbol(self):
        two = self.source[self.pos:self.pos + 2]
        if two in TWO_CHAR_OPERATORS:
            self.pos += 2
            self.emit(TWO_CHAR_OPERATORS[two], two)
            return

        char = self.source[self.pos]
        if char not in OPERATORS:
            raise LexError(f"unexpected character '{char}'", self.line, char)

        self.pos += 1
        self.emit(OPERATORS[char], char)

    def emit(self, kind, value):
        self.tokens.append(Token(kind, value, self.line))


def tokenize(source):
    """Returns the token list for source. Raises LexError on malformed input."""
    return Lexer(source).tokenize()

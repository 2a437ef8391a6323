"""Recursive descent parser for the Bol language. Turns the Lexer's token list into a Program.

Grammar, one method per rule:

```
<program>     ::= "bola saheb" NEWLINE <statement>* "yeto saheb"
<block>       ::= "{" NEWLINE? <statement>* "}"
<statement>   ::= "he ghe" IDENT "=" <expr>                       ; declare
                | IDENT "=" <expr>                                ; assign
                | "he bol" <expr>                                 ; print
                | "jr" <expr> <block> ("nahitr jr" <expr> <block>)* ("nahitr" <block>)?
                | "joparyant" <expr> <block>
                | "thamb" | "pudhe ja"
                | "karya" IDENT "(" (IDENT ("," IDENT)*)? ")" <block>
                | "parat" <expr>?

<expr>        ::= <and> ("kinva" <and>)*
<and>         ::= <comparison> ("ani" <comparison>)*
<comparison>  ::= <additive> (("==" | "!=" | "<" | ">" | "<=" | ">=") <additive>)?   ; non-associative
<additive>    ::= <multiplicative> (("+" | "-") <multiplicative>)*
<multiplicative> ::= <unary> (("*" | "/") <unary>)*
<unary>       ::= ("nahi" | "-") <unary> | <primary>
<primary>     ::= NUMBER | STRING | "barobr" | "chuk" | "shunya" | IDENT | IDENT "(" (<expr> ("," <expr>)*)? ")"
                | "(" <expr> ")"
```

Every statement must be followed by a NEWLINE unless it is the last one before "}", "yeto saheb" or end of input.
"""

from bol.lang.error import ParseError
from bol.lang.nodes import (
    AssignStatement, BinaryExpr, BooleanLiteral, BreakStatement, ContinueStatement, DeclareStatement, ElseIf,
    FunctionCallExpr, FunctionDeclaration, Identifier, IfStatement, NullLiteral, NumberLiteral, PrintStatement,
    Program, ReturnStatement, StringLiteral, UnaryExpr, WhileStatement
)
from bol.lang.tokens import TokenKind


COMPARISON_OPERATORS = {
    TokenKind.EQ_EQ, TokenKind.BANG_EQ, TokenKind.LT, TokenKind.GT, TokenKind.LT_EQ, TokenKind.GT_EQ
}

STATEMENT_TERMINATORS = {TokenKind.EOF, TokenKind.PROGRAM_END, TokenKind.RBRACE}


class Parser:
    """Parses a token list (which must end with EOF) into a Program."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

        self.statement_rules = {
            TokenKind.DECLARE: self.parse_declare,
            TokenKind.IDENTIFIER: self.parse_assign,
            TokenKind.PRINT: self.parse_print,
            TokenKind.IF: self.parse_if,
            TokenKind.WHILE: self.parse_while,
            TokenKind.BREAK: self.parse_break,
            TokenKind.CONTINUE: self.parse_continue,
            TokenKind.FUNCTION: self.parse_function,
            TokenKind.RETURN: self.parse_return,
        }

    def parse(self):
        """Parses a whole program bracketed by "bola saheb" ... "yeto saheb"."""
        self.expect(TokenKind.PROGRAM_START)
        self.expect_newline()
        statements = self.parse_statements({TokenKind.PROGRAM_END, TokenKind.EOF})
        self.expect(TokenKind.PROGRAM_END)
        return Program(statements)

    def parse_fragment(self):
        """Parses statements up to end of input, without program markers. Used by the interactive shell."""
        statements = self.parse_statements({TokenKind.EOF})
        self.expect(TokenKind.EOF)
        return Program(statements)

    def parse_statements(self, until):
        statements = []
        while self.current.kind not in until:
            if self.match(TokenKind.NEWLINE):
                continue
            statements.append(self.parse_statement())
        return tuple(statements)

    def parse_block(self):
        """Parses "{" ... "}", returning the statements inside."""
        self.expect(TokenKind.LBRACE)
        self.match(TokenKind.NEWLINE)
        statements = self.parse_statements({TokenKind.RBRACE, TokenKind.EOF})
        self.expect(TokenKind.RBRACE)
        return statements

    # statements

    def parse_statement(self):
        token = self.current
        rule = self.statement_rules.get(token.kind)
        if rule is None:
            raise ParseError(f"'{token.value}' cannot start a statement", token.line, token.value)
        return rule()

    def parse_declare(self):
        line = self.expect(TokenKind.DECLARE).line
        name = self.expect(TokenKind.IDENTIFIER).value
        self.expect(TokenKind.ASSIGN)
        value = self.parse_expression()
        self.expect_newline()
        return DeclareStatement(name, value, line=line)

    def parse_assign(self):
        name = self.expect(TokenKind.IDENTIFIER)

        if self.check(TokenKind.LPAREN):
            raise ParseError(
                f"function call used as a statement; keep its result with 'he ghe _ = {name.value}(...)'",
                name.line, name.value
            )

        self.expect(TokenKind.ASSIGN)
        value = self.parse_expression()
        self.expect_newline()
        return AssignStatement(name.value, value, line=name.line)

    def parse_print(self):
        line = self.expect(TokenKind.PRINT).line
        value = self.parse_expression()
        self.expect_newline()
        return PrintStatement(value, line=line)

    def parse_if(self):
        line = self.expect(TokenKind.IF).line
        condition = self.parse_expression()
        self.match(TokenKind.NEWLINE)
        then_block = self.parse_block()

        else_ifs = []
        else_block = None
        while True:
            self.match(TokenKind.NEWLINE)
            if self.match(TokenKind.ELSE_IF):
                else_if_condition = self.parse_expression()
                self.match(TokenKind.NEWLINE)
                else_ifs.append(ElseIf(else_if_condition, self.parse_block()))
                continue

            if self.match(TokenKind.ELSE):
                self.match(TokenKind.NEWLINE)
                else_block = self.parse_block()
            break

        self.match(TokenKind.NEWLINE)
        return IfStatement(condition, then_block, tuple(else_ifs), else_block, line=line)

    def parse_while(self):
        line = self.expect(TokenKind.WHILE).line
        condition = self.parse_expression()
        self.match(TokenKind.NEWLINE)
        body = self.parse_block()
        self.match(TokenKind.NEWLINE)
        return WhileStatement(condition, body, line=line)

    def parse_break(self):
        line = self.expect(TokenKind.BREAK).line
        self.expect_newline()
        return BreakStatement(line=line)

    def parse_continue(self):
        line = self.expect(TokenKind.CONTINUE).line
        self.expect_newline()
        return ContinueStatement(line=line)

    def parse_function(self):
        line = self.expect(TokenKind.FUNCTION).line
        name = self.expect(TokenKind.IDENTIFIER).value
        self.expect(TokenKind.LPAREN)

        params = []
        if not self.check(TokenKind.RPAREN):
            params.append(self.expect(TokenKind.IDENTIFIER).value)
            while self.match(TokenKind.COMMA):
                params.append(self.expect(TokenKind.IDENTIFIER).value)
        self.expect(TokenKind.RPAREN)

        self.match(TokenKind.NEWLINE)
        body = self.parse_block()
        self.match(TokenKind.NEWLINE)
        return FunctionDeclaration(name, tuple(params), body, line=line)

    def parse_return(self):
        line = self.expect(TokenKind.RETURN).line

        if self.check(TokenKind.NEWLINE) or self.current.kind in STATEMENT_TERMINATORS:
            self.match(TokenKind.NEWLINE)
            return ReturnStatement(None, line=line)

        value = self.parse_expression()
        self.expect_newline()
        return ReturnStatement(value, line=line)

    # expressions, lowest precedence first

    def parse_expression(self):
        return self.parse_or()

    def parse_or(self):
        left = self.parse_and()
        while self.check(TokenKind.OR):
            op = self.advance().value
            left = BinaryExpr(op, left, self.parse_and())
        return left

    def parse_and(self):
        left = self.parse_comparison()
        while self.check(TokenKind.AND):
            op = self.advance().value
            left = BinaryExpr(op, left, self.parse_comparison())
        return left

    def parse_comparison(self):
        left = self.parse_additive()
        if self.current.kind in COMPARISON_OPERATORS:  # at most one: a < b < c is a parse error
            op = self.advance().value
            left = BinaryExpr(op, left, self.parse_additive())
        return left

    def parse_additive(self):
        left = self.parse_multiplicative()
        while self.check(TokenKind.PLUS) or self.check(TokenKind.MINUS):
            op = self.advance().value
            left = BinaryExpr(op, left, self.parse_multiplicative())
        return left

    def parse_multiplicative(self):
        left = self.parse_unary()
        while self.check(TokenKind.STAR) or self.check(TokenKind.SLASH):
            op = self.advance().value
            left = BinaryExpr(op, left, self.parse_unary())
        return left

    def parse_unary(self):
        if self.check(TokenKind.NOT):
            op = self.advance().value
            return UnaryExpr(op, self.parse_unary())

        if self.match(TokenKind.MINUS):
            operand = self.parse_unary()
            if isinstance(operand, NumberLiteral):
                return NumberLiteral(-operand.value)
            return UnaryExpr("-", operand)

        return self.parse_primary()

    def parse_primary(self):
        token = self.advance()

        if token.kind is TokenKind.NUMBER:
            return NumberLiteral(float(token.value))
        elif token.kind is TokenKind.STRING:
            return StringLiteral(token.value)
        elif token.kind is TokenKind.TRUE:
            return BooleanLiteral(True)
        elif token.kind is TokenKind.FALSE:
            return BooleanLiteral(False)
        elif token.kind is TokenKind.NULL:
            return NullLiteral()
        elif token.kind is TokenKind.IDENTIFIER:
            if self.check(TokenKind.LPAREN):
                return self.parse_call(token.value)
            return Identifier(token.value)
        elif token.kind is TokenKind.LPAREN:
            expr = self.parse_expression()
            self.expect(TokenKind.RPAREN)
            return expr

        if token.kind is TokenKind.EOF:
            raise ParseError("expected an expression but found end of input", token.line)
        raise ParseError(f"'{token.value}' is not an expression", token.line, token.value)

    def parse_call(self, callee):
        self.expect(TokenKind.LPAREN)

        args = []
        if not self.check(TokenKind.RPAREN):
            args.append(self.parse_expression())
            while self.match(TokenKind.COMMA):
                args.append(self.parse_expression())
        self.expect(TokenKind.RPAREN)

        return FunctionCallExpr(callee, tuple(args))

    # token navigation

    @property
    def current(self):
        return self.tokens[self.pos]

    def advance(self):
        """Returns the current token and moves past it. Never moves past EOF."""
        token = self.tokens[self.pos]
        if token.kind is not TokenKind.EOF:
            self.pos += 1
        return token

    def check(self, kind):
        return self.current.kind is kind

    def match(self, kind):
        """Consumes the current token if it is of kind. Returns whether or not it did."""
        if self.check(kind):
            self.advance()
            return True
        return False

    def expect(self, kind):
        token = self.current
        if token.kind is not kind:
            found = token.value if token.kind is not TokenKind.EOF else "end of input"
            raise ParseError(f"expected {kind.name} but found '{found}'", token.line, token.value or None)
        return self.advance()

    def expect_newline(self):
        """Ends a statement: consumes a NEWLINE, or accepts (without consuming) a block/program terminator."""
        if self.match(TokenKind.NEWLINE) or self.current.kind in STATEMENT_TERMINATORS:
            return

        token = self.current
        raise ParseError(f"unexpected '{token.value}' after statement", token.line, token.value)


def parse(tokens):
    """Returns the Program for tokens. Raises ParseError if tokens do not match the grammar."""
    return Parser(tokens).parse()

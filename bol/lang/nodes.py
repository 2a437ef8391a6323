"""Abstract syntax tree for the Bol language. Nodes are plain immutable data: all behavior lives in the Parser (which
builds them) and the Interpreter (which walks them).

Statements carry the source line they start on. The line is not part of node equality, so trees built by hand in tests
compare equal to parsed ones.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


# expressions

@dataclass(frozen=True)
class NumberLiteral:
    value: float


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool


@dataclass(frozen=True)
class NullLiteral:
    pass


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class BinaryExpr:
    op: str
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class UnaryExpr:
    op: str
    operand: "Expression"


@dataclass(frozen=True)
class FunctionCallExpr:
    callee: str
    args: Tuple["Expression", ...] = ()


Expression = Union[
    NumberLiteral, StringLiteral, BooleanLiteral, NullLiteral, Identifier, BinaryExpr, UnaryExpr, FunctionCallExpr
]


# statements

@dataclass(frozen=True)
class DeclareStatement:
    name: str
    value: Expression
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class AssignStatement:
    name: str
    value: Expression
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class PrintStatement:
    value: Expression
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class ElseIf:
    condition: Expression
    block: Tuple["Statement", ...]


@dataclass(frozen=True)
class IfStatement:
    condition: Expression
    then_block: Tuple["Statement", ...]
    else_ifs: Tuple[ElseIf, ...] = ()
    else_block: Optional[Tuple["Statement", ...]] = None
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class WhileStatement:
    condition: Expression
    body: Tuple["Statement", ...]
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class BreakStatement:
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class ContinueStatement:
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class FunctionDeclaration:
    name: str
    params: Tuple[str, ...]
    body: Tuple["Statement", ...]
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class ReturnStatement:
    value: Optional[Expression] = None
    line: Optional[int] = field(default=None, compare=False)


Statement = Union[
    DeclareStatement, AssignStatement, PrintStatement, IfStatement, WhileStatement, BreakStatement,
    ContinueStatement, FunctionDeclaration, ReturnStatement
]


@dataclass(frozen=True)
class Program:
    statements: Tuple[Statement, ...]

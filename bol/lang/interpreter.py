"""Tree-walking interpreter for the Bol language.

Executing a block returns a signal instead of setting interpreter state:

    NORMAL        -> the block ran to its end
    BREAK         -> "thamb": consumed by the nearest enclosing loop
    CONTINUE      -> "pudhe ja": consumed by the nearest enclosing loop, which re-checks its condition
    Return(value) -> "parat": passes through loops and ifs, consumed by the function call boundary

Top-level execution is two-pass: every function declaration is bound in the global environment first, so a function
can be called before (or by a function declared before) its textual position.
"""

import operator
import sys
from dataclasses import dataclass
from typing import Any

from bol.lang.environment import Environment
from bol.lang.error import BolRuntimeError
from bol.lang.lexer import tokenize
from bol.lang.nodes import (
    AssignStatement, BinaryExpr, BooleanLiteral, BreakStatement, ContinueStatement, DeclareStatement,
    FunctionCallExpr, FunctionDeclaration, Identifier, IfStatement, NullLiteral, NumberLiteral, PrintStatement,
    ReturnStatement, StringLiteral, UnaryExpr, WhileStatement
)
from bol.lang.parser import parse
from bol.lang.values import Function, display, is_boolean, is_number, type_name, values_equal


class Signal:
    """Outcome of executing a statement or block."""


@dataclass(frozen=True)
class Normal(Signal):
    pass


@dataclass(frozen=True)
class Break(Signal):
    pass


@dataclass(frozen=True)
class Continue(Signal):
    pass


@dataclass(frozen=True)
class Return(Signal):
    value: Any = None


NORMAL = Normal()
BREAK = Break()
CONTINUE = Continue()


ARITHMETIC = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

ORDERING = {
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}

LOGICAL = {"ani", "kinva"}

# each Bol call is about seven Python frames deep
RECURSION_LIMIT = 10000


class Interpreter:
    """Runs Programs. Printed lines are passed to output (default: standard output). The global environment lives as
    long as the Interpreter, so successive runs share declarations.
    """

    def __init__(self, output=None):
        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)

        self.output = output if output is not None else print
        self.globals = Environment()

        self.statement_handlers = {
            DeclareStatement: self.exec_declare,
            AssignStatement: self.exec_assign,
            PrintStatement: self.exec_print,
            IfStatement: self.exec_if,
            WhileStatement: self.exec_while,
            BreakStatement: lambda stmt, env: BREAK,
            ContinueStatement: lambda stmt, env: CONTINUE,
            FunctionDeclaration: self.exec_function,
            ReturnStatement: self.exec_return,
        }
        self.expression_handlers = {
            NumberLiteral: lambda expr, env: expr.value,
            StringLiteral: lambda expr, env: expr.value,
            BooleanLiteral: lambda expr, env: expr.value,
            NullLiteral: lambda expr, env: None,
            Identifier: lambda expr, env: env.get(expr.name),
            BinaryExpr: self.eval_binary,
            UnaryExpr: self.eval_unary,
            FunctionCallExpr: self.eval_call,
        }

    def run(self, program):
        for stmt in program.statements:
            if isinstance(stmt, FunctionDeclaration):
                self.execute(stmt, self.globals)

        for stmt in program.statements:
            if isinstance(stmt, FunctionDeclaration):
                continue

            signal = self.execute(stmt, self.globals)
            if signal is not NORMAL:
                raise BolRuntimeError(self.stray_signal_message(signal), stmt.line)

    # statements

    def execute(self, stmt, env):
        """Executes stmt in env and returns its Signal. Runtime errors without a line are tagged with stmt's line."""
        handler = self.statement_handlers.get(type(stmt))
        if handler is None:
            raise BolRuntimeError(f"unknown statement '{type(stmt).__name__}'", getattr(stmt, "line", None))

        try:
            return handler(stmt, env)
        except BolRuntimeError as error:
            if error.line is None:
                error.line = stmt.line
            raise

    def execute_block(self, statements, env):
        """Executes statements in order, stopping at the first one that does not complete normally."""
        for stmt in statements:
            signal = self.execute(stmt, env)
            if signal is not NORMAL:
                return signal
        return NORMAL

    def exec_declare(self, stmt, env):
        env.declare(stmt.name, self.evaluate(stmt.value, env))
        return NORMAL

    def exec_assign(self, stmt, env):
        env.assign(stmt.name, self.evaluate(stmt.value, env))
        return NORMAL

    def exec_print(self, stmt, env):
        self.output(display(self.evaluate(stmt.value, env)))
        return NORMAL

    def exec_if(self, stmt, env):
        if self.condition(stmt.condition, env, "jr"):
            return self.execute_block(stmt.then_block, Environment(env))

        for else_if in stmt.else_ifs:
            if self.condition(else_if.condition, env, "nahitr jr"):
                return self.execute_block(else_if.block, Environment(env))

        if stmt.else_block is not None:
            return self.execute_block(stmt.else_block, Environment(env))
        return NORMAL

    def exec_while(self, stmt, env):
        while self.condition(stmt.condition, env, "joparyant"):
            signal = self.execute_block(stmt.body, Environment(env))
            if signal is BREAK:
                break
            elif isinstance(signal, Return):
                return signal
        return NORMAL

    def exec_function(self, stmt, env):
        env.declare(stmt.name, Function(stmt.name, stmt.params, stmt.body))
        return NORMAL

    def exec_return(self, stmt, env):
        value = self.evaluate(stmt.value, env) if stmt.value is not None else None
        return Return(value)

    def condition(self, expr, env, keyword):
        value = self.evaluate(expr, env)
        if not is_boolean(value):
            raise BolRuntimeError(f"'{keyword}' needs a boolean condition, got {type_name(value)} '{display(value)}'")
        return value

    @staticmethod
    def stray_signal_message(signal):
        if isinstance(signal, Return):
            return "'parat' used outside of a function"
        keyword = "thamb" if signal is BREAK else "pudhe ja"
        return f"'{keyword}' used outside of a loop"

    # expressions

    def evaluate(self, expr, env):
        handler = self.expression_handlers.get(type(expr))
        if handler is None:
            raise BolRuntimeError(f"unknown expression '{type(expr).__name__}'")
        return handler(expr, env)

    def eval_call(self, expr, env):
        function = env.get(expr.callee)
        if not isinstance(function, Function):
            raise BolRuntimeError(f"'{expr.callee}' is not a function", text=expr.callee)

        args = [self.evaluate(arg, env) for arg in expr.args]
        if len(args) != len(function.params):
            raise BolRuntimeError(
                f"'{expr.callee}' expects {len(function.params)} argument(s) but got {len(args)}", text=expr.callee
            )

        # parented to the global scope: functions never see their caller's locals
        call_env = Environment(self.globals)
        for param, arg in zip(function.params, args):
            call_env.declare(param, arg)

        signal = self.execute_block(function.body, call_env)
        if isinstance(signal, Return):
            return signal.value
        elif signal is not NORMAL:
            raise BolRuntimeError(self.stray_signal_message(signal))
        return None

    def eval_binary(self, expr, env):
        op = expr.op
        if op in LOGICAL:
            return self.eval_logical(expr, env)

        left = self.evaluate(expr.left, env)
        right = self.evaluate(expr.right, env)

        if is_number(left) and is_number(right):
            if op == "/" and right == 0:
                raise BolRuntimeError("division by zero")
            if op in ARITHMETIC:
                return ARITHMETIC[op](left, right)
            if op in ORDERING:
                return ORDERING[op](left, right)

        elif is_boolean(left) and is_boolean(right):
            if op not in ("==", "!="):
                raise BolRuntimeError(f"'{op}' cannot be used on booleans; only '==' and '!=' can")

        elif op == "+":
            return display(left) + display(right)

        if op == "==":
            return values_equal(left, right)
        elif op == "!=":
            return not values_equal(left, right)

        raise BolRuntimeError(f"'{op}' cannot be used on {type_name(left)} and {type_name(right)}", text=op)

    def eval_logical(self, expr, env):
        """Short-circuiting "ani"/"kinva". Both operands (when evaluated) must be booleans."""
        left = self.logical_operand(expr.op, self.evaluate(expr.left, env))
        if (expr.op == "ani" and not left) or (expr.op == "kinva" and left):
            return left

        return self.logical_operand(expr.op, self.evaluate(expr.right, env))

    @staticmethod
    def logical_operand(op, value):
        if not is_boolean(value):
            raise BolRuntimeError(f"'{op}' needs booleans, got {type_name(value)} '{display(value)}'", text=op)
        return value

    def eval_unary(self, expr, env):
        operand = self.evaluate(expr.operand, env)

        if expr.op == "nahi":
            if not is_boolean(operand):
                raise BolRuntimeError(f"'nahi' needs a boolean, got {type_name(operand)} '{display(operand)}'")
            return not operand

        if expr.op == "-":
            if not is_number(operand):
                raise BolRuntimeError(f"unary '-' needs a number, got {type_name(operand)} '{display(operand)}'")
            return -operand

        raise BolRuntimeError(f"unknown unary operator '{expr.op}'")


def run_source(source, output=None):
    """Lexes, parses and runs source with a fresh Interpreter. Returns the printed lines; each line is also passed to
    output as soon as it is printed, if given. Raises LexError, ParseError or BolRuntimeError on failure.
    """
    lines = []

    def emit(line):
        lines.append(line)
        if output is not None:
            output(line)

    Interpreter(emit).run(parse(tokenize(source)))
    return lines

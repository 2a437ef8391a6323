import unittest

from bol.lang.error import ParseError
from bol.lang.lexer import tokenize
from bol.lang.nodes import (
    AssignStatement, BinaryExpr, BooleanLiteral, BreakStatement, ContinueStatement, DeclareStatement, ElseIf,
    FunctionCallExpr, FunctionDeclaration, Identifier, IfStatement, NullLiteral, NumberLiteral, PrintStatement,
    Program, ReturnStatement, StringLiteral, UnaryExpr, WhileStatement
)
from bol.lang.parser import Parser, parse


def program(body):
    return parse(tokenize(f"bola saheb\n{body}\nyeto saheb"))


def expression(source):
    """Parses source as the value of a print statement."""
    return program(f"he bol {source}").statements[0].value


def num(value):
    return NumberLiteral(float(value))


class ExpressionTestCase(unittest.TestCase):

    def test_literals(self):
        cases = {
            "42": num(42),
            "3.5": num(3.5),
            "\"hi\"": StringLiteral("hi"),
            "barobr": BooleanLiteral(True),
            "chuk": BooleanLiteral(False),
            "shunya": NullLiteral(),
            "x": Identifier("x"),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, expression(case), case)

    def test_precedence(self):
        cases = {
            "2 + 3 * 4": BinaryExpr("+", num(2), BinaryExpr("*", num(3), num(4))),
            "(2 + 3) * 4": BinaryExpr("*", BinaryExpr("+", num(2), num(3)), num(4)),
            "x > 0 ani y < 10": BinaryExpr(
                "ani", BinaryExpr(">", Identifier("x"), num(0)), BinaryExpr("<", Identifier("y"), num(10))
            ),
            "a kinva b ani c": BinaryExpr("kinva", Identifier("a"), BinaryExpr("ani", Identifier("b"), Identifier("c"))),
            "1 + 2 == 3": BinaryExpr("==", BinaryExpr("+", num(1), num(2)), num(3)),
            "nahi a ani b": BinaryExpr("ani", UnaryExpr("nahi", Identifier("a")), Identifier("b")),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, expression(case), case)

    def test_left_associativity(self):
        cases = {
            "10 - 4 - 3": BinaryExpr("-", BinaryExpr("-", num(10), num(4)), num(3)),
            "8 / 4 / 2": BinaryExpr("/", BinaryExpr("/", num(8), num(4)), num(2)),
            "a kinva b kinva c": BinaryExpr("kinva", BinaryExpr("kinva", Identifier("a"), Identifier("b")),
                                            Identifier("c")),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, expression(case), case)

    def test_comparison_is_non_associative(self):
        should_raise = ["1 < 2 < 3", "a == b == c", "(1 < 2 < 3)"]
        for case in should_raise:
            self.assertRaises(ParseError, expression, case)

        self.assertEqual(
            BinaryExpr("==", BinaryExpr("<", num(1), num(2)), BooleanLiteral(True)), expression("(1 < 2) == barobr")
        )

    def test_unary(self):
        cases = {
            "-5": num(-5),
            "- -5": num(5),
            "-x": UnaryExpr("-", Identifier("x")),
            "-(1 + 2)": UnaryExpr("-", BinaryExpr("+", num(1), num(2))),
            "nahi nahi barobr": UnaryExpr("nahi", UnaryExpr("nahi", BooleanLiteral(True))),
            "2 * -3": BinaryExpr("*", num(2), num(-3)),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, expression(case), case)

    def test_calls(self):
        cases = {
            "f()": FunctionCallExpr("f", ()),
            "add(1, x)": FunctionCallExpr("add", (num(1), Identifier("x"))),
            "f(g(1), 2 * 3)": FunctionCallExpr("f", (FunctionCallExpr("g", (num(1),)), BinaryExpr("*", num(2), num(3)))),
            "f (1)": FunctionCallExpr("f", (num(1),)),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, expression(case), case)

    def test_bad_expressions(self):
        should_raise = ["", "+", "(1 + 2", "f(1,)", "f(1 2)", "he ghe", ")"]
        for case in should_raise:
            self.assertRaises(ParseError, expression, case)


class StatementTestCase(unittest.TestCase):

    def test_simple_statements(self):
        cases = {
            "he ghe x = 10": DeclareStatement("x", num(10)),
            "x = x + 1": AssignStatement("x", BinaryExpr("+", Identifier("x"), num(1))),
            "he bol \"Hello World!\"": PrintStatement(StringLiteral("Hello World!")),
            "he ghe r = f(2)": DeclareStatement("r", FunctionCallExpr("f", (num(2),))),
        }
        for case, expected in cases.items():
            self.assertEqual(Program((expected,)), program(case), case)

    def test_if_chain(self):
        source = (
            "jr x > 0 {\n"
            "    he bol 1\n"
            "}\n"
            "nahitr jr x < 0 {\n"
            "    he bol 2\n"
            "} nahitr jr x == 0 { he bol 3 }\n"
            "nahitr\n"
            "{\n"
            "    he bol 4\n"
            "}\n"
            "he bol 5"
        )
        expected = IfStatement(
            BinaryExpr(">", Identifier("x"), num(0)),
            (PrintStatement(num(1)),),
            (ElseIf(BinaryExpr("<", Identifier("x"), num(0)), (PrintStatement(num(2)),)),
             ElseIf(BinaryExpr("==", Identifier("x"), num(0)), (PrintStatement(num(3)),))),
            (PrintStatement(num(4)),),
        )
        self.assertEqual(Program((expected, PrintStatement(num(5)))), program(source))

    def test_if_without_else(self):
        stmt = program("jr barobr { }").statements[0]
        self.assertEqual(IfStatement(BooleanLiteral(True), (), (), None), stmt)

    def test_while(self):
        source = "joparyant i < 3 {\n  i = i + 1\n  jr i == 2 {\n    pudhe ja\n  }\n  thamb\n}"
        expected = WhileStatement(
            BinaryExpr("<", Identifier("i"), num(3)),
            (AssignStatement("i", BinaryExpr("+", Identifier("i"), num(1))),
             IfStatement(BinaryExpr("==", Identifier("i"), num(2)), (ContinueStatement(),)),
             BreakStatement()),
        )
        self.assertEqual(Program((expected,)), program(source))

    def test_function_declaration(self):
        cases = {
            "karya hello() {\n he bol \"hi\"\n}": FunctionDeclaration("hello", (), (PrintStatement(StringLiteral("hi")),)),
            "karya add(a, b) { parat a + b }": FunctionDeclaration(
                "add", ("a", "b"), (ReturnStatement(BinaryExpr("+", Identifier("a"), Identifier("b"))),)
            ),
            "karya nothing(x)\n{\n parat\n}": FunctionDeclaration("nothing", ("x",), (ReturnStatement(None),)),
        }
        for case, expected in cases.items():
            self.assertEqual(Program((expected,)), program(case), case)

    def test_bare_return(self):
        stmts = program("karya f() {\n parat\n he bol 1\n}").statements[0].body
        self.assertEqual((ReturnStatement(None), PrintStatement(num(1))), stmts)

    def test_bad_function_declarations(self):
        should_raise = ["karya () { }", "karya f(a,) { }", "karya f(1) { }", "karya f(a b) { }", "karya f() parat 1"]
        for case in should_raise:
            self.assertRaises(ParseError, program, case)

    def test_bare_call_statement(self):
        with self.assertRaises(ParseError) as context:
            program("greet(\"world\")")
        self.assertIn("he ghe _ = greet(...)", context.exception.msg)
        self.assertEqual(2, context.exception.line)

    def test_bad_statements(self):
        should_raise = [
            "he ghe = 5", "he ghe x 5", "x + 1", "5", "he bol 1 2", "thamb 1", "{ he bol 1 }", "jr x { he bol 1",
            "nahitr { }", "x = ", "parat 1 2",
        ]
        for case in should_raise:
            self.assertRaises(ParseError, program, case)

    def test_lines(self):
        stmts = program("he ghe x = 1\n\njr x == 1 {\n  he bol x\n}").statements
        self.assertEqual([2, 4], [stmt.line for stmt in stmts])
        self.assertEqual(5, stmts[1].then_block[0].line)


class ProgramTestCase(unittest.TestCase):

    def test_program_markers(self):
        should_raise = ["he bol 1\nyeto saheb", "bola saheb\nhe bol 1", "bola saheb he bol 1\nyeto saheb", ""]
        for case in should_raise:
            self.assertRaises(ParseError, parse, tokenize(case))

    def test_empty_program(self):
        should_pass = ["bola saheb\nyeto saheb", "\n\n-- comment\nbola saheb\n\n\nyeto saheb\n"]
        for case in should_pass:
            self.assertEqual(Program(()), parse(tokenize(case)), case)

    def test_last_statement_before_end(self):
        self.assertEqual(Program((PrintStatement(num(1)),)), parse(tokenize("bola saheb\nhe bol 1 yeto saheb")))

    def test_error_report(self):
        with self.assertRaises(ParseError) as context:
            parse(tokenize("bola saheb\nhe ghe x = 1\nhe ghe y = * 2\nyeto saheb"))
        self.assertEqual(3, context.exception.line)
        self.assertEqual("*", context.exception.text)
        self.assertIn("[line 3]", str(context.exception))

    def test_fragment(self):
        parser = Parser(tokenize("he ghe x = 1\nhe bol x\n"))
        self.assertEqual(
            Program((DeclareStatement("x", num(1)), PrintStatement(Identifier("x")))), parser.parse_fragment()
        )
        self.assertRaises(ParseError, Parser(tokenize("he bol 1 }")).parse_fragment)


if __name__ == '__main__':
    unittest.main()

import unittest

from bol.lang.values import Function, display, format_number, type_name, values_equal


class DisplayTestCase(unittest.TestCase):

    def test_display(self):
        func = Function("add", ("a", "b"), ())
        cases = [
            (None, "shunya"),
            (True, "khara"),
            (False, "khota"),
            (120.0, "120"),
            (-3.0, "-3"),
            (0.5, "0.5"),
            (-0.0, "0"),
            ("text", "text"),
            ("", ""),
            (func, "<karya add>"),
        ]
        for value, expected in cases:
            self.assertEqual(expected, display(value), repr(value))

    def test_format_number(self):
        cases = {
            0.1 + 0.2: "0.30000000000000004",
            1e21: "1e+21",
            float("inf"): "Infinity",
            float("-inf"): "-Infinity",
            float("nan"): "NaN",
            10 / 4: "2.5",
            0.00001: "0.00001",
            0.000001: "0.000001",
            1e-7: "1e-7",
            -1.5e-9: "-1.5e-9",
            123.456: "123.456",
            1e20: "100000000000000000000",
            1.5e300: "1.5e+300",
        }
        for value, expected in cases.items():
            self.assertEqual(expected, format_number(value), repr(value))

    def test_type_name(self):
        cases = [(None, "null"), (True, "boolean"), (1.0, "number"), ("s", "string"), (Function("f", (), ()), "function")]
        for value, expected in cases:
            self.assertEqual(expected, type_name(value))


class EqualityTestCase(unittest.TestCase):

    def test_values_equal(self):
        func = Function("f", (), ())
        should_pass = [(1.0, 1.0), ("a", "a"), (True, True), (None, None), (func, func)]
        for left, right in should_pass:
            self.assertTrue(values_equal(left, right), (left, right))

        should_fail = [(1.0, 2.0), (1.0, True), (0.0, False), ("1", 1.0), (None, False), (func, Function("f", (), ()))]
        for left, right in should_fail:
            self.assertFalse(values_equal(left, right), (left, right))


if __name__ == '__main__':
    unittest.main()

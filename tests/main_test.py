import io
import unittest
from unittest import mock

from assignlang.lang.error import ErrorHandler
from assignlang.main import execute, main, read_full_source


class ReadFullSourceTestCase(unittest.TestCase):

    def test_read_full_source(self):
        cases = {
            "": "",
            "x = 1;": "x = 1; ",
            "x = 1;\ny = 2;\n": "x = 1; y = 2; ",
            "x = 1;\ny = 2;\n\nz = 3;\n": "x = 1; y = 2; ",
            "\nx = 1;\n": "",
            "x = \r\n1;\r\n": "x =  1; ",
            "  \nx = 1;\n": "   x = 1; ",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, read_full_source(io.StringIO(case)), repr(case))

    def test_statement_across_lines(self):
        self.assertEqual("x = 1 + 2 ;", read_full_source(io.StringIO("x = 1\n+ 2\n;")).rstrip())


class ExecuteTestCase(unittest.TestCase):

    def run_source(self, source):
        error_handler = ErrorHandler(fatal=False, out=io.StringIO(), err=io.StringIO())
        execute(source, error_handler)
        return error_handler.out.getvalue()

    def test_execute(self):
        cases = {
            "x = 5;": "x = 5\n",
            "x = 2 + 3 * 4;": "x = 14\n",
            "x = -(3 - 5);": "x = 2\n",
            "x = 1; x = x + 1;": "x = 2\n",
            "b = 0 - 12; a = b * b;": "b = -12\na = 144\n",
            "": "",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, self.run_source(case), case)

    def test_errors_print_nothing_else(self):
        should_fail = ["x = 01;", "a = 1; b = 2; y = x;", "x = 1 + ;", "a = 1; b = ;"]
        for case in should_fail:
            self.assertEqual("error\n", self.run_source(case), case)


class MainTestCase(unittest.TestCase):

    def test_main(self):
        with mock.patch("sys.stdin", io.StringIO("a = 3;\nb = a * -2;\n\nc = 1;\n")), \
                mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            main()
        self.assertEqual("a = 3\nb = -6\n", stdout.getvalue())

    def test_main_error(self):
        with mock.patch("sys.stdin", io.StringIO("a = 1;\ny = x;\n")), \
                mock.patch("sys.stdout", new_callable=io.StringIO) as stdout, \
                mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                main()
        self.assertEqual(1, ctx.exception.code)
        self.assertEqual("error\n", stdout.getvalue())


if __name__ == '__main__':
    unittest.main()

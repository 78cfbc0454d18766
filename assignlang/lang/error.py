"""Error handling for the assignment language. Only GenericExceptions should be encountered during running: if another
type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Whatever the kind of error, the user only ever sees the generic message on stdout. The kind, message and offending
source snippet are kept on the exception (and shown on stderr) so that they can be inspected while debugging/testing.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Tagged interpreter error. kind is one of SYNTAX, UNINITIALIZED, OVERFLOW, INTERNAL; expr is the source text the
    error occurred in and [start, end) is the offending span.
    """
    SYNTAX = "SyntaxError"
    UNINITIALIZED = "UninitializedError"
    OVERFLOW = "OverflowError"
    INTERNAL = "InternalError"

    def __init__(self, kind, msg, expr="", start=0, end=-1):
        super().__init__(msg)

        self.kind = kind
        self.msg = msg
        self.expr = expr
        self.start = start
        self.end = end if end != -1 else len(self.expr)  # needed for error display

    @property
    def internal(self):
        return self.kind == GenericException.INTERNAL

    def __repr__(self):
        return f"{type(self).__name__}({self.kind}, '{self.msg}', start={self.start}, end={self.end})"


def syntax_error(msg, expr="", start=0, end=-1):
    return GenericException(GenericException.SYNTAX, msg, expr, start, end)


def uninitialized_error(msg, expr="", start=0, end=-1):
    return GenericException(GenericException.UNINITIALIZED, msg, expr, start, end)


def overflow_error(msg, expr="", start=0, end=-1):
    return GenericException(GenericException.OVERFLOW, msg, expr, start, end)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report interpreter errors."""
    ERROR = "red"
    GENERIC_MESSAGE = "error"

    def __init__(self, fatal=True, out=None, err=None):
        self.fatal = fatal
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.error = None  # last reported error, kept for inspection when not fatal

    @staticmethod
    def diagnose(error):
        """Returns offending part of error.expr highlighted and bolded, with a caret line underneath."""
        expr = error.expr.rstrip()
        start = min(error.start, len(expr))
        end = min(max(error.end, start + 1), max(len(expr), start + 1))

        diagnosis = "  " + expr[:start]
        diagnosis += colored(expr[start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += expr[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Reports error: the generic message goes to self.out, the diagnosis to self.err. Exits with status 1 if
        self.fatal.
        """
        self.error = error
        print(ErrorHandler.GENERIC_MESSAGE, file=self.out)

        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += colored(f"{error.kind}: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=self.err)

        if not error.internal and error.expr:
            print(ErrorHandler.diagnose(error), file=self.err)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException(GenericException.INTERNAL, "keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException(GenericException.INTERNAL, "expression nested too deeply"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(GenericException.INTERNAL, f"unknown error: '{exc_type.__name__}: {exc_val}'"))
            do_exit = True

        return not do_exit

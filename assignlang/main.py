"""Runs an assignment-language program read from stdin and prints the final value of every assigned variable. Also
uses error handling context manager. Called from the `assign` console script and `python -m assignlang`.

Python version must be >=3.7, because the namespace report relies on dicts being insertion-ordered.
"""

import sys

from assignlang.lang.error import ErrorHandler
from assignlang.lang.session import Session


def read_full_source(stream=None):
    """Collects lines from stream until end of stream or a blank line, each followed by a single space."""
    if stream is None:
        stream = sys.stdin

    source = ""
    for line in stream:
        line = line.rstrip("\r\n")
        if not line:
            break
        source += line + " "
    return source


def print_line(text, stream=None):
    print(text, file=stream if stream is not None else sys.stdout)


def execute(source, error_handler):
    """Runs source in a fresh Session under error_handler. Variables are only printed if the whole program ran."""
    with error_handler:
        sess = Session(source)
        for name, value in sess.run():
            print_line(f"{name} = {value}", error_handler.out)


def main():
    """Runs the interpreter. Called from the assign executable script."""
    assert sys.version_info >= (3, 7), "assign cannot be run with python < 3.7"
    execute(read_full_source(), ErrorHandler())

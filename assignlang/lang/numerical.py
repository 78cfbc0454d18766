"""Integers in the assignment language are 64-bit signed. Python ints are unbounded, so every literal and every
arithmetic result is checked here: anything outside [INT_MIN, INT_MAX] is a fatal overflow rather than a wraparound.
"""

from assignlang.lang.error import overflow_error

INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1


def checked(value, token=None, source=""):
    """Returns value if it fits in 64 bits, otherwise raises an overflow GenericException pointing at token."""
    if INT_MIN <= value <= INT_MAX:
        return value

    start = token.pos if token is not None else 0
    end = start + len(token.value) if token is not None else -1
    raise overflow_error(f"integer overflow: {value} does not fit in 64 bits", source, start=start, end=end)


def number(token, source=""):
    """Returns the value of a NUM token. Its text is ASCII digits only (sign is a unary operator, not part of it)."""
    return checked(int(token.value), token, source)


def negate(value, token=None, source=""):
    return checked(-value, token, source)


def add(left, right, token=None, source=""):
    return checked(left + right, token, source)


def subtract(left, right, token=None, source=""):
    return checked(left - right, token, source)


def multiply(left, right, token=None, source=""):
    return checked(left * right, token, source)

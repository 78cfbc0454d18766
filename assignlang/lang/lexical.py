"""Lexical analysis for the assignment language. Note that this module does not read input, but rather tokenizes an
arbitrary source string on demand: tokens are produced one at a time as the parser asks for them.

Tokens can be loosely defined as follows:

```
<id>        ::= ( <letter> | "_" ) ( <letter> | <digit> | "_" )*
<num>       ::= "0" | <nonzero> <digit>*    ; "0" followed by another digit is an error (leading zeros)
<op>        ::= "+" | "-" | "*"
<assign>    ::= "="
<semicolon> ::= ";"
<lparen>    ::= "("
<rparen>    ::= ")"
```

Whitespace between tokens is skipped. Signs are never part of a <num>: they are unary operators handled by the parser.
"""

from dataclasses import dataclass
import string

from assignlang.lang.error import syntax_error


ID = "ID"
NUM = "NUM"
OP = "OP"
ASSIGN = "ASSIGN"
SEMICOLON = "SEMICOLON"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
END = "END"

ID_START = string.ascii_letters + "_"
ID_CHARS = ID_START + string.digits
OPERATORS = "+-*"
PUNCTUATION = {"=": ASSIGN, ";": SEMICOLON, "(": LPAREN, ")": RPAREN}


@dataclass(frozen=True)
class Token:
    """A single token. value is the lexeme ("" for END); pos is where it starts in the source (for error messages)."""
    kind: str
    value: str
    pos: int = 0

    def __str__(self):
        return self.value if self.kind != END else "<end>"


class Lexer:
    """Tokenizer over a complete source string. The cursor only ever moves forward."""

    def __init__(self, source):
        self.source = source
        self.pos = 0

    def _peek(self, offset=0):
        idx = self.pos + offset
        return self.source[idx] if idx < len(self.source) else ""

    def _take_while(self, chars):
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in chars:
            self.pos += 1
        return self.source[start:self.pos]

    def next_token(self):
        """Returns the next token, or an END token (forever) once the source is exhausted. Raises a syntax
        GenericException on an invalid character or a number with leading zeros.
        """
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self.pos += 1

        start = self.pos
        char = self._peek()

        if not char:
            return Token(END, "", start)

        if char in ID_START:
            return Token(ID, self._take_while(ID_CHARS), start)

        if char in string.digits:
            if char == "0" and self._peek(1) and self._peek(1) in string.digits:
                raise syntax_error("leading zeros not allowed", self.source, start=start,
                                   end=start + len(self._take_while(string.digits)))
            if char == "0":
                self.pos += 1
                return Token(NUM, "0", start)
            return Token(NUM, self._take_while(string.digits), start)

        if char in OPERATORS:
            self.pos += 1
            return Token(OP, char, start)

        if char in PUNCTUATION:
            self.pos += 1
            return Token(PUNCTUATION[char], char, start)

        raise syntax_error(f"invalid character '{char}'", self.source, start=start, end=start + 1)


def tokenize(source):
    """Yields every token in source, up to and including END."""
    lexer = Lexer(source)
    while True:
        token = lexer.next_token()
        yield token
        if token.kind == END:
            return

"""Session control for the assignment language. A Session parses and evaluates a whole program in a single
recursive-descent pass (no syntax tree is kept), committing each assignment to its own Namespace.

Grammar:

```
<program>    ::= <assignment>* <end>
<assignment> ::= <id> "=" <expression> ";"
<expression> ::= <term> (("+" | "-") <term>)*      ; left-associative
<term>       ::= <factor> ("*" <factor>)*           ; binds tighter than + and -
<factor>     ::= ("+" | "-") <factor>
               | <num>
               | <id>                               ; must already be initialized
               | "(" <expression> ")"
```
"""

from assignlang.lang import numerical
from assignlang.lang.error import syntax_error, uninitialized_error
from assignlang.lang.lexical import ASSIGN, END, ID, LPAREN, NUM, OP, RPAREN, SEMICOLON, Lexer
from assignlang.lang.namespace import Namespace


class Session:
    """Governs one program run. The only state is the current lookahead token and the namespace, both owned by this
    Session, so any number of Sessions can run side by side.
    """

    def __init__(self, source):
        self.source = source
        self.lexer = Lexer(source)
        self.namespace = Namespace()
        self.current = None  # lookahead token, set on first advance

    @property
    def results(self):
        """(name, value) of every initialized variable, in order of first assignment."""
        return self.namespace.enumerate()

    def advance(self):
        self.current = self.lexer.next_token()

    def expect(self, kind):
        """Raises a syntax GenericException if the current token is not of kind."""
        if self.current.kind != kind:
            raise self._error(f"expected {kind.lower()}, got '{self.current}'")

    def run(self):
        """Executes every assignment in the program. Raises the first error encountered, in which case the caller
        should discard the namespace: results are only meaningful after a successful run.
        """
        self.advance()
        while self.current.kind != END:
            self.assignment()
        return self.results

    def assignment(self):
        self.expect(ID)
        name = self.current.value
        self.advance()

        self.expect(ASSIGN)
        self.advance()

        value = self.expression()

        self.expect(SEMICOLON)
        self.advance()

        self.namespace.set(name, value)

    def expression(self):
        result = self.term()
        while self.current.kind == OP and self.current.value in "+-":
            op = self.current
            self.advance()
            if op.value == "+":
                result = numerical.add(result, self.term(), op, self.source)
            else:
                result = numerical.subtract(result, self.term(), op, self.source)
        return result

    def term(self):
        result = self.factor()
        while self.current.kind == OP and self.current.value == "*":
            op = self.current
            self.advance()
            result = numerical.multiply(result, self.factor(), op, self.source)
        return result

    def factor(self):
        token = self.current

        if token.kind == OP and token.value in "+-":
            self.advance()
            value = self.factor()
            return value if token.value == "+" else numerical.negate(value, token, self.source)

        elif token.kind == NUM:
            value = numerical.number(token, self.source)
            self.advance()
            return value

        elif token.kind == ID:
            value, initialized = self.namespace.get(token.value)
            if not initialized:
                raise uninitialized_error(f"use of uninitialized variable '{token.value}'", self.source,
                                          start=token.pos, end=token.pos + len(token.value))
            self.advance()
            return value

        elif token.kind == LPAREN:
            self.advance()
            value = self.expression()
            self.expect(RPAREN)
            self.advance()
            return value

        raise self._error(f"invalid factor '{token}'")

    def _error(self, msg):
        start = self.current.pos
        return syntax_error(msg, self.source, start=start, end=start + max(len(self.current.value), 1))

"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits an immutable expression tree:

    - atoms (symbols, numbers, booleans) -> Atom(text), kept as source text
    - lists -> tuple of expressions

  Literal interpretation is left to the evaluator; the reader makes no
  runtime-semantics decisions.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from lambic.errors import ParseError
from lambic.types.expression import Atom, Expression


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<ml_start>#\|)"  # multi-line comment start
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s();]+)"  # atoms: anything up to whitespace, parens or ;
    r")",
    re.DOTALL,
)


class Token(NamedTuple):
    kind: str
    text: str
    position: int


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, position) tuples."""
    pos = 0
    n = len(source)

    def skip_whitespace_and_comments():
        nonlocal pos
        while pos < n:
            if source[pos].isspace():
                pos += 1
                continue
            match = TOKEN_RE.match(source, pos)
            if match.group("comment"):
                pos = match.end()
            elif match.group("ml_start"):
                start = match.start("ml_start")
                pos = match.end()
                depth = 1
                while depth > 0:
                    if pos >= n:
                        raise ParseError("Unterminated multi-line comment", start, incomplete=True)
                    if source.startswith("#|", pos):
                        depth += 1
                        pos += 2
                    elif source.startswith("|#", pos):
                        depth -= 1
                        pos += 2
                    else:
                        pos += 1
            else:
                break

    while pos < n:
        skip_whitespace_and_comments()
        if pos >= n:
            break
        m = TOKEN_RE.match(source, pos)
        for nm in ("lparen", "rparen", "symbol"):
            if m.group(nm):
                yield Token(nm, m.group(nm), m.start(nm))
                pos = m.end()
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[Expression]:
        """Parse the next expression, or return None at end of input.

        Open lists are kept on an explicit stack, so nesting depth is not
        bounded by the host call stack.
        """
        tok = self.peek()
        if tok is None:
            return None

        if tok.kind == "rparen":
            raise ParseError("Unexpected ')'", tok.position)

        # (opening token, items so far), innermost last
        open_lists: list[tuple[Token, list[Expression]]] = []
        while True:
            tok = self.advance()
            if tok is None:
                raise ParseError("Unmatched '('", open_lists[-1][0].position, incomplete=True)
            if tok.kind == "lparen":
                open_lists.append((tok, []))
                continue
            if tok.kind == "symbol":
                expr = Atom(tok.text)
            elif tok.kind == "rparen":
                _, items = open_lists.pop()
                expr = tuple(items)
            else:
                raise ParseError(f"Unknown token: {tok.kind} {tok.text}", tok.position)
            if not open_lists:
                return expr
            open_lists[-1][1].append(expr)

    def parse_all(self) -> Iterator[Expression]:
        while self.peek() is not None:
            yield self.parse_expr()


def read_all(source: str) -> list[Expression]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def read(source: str) -> Expression:
    """Read exactly one expression from `source`.

    Raises ParseError on empty input or on anything after the first expression.
    """
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if expr is None:
        raise ParseError("Empty input", 0)
    extra = stream.peek()
    if extra is not None:
        if extra.kind == "rparen":
            raise ParseError("Unexpected ')'", extra.position)
        raise ParseError("Unexpected input after expression", extra.position)
    return expr

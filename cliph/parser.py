"""Parsing calculator input into expression trees."""

from __future__ import annotations

import re

from cliph.expr import Binary, BinaryOp, Expr, Function, Number, Unary, UnaryOp, Variable


class ParseError(ValueError):
    """Raised when text is not a valid expression."""


_LATEX_FUNCTIONS = ("sin", "cos", "tan", "log", "exp", "abs")
_FRAC = re.compile(r"\\frac\s*\{([^}]*)\}\s*\{([^}]*)\}")
_DIGITS = frozenset("0123456789")


def latex_to_math_expr(latex: str) -> str:
    """Rewrite simple LaTeX math into the calculator's plain syntax."""
    text = latex
    for name in _LATEX_FUNCTIONS:
        text = text.replace("\\" + name, name)
    text = _FRAC.sub(r"(\1)/(\2)", text)
    return text.replace("$", "")


def parse(text: str) -> Expr:
    """Parse ``text`` into an expression tree."""
    parser = _Parser(text)
    parser.skip_whitespace()
    expr = parser.parse_expr()
    parser.skip_whitespace()
    if parser.current is not None:
        raise ParseError("Unexpected characters after expression")
    return expr


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def current(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def _advance(self) -> None:
        self._pos += 1

    def skip_whitespace(self) -> None:
        while (c := self.current) is not None and c.isspace():
            self._advance()

    def parse_expr(self) -> Expr:
        node = self._parse_mul_div()
        while True:
            self.skip_whitespace()
            c = self.current
            if c == "+":
                op = BinaryOp.ADD
            elif c == "-":
                op = BinaryOp.SUB
            else:
                return node
            self._advance()
            node = Binary(op, node, self._parse_mul_div())

    def _parse_mul_div(self) -> Expr:
        node = self._parse_pow()
        while True:
            self.skip_whitespace()
            c = self.current
            if c == "*":
                self._advance()
                node = Binary(BinaryOp.MUL, node, self._parse_pow())
            elif c == "/":
                self._advance()
                node = Binary(BinaryOp.DIV, node, self._parse_pow())
            elif c is not None and (c in _DIGITS or c.isalpha() or c == "("):
                # Implicit multiplication, as in "2x" or "3(x + 1)".
                node = Binary(BinaryOp.MUL, node, self._parse_pow())
            else:
                return node

    def _parse_pow(self) -> Expr:
        base = self._parse_unary()
        self.skip_whitespace()
        if self.current == "^":
            self._advance()
            return Binary(BinaryOp.POW, base, self._parse_unary())
        return base

    def _parse_unary(self) -> Expr:
        self.skip_whitespace()
        if self.current == "-":
            self._advance()
            return Unary(UnaryOp.NEG, self._parse_unary())
        return self._parse_atom()

    def _parse_atom(self) -> Expr:
        self.skip_whitespace()
        c = self.current
        if c is None:
            raise ParseError("Unexpected end of input")
        if c in _DIGITS or c == ".":
            return self._parse_number()
        if c.isalpha():
            return self._parse_ident_or_func()
        if c == "(":
            self._advance()
            inner = self.parse_expr()
            self.skip_whitespace()
            if self.current != ")":
                raise ParseError("Expected ')'")
            self._advance()
            return inner
        raise ParseError(f"Unexpected character '{c}'")

    def _parse_number(self) -> Expr:
        start = self._pos
        while (c := self.current) is not None and (c in _DIGITS or c == "."):
            self._advance()
        try:
            return Number(float(self._text[start : self._pos]))
        except ValueError:
            raise ParseError("Invalid number") from None

    def _parse_ident_or_func(self) -> Expr:
        start = self._pos
        while (c := self.current) is not None and (c.isalnum() or c == "_"):
            self._advance()
        ident = self._text[start : self._pos]
        self.skip_whitespace()
        if self.current != "(":
            return Variable(ident)
        self._advance()
        argument = self.parse_expr()
        self.skip_whitespace()
        if self.current != ")":
            raise ParseError("Expected ')' after function argument")
        self._advance()
        return Function(ident, argument)
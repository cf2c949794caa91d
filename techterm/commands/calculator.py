# commands/calculator.py

import math
import re
from decimal import Decimal
from typing import List, Tuple

TOKEN_REGEX = re.compile(r'\s*(?:(\d+\.?\d*|\.\d+)|(.))')
OPERATORS = set('+-*/()')


class CalculatorError(ValueError):
    """Raised for anything that is not a well-formed arithmetic expression."""


def tokenize(expression: str) -> List[Tuple[str, str]]:
    """Split an expression into ('num', text) and ('op', char) tokens."""
    tokens = []
    for number, other in TOKEN_REGEX.findall(expression):
        if number:
            tokens.append(('num', number))
        elif other in OPERATORS:
            tokens.append(('op', other))
        elif other.strip():
            raise CalculatorError(f"Unexpected character: {other!r}")
    return tokens


class _Parser:
    """
    Recursive-descent evaluator.

        expr   := term (('+' | '-') term)*
        term   := factor (('*' | '/') factor)*
        factor := ('+' | '-') factor | number | '(' expr ')'
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def _peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else (None, None)

    def _take(self):
        token = self._peek()
        if token[0] is None:
            raise CalculatorError("Unexpected end of expression")
        self.pos += 1
        return token

    def parse(self) -> float:
        if not self.tokens:
            raise CalculatorError("Empty expression")
        value = self._expr()
        if self.pos != len(self.tokens):
            raise CalculatorError(f"Unexpected token: {self._peek()[1]!r}")
        return value

    def _expr(self) -> float:
        value = self._term()
        while self._peek() in (('op', '+'), ('op', '-')):
            _, op = self._take()
            rhs = self._term()
            value = value + rhs if op == '+' else value - rhs
        return value

    def _term(self) -> float:
        value = self._factor()
        while self._peek() in (('op', '*'), ('op', '/')):
            _, op = self._take()
            rhs = self._factor()
            value = value * rhs if op == '*' else _divide(value, rhs)
        return value

    def _factor(self) -> float:
        kind, text = self._take()
        if kind == 'num':
            return float(text)
        if text == '-':
            return -self._factor()
        if text == '+':
            return self._factor()
        if text == '(':
            value = self._expr()
            if self._take() != ('op', ')'):
                raise CalculatorError("Expected ')'")
            return value
        raise CalculatorError(f"Unexpected token: {text!r}")


def _divide(lhs: float, rhs: float) -> float:
    # IEEE semantics: x/0 is signed infinity, 0/0 is NaN
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def evaluate(expression: str) -> float:
    return _Parser(tokenize(expression)).parse()


def format_number(value: float) -> str:
    """Render a result the way a browser console prints numbers."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if 'e' in text and 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), 'f')
    return re.sub(r'e([+-])0*(\d)', r'e\1\2', text)

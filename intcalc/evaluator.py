import enum
from dataclasses import dataclass
from typing import Optional

from intcalc.cursor import TokenCursor
from intcalc.tokenizer import Token, TokenKind, tokenize
from intcalc.utils import INT_MAX, CalcError, PrintableEnum, truncating_div, wrap_int


class EvalErrorKind(PrintableEnum):
    UNEXPECTED_TOKEN = enum.auto()
    UNMATCHED_PAREN = enum.auto()
    DIVISION_BY_ZERO = enum.auto()
    MALFORMED_NUMBER = enum.auto()
    NESTING_TOO_DEEP = enum.auto()


@dataclass
class EvalError(CalcError):
    kind: EvalErrorKind
    token: Optional[Token] = None
    position: Optional[int] = None
    text: Optional[str] = None

    @property
    def errmsg(self) -> str:
        if self.kind is EvalErrorKind.DIVISION_BY_ZERO:
            return f"Division by zero at position {self.position}"
        if self.kind is EvalErrorKind.MALFORMED_NUMBER:
            return f"Number {self.text} does not fit into an integer"
        if self.kind is EvalErrorKind.NESTING_TOO_DEEP:
            return f"Expression is nested too deeply at position {self.position}"
        symbol = "end of input" if self.token is None or self.token.kind is TokenKind.END else repr(self.token.text)
        if self.kind is EvalErrorKind.UNMATCHED_PAREN:
            return f"Expected ')', found {symbol} at position {self.position}"
        return f"Unexpected {symbol} at position {self.position}"

    def __str__(self) -> str:
        return f"[Evaluator error] {self.errmsg}"


def _error(kind: EvalErrorKind, token: Token) -> EvalError:
    return EvalError(kind=kind, token=token, position=token.position)


def evaluate(tokens: list[Token]) -> int:
    if not tokens or tokens[-1].kind is not TokenKind.END:
        raise ValueError("Token list must be terminated by an END token")
    if any(t.kind is TokenKind.END for t in tokens[:-1]):
        raise ValueError("END token must appear only once, as the last token")

    cursor = TokenCursor(tokens)
    try:
        value = _expression(cursor)
    except RecursionError:
        deepest = tokens[max(cursor.position - 1, 0)]
        raise _error(EvalErrorKind.NESTING_TOO_DEEP, deepest) from None
    trailing = cursor.advance()
    if trailing.kind is not TokenKind.END:
        # additive level only stops early on a ')' that was never opened
        raise _error(EvalErrorKind.UNMATCHED_PAREN, trailing)
    return value


def calculate(code: str) -> int:
    return evaluate(tokenize(code))


def _expression(cursor: TokenCursor) -> int:
    if cursor.advance().kind is TokenKind.END:
        cursor.retreat()
        return 0
    cursor.retreat()
    return _additive(cursor)


def _additive(cursor: TokenCursor) -> int:
    value = _multiplicative(cursor)
    while True:
        token = cursor.advance()
        if token.kind is TokenKind.PLUS:
            value = wrap_int(value + _multiplicative(cursor))
        elif token.kind is TokenKind.MINUS:
            value = wrap_int(value - _multiplicative(cursor))
        elif token.kind in (TokenKind.RIGHT_PAREN, TokenKind.END):
            cursor.retreat()
            return value
        else:
            raise _error(EvalErrorKind.UNEXPECTED_TOKEN, token)


def _multiplicative(cursor: TokenCursor) -> int:
    value = _primary(cursor)
    while True:
        token = cursor.advance()
        if token.kind is TokenKind.MULTIPLY:
            value = wrap_int(value * _primary(cursor))
        elif token.kind is TokenKind.DIVIDE:
            divisor = _primary(cursor)
            if divisor == 0:
                raise _error(EvalErrorKind.DIVISION_BY_ZERO, token)
            value = truncating_div(value, divisor)
        elif token.kind in (TokenKind.RIGHT_PAREN, TokenKind.PLUS, TokenKind.MINUS, TokenKind.END):
            cursor.retreat()
            return value
        else:
            raise _error(EvalErrorKind.UNEXPECTED_TOKEN, token)


def _primary(cursor: TokenCursor) -> int:
    token = cursor.advance()
    if token.kind is TokenKind.NUMBER:
        # int() refuses very long digit strings, so reject oversized runs up front
        digits = token.text.lstrip("0")
        if len(digits) > len(str(INT_MAX)) or int(digits or "0", base=10) > INT_MAX:
            raise EvalError(kind=EvalErrorKind.MALFORMED_NUMBER, token=token, position=token.position, text=token.text)
        return int(digits or "0", base=10)
    elif token.kind is TokenKind.LEFT_PAREN:
        value = _additive(cursor)
        closing = cursor.advance()
        if closing.kind is not TokenKind.RIGHT_PAREN:
            raise _error(EvalErrorKind.UNMATCHED_PAREN, closing)
        return value
    else:
        raise _error(EvalErrorKind.UNEXPECTED_TOKEN, token)

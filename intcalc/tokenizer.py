import enum
from dataclasses import dataclass, field

from intcalc.utils import CalcError, PrintableEnum, point_at


class LexErrorKind(PrintableEnum):
    UNKNOWN_SYMBOL = enum.auto()


@dataclass
class LexError(CalcError):
    kind: LexErrorKind
    symbol: str
    position: int
    code: str = ""

    @property
    def errmsg(self) -> str:
        return f"Unknown symbol {self.symbol!r} at position {self.position}"

    def __str__(self) -> str:
        lines = [f"[Tokenizer error] {self.errmsg}"]
        if self.code:
            lines.append(point_at(self.code, self.position))
        return "\n".join(lines)


class TokenKind(PrintableEnum):
    MULTIPLY = enum.auto()
    DIVIDE = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    NUMBER = enum.auto()
    END = enum.auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"<{self.kind}>{self.text}"


SINGLE_CHAR_TOKENS = {
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}


def _is_digit(s: str) -> bool:
    # str.isdigit() also accepts superscripts and non-ASCII digits
    return "0" <= s <= "9"


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(kind=SINGLE_CHAR_TOKENS[code[i]], text=code[i], position=i))
        elif _is_digit(code[i]):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_digit(code[number_end_idx]):
                number_end_idx += 1
            tokens.append(Token(kind=TokenKind.NUMBER, text=code[i:number_end_idx], position=i))
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i] == " ":
            pass
        else:
            raise LexError(kind=LexErrorKind.UNKNOWN_SYMBOL, symbol=code[i], position=i, code=code)
        i += 1

    tokens.append(Token(kind=TokenKind.END, text="", position=len(code)))
    return tokens

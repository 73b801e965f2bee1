from intcalc.tokenizer import Token


class TokenCursor:
    """Read-only view over a token list with one-step advance and one-step undo"""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._index = 0

    def advance(self) -> Token:
        if self._index >= len(self._tokens):
            raise IndexError("Cursor advanced past the last token")
        token = self._tokens[self._index]
        self._index += 1
        return token

    def retreat(self) -> None:
        if self._index == 0:
            raise IndexError("Cursor retreated before the first token")
        self._index -= 1

    @property
    def position(self) -> int:
        return self._index

    def __repr__(self) -> str:
        return f"TokenCursor(position={self._index}, tokens={len(self._tokens)})"

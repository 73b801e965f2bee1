import enum

INT_BITS = 32
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def wrap_int(value: int) -> int:
    """Reduce an arbitrary Python int to the signed INT_BITS-wide two's-complement range"""
    value &= (1 << INT_BITS) - 1
    if value > INT_MAX:
        value -= 1 << INT_BITS
    return value


def truncating_div(a: int, b: int) -> int:
    # Python's // floors, integer division here truncates toward zero
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return wrap_int(quotient)


def point_at(code: str, char_idx: int, context: int = 10) -> str:
    print_start_idx = max(0, char_idx - context)
    print_ellipsis_pre = print_start_idx > 0
    print_end_idx = min(len(code), char_idx + context)
    print_ellipsis_post = print_end_idx < len(code)
    return "\n".join(
        [
            (
                ("..." if print_ellipsis_pre else "")
                + code[print_start_idx:print_end_idx]
                + ("..." if print_ellipsis_post else "")
            ),
            " " * (char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
        ]
    )


class CalcError(Exception):
    """Base class for every error raised while tokenizing or evaluating an expression"""

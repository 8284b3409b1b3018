"""
Arbitrary-precision radix conversion on top of Python's int.

Power-of-two bases are converted through bit slicing. Every other base is
processed in blocks of digits that fit a 64-bit word, so CPython's
int_max_str_digits guard never applies to long inputs.
"""
from functools import lru_cache

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

MIN_BASE = 2
MAX_BASE = len(DIGITS)


def _check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}")


def _is_power_of_two(base: int) -> bool:
    return base & (base - 1) == 0


@lru_cache(maxsize=None)
def _block(base: int) -> tuple[int, int]:
    """Returns (digits per block, base ** digits per block) for a 64-bit block."""
    width = 1
    while base ** (width + 1) < 1 << 64:
        width += 1
    return width, base ** width


def _render_block(n: int, base: int, width: int = 0) -> str:
    result = []
    while n:
        n, remainder = divmod(n, base)
        result.append(DIGITS[remainder])
    return "".join(reversed(result)).rjust(width, "0")


def digits_to_int(digits: str, base: int) -> int:
    """
    Parses an uppercase, already validated digit string into a non-negative int.
    """
    _check_base(base)
    if not digits:
        raise ValueError("Digit string must not be empty")
    if _is_power_of_two(base):
        return int(digits, base)

    width, step = _block(base)
    head = len(digits) % width or width
    n = int(digits[:head], base)
    for start in range(head, len(digits), width):
        n = n * step + int(digits[start:start + width], base)
    return n


def int_to_digits(n: int, base: int) -> str:
    """
    Renders a non-negative int in the given base, uppercase, without leading zeros.
    """
    _check_base(base)
    if n < 0:
        raise ValueError("Input must be a non-negative integer")
    if n == 0:
        return DIGITS[0]

    if _is_power_of_two(base):
        bits = base.bit_length() - 1
        binary = format(n, "b")
        binary = "0" * (-len(binary) % bits) + binary
        return "".join(DIGITS[int(binary[i:i + bits], 2)] for i in range(0, len(binary), bits))

    width, step = _block(base)
    blocks = []
    while n:
        n, remainder = divmod(n, step)
        blocks.append(remainder)
    head = _render_block(blocks.pop(), base)
    return head + "".join(_render_block(block, base, width) for block in reversed(blocks))


def bytes_to_int(data: bytes) -> int:
    """Reads big-endian bytes as an unsigned magnitude."""
    return int.from_bytes(data, "big", signed=False)


def int_to_bytes(n: int) -> bytes:
    """
    Returns the minimal unsigned big-endian encoding of n. Zero encodes as a
    single zero byte.
    """
    if n < 0:
        raise ValueError("Input must be a non-negative integer")
    return n.to_bytes(max(1, (n.bit_length() + 7) // 8), "big", signed=False)

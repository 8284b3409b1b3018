"""
Converts byte sequences to and from positional-base digit strings.

A byte sequence is read as the big-endian magnitude of one non-negative
integer, which is then rendered in the requested radix. Decoding reverses the
process and always yields the minimal unsigned byte encoding of the value.
"""
from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Optional, Union

from mymath import DIGITS, bytes_to_int, digits_to_int, int_to_bytes, int_to_digits


class CodecError(ValueError):
    """Base class for rejected codec input."""


class InvalidDigit(CodecError):
    def __init__(self, character: str, index: int, radix: "Radix"):
        self.character = character
        self.index = index
        self.radix = radix
        super().__init__(f"Invalid character {character!r} at index {index} for {radix.name} encoding")


class ByteOutOfRange(CodecError):
    def __init__(self, index: int, value):
        self.index = index
        self.value = value
        super().__init__(f"Byte value at index {index} ({value!r}) is outside valid range 0-255")


class Radix(Enum):
    """Supported positional bases. BASE32 is plain base 32 (0-9, A-V), not RFC 4648."""
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16
    BASE32 = 32
    BASE36 = 36

    @property
    def base(self) -> int:
        return self.value

    @property
    def alphabet(self) -> str:
        return DIGITS[:self.value]

    @classmethod
    def from_value(cls, value: Union["Radix", int, str]) -> "Radix":
        """Looks a radix up by member, numeric base or (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
            if name.isdigit():
                return cls.from_value(int(name))
        raise ValueError(f"Unsupported radix: {value!r}")


# Read-only lookup table shared by every caller. Holds both letter cases.
VALID_DIGITS = MappingProxyType({
    radix: frozenset(radix.alphabet + radix.alphabet.lower()) for radix in Radix
})

RadixLike = Union[Radix, int, str]


def validate_digits(digits: str, radix: RadixLike = Radix.OCTAL) -> None:
    """
    Raises InvalidDigit for the first character that is not a digit of the radix.
    Letters are accepted in either case.
    """
    radix = Radix.from_value(radix)
    valid = VALID_DIGITS[radix]
    for index, char in enumerate(digits):
        if char not in valid:
            raise InvalidDigit(char, index, radix)


def decode_to_bytes(digits: Optional[str], radix: RadixLike = Radix.OCTAL) -> List[int]:
    """
    Decodes a digit string into the unsigned big-endian bytes of its value.

    None, empty and all-whitespace input decode to an empty list. A zero value
    decodes to a single zero byte.
    """
    radix = Radix.from_value(radix)
    if digits is None or not digits.strip():
        return []

    validate_digits(digits, radix)
    return list(int_to_bytes(digits_to_int(digits.upper(), radix.base)))


def encode_bytes(data: Optional[Iterable[int]], radix: RadixLike = Radix.OCTAL) -> str:
    """
    Encodes a sequence of byte values (0-255) as an uppercase digit string.

    None and empty input encode to an empty string. Leading zero bytes carry no
    value and do not appear in the output.
    """
    radix = Radix.from_value(radix)
    if data is None:
        return ""
    values = list(data)
    if not values:
        return ""

    for index, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise ByteOutOfRange(index, value)

    return int_to_digits(bytes_to_int(bytes(values)), radix.base)

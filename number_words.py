from dataclasses import dataclass
from enum import Enum, auto


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

UNITS = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
TEENS = (
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)
TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
HUNDRED = "hundred"
MAGNITUDES = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
)


class SpellingInvariantError(RuntimeError):
    """Raised when the speller reaches a state int64 input cannot produce."""


class TensKind(Enum):
    ZERO = auto()
    MULTIPLE = auto()
    TEEN = auto()


@dataclass(frozen=True)
class TensDigit:
    """Middle digit of a group; TEEN carries the units digit of 10..19."""

    kind: TensKind
    digit: int = 0

    def word(self):
        if self.kind is TensKind.TEEN:
            return TEENS[self.digit]
        if self.kind is TensKind.MULTIPLE:
            return TENS[self.digit]
        return ""


_NO_TENS = TensDigit(TensKind.ZERO)


@dataclass(frozen=True)
class DigitTriple:
    hundreds: int
    tens: TensDigit
    units: int

    def is_zero(self):
        return self.hundreds == 0 and self.tens.kind is TensKind.ZERO and self.units == 0


def decompose(value):
    if not 0 <= value <= 999:
        raise ValueError(f"Group value must be within 0..999, got {value}.")
    hundreds, remainder = divmod(value, 100)
    if remainder >= 20:
        tens, units = divmod(remainder, 10)
        return DigitTriple(hundreds, TensDigit(TensKind.MULTIPLE, tens), units)
    if remainder >= 10:
        return DigitTriple(hundreds, TensDigit(TensKind.TEEN, remainder - 10), 0)
    return DigitTriple(hundreds, _NO_TENS, remainder)


def render_group(triple, magnitude_word=""):
    """Render one group as a fragment where every word has a leading space.

    ``render_group(decompose(251), "thousand")`` gives
    ``" two hundred and fifty-one thousand"``.
    """
    parts = []
    has_tens = triple.tens.kind is not TensKind.ZERO
    if triple.hundreds:
        parts.append(f" {UNITS[triple.hundreds]} {HUNDRED}")
        if has_tens or triple.units:
            parts.append(" and")
    if has_tens:
        parts.append(f" {triple.tens.word()}")
    if triple.units:
        separator = "-" if triple.tens.kind is TensKind.MULTIPLE else " "
        parts.append(f"{separator}{UNITS[triple.units]}")
    if magnitude_word:
        parts.append(f" {magnitude_word}")
    return "".join(parts)


def _magnitude_of(value):
    # floor(log10(value) / 3) without going through floats
    return (len(str(value)) - 1) // 3


def spell(n):
    """Spell out a signed 64-bit integer in British English."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"spell() expects an int, got {type(n).__name__}.")
    if not INT64_MIN <= n <= INT64_MAX:
        raise ValueError(f"{n} is outside the signed 64-bit range.")
    if n == 0:
        return "zero"

    fragments = []
    add_one = False
    if n < 0:
        fragments.append("minus")
        if n == INT64_MIN:
            n = INT64_MAX
            add_one = True
        else:
            n = -n

    magnitude = _magnitude_of(n)
    if magnitude >= len(MAGNITUDES):
        raise SpellingInvariantError(
            f"Magnitude {magnitude} exceeds the word table; input is not 64 bits wide."
        )
    divisor = 1000**magnitude
    for level in range(magnitude, 0, -1):
        group, n = divmod(n, divisor)
        triple = decompose(group)
        if not triple.is_zero():
            fragments.append(render_group(triple, MAGNITUDES[level]))
        divisor //= 1000
    if add_one:
        n += 1

    fragments.append(render_group(decompose(n)))
    return "".join(fragments).lstrip(" ")


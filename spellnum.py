import argparse
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from number_words import INT64_MAX, INT64_MIN, spell


_DECIMAL_PATTERN = re.compile(r"\s*([+-]?)0*([0-9]+)\s*", re.ASCII)
# digits in 9223372036854775808
_INT64_DIGITS = 19


class ParseError(Enum):
    MISSING_ARGUMENT = "Please provide an integer to spell."
    INVALID_FORMAT = "Input string was not in a correct format."
    OUT_OF_RANGE = "Value was either too large or too small for an Int64."


@dataclass(frozen=True)
class ParseOutcome:
    value: int = 0
    error: Optional[ParseError] = None

    @property
    def ok(self):
        return self.error is None


def parse_number(arguments):
    """Turn the raw positional arguments into a value or a ParseError."""
    if len(arguments) != 1:
        return ParseOutcome(error=ParseError.MISSING_ARGUMENT)
    match = _DECIMAL_PATTERN.fullmatch(arguments[0])
    if not match:
        return ParseOutcome(error=ParseError.INVALID_FORMAT)
    sign, digits = match.groups()
    if len(digits) > _INT64_DIGITS:
        return ParseOutcome(error=ParseError.OUT_OF_RANGE)
    value = int(sign + digits)
    if not INT64_MIN <= value <= INT64_MAX:
        return ParseOutcome(error=ParseError.OUT_OF_RANGE)
    return ParseOutcome(value=value)


def main(argv=None):
    parser = cmdline_parser()
    args, unknown = parser.parse_known_args(argv)
    # dash-prefixed leftovers such as "-0x10" are numbers that failed to parse
    outcome = parse_number(list(args.number or []) + unknown)
    if not outcome.ok:
        print(outcome.error.value)
        return 1

    print(spell(outcome.value))
    return 0


def cmdline_parser():
    parser = argparse.ArgumentParser(
        prog="spellnum",
        description="Spell out a signed 64-bit integer in English.",
        epilog="Example:\n  spellnum 43110\n  forty-three thousand one hundred and ten",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "number",
        nargs="*",
        help="A base-10 integer between -9223372036854775808 and 9223372036854775807.",
    )
    return parser


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()

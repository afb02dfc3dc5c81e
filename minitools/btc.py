"""Value bitcoin amounts from an input file against a CSV rate database."""

from __future__ import annotations

import math
import re
import sys
from typing import Iterator, TextIO

from minitools.exchange import DateOutOfRangeError, ExchangeRates, Record

DATABASE_PATH = "data.csv"

_STREAM_SPACE = " \t\n\v\f\r"
_TRIM_SPACE = " \t\n\r"
_DIGITS = "0123456789"
_NUMBER = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.ASCII,
)


class InputLineError(ValueError):
    """A line of the input file was rejected; ``messages`` lists every reason."""

    def __init__(self, *messages: str) -> None:
        super().__init__("\n".join(messages))
        self.messages = list(messages)


def _is_number(text: str) -> bool:
    return bool(text) and all(char in _DIGITS for char in text)


def _leading_number(text: str) -> tuple[float | None, str]:
    match = _NUMBER.match(text)
    if match is None:
        return None, text
    number = float(match.group(1))
    if not math.isfinite(number):
        return None, text
    return number, text[match.end():]


def check_date(text: str) -> str | None:
    """Validate a ``YYYY-MM-DD`` date; return None for the header word ``date``."""
    if text == "date":
        return None
    error = InputLineError(f"Error: bad date input format => {text}")
    if len(text) != 10 or text[4] != "-" or text[7] != "-":
        raise error
    year, month, day = text[0:4], text[5:7], text[8:10]
    if not (_is_number(year) and _is_number(month) and _is_number(day)):
        raise error
    if not (2000 <= int(year) <= 2050 and 1 <= int(month) <= 12 and 1 <= int(day) <= 31):
        raise error
    return text


def check_value(text: str) -> float:
    """Parse an amount, which must be a number between 0 and 1000."""
    number, rest = _leading_number(text)
    if number is None or rest.strip(_STREAM_SPACE):
        raise InputLineError(f"Error: bad value input => {text}")
    if number < 0:
        raise InputLineError("Error: not a positive number.")
    if number > 1000:
        raise InputLineError("Error: too large a number.")
    return number


def parse_input_line(line: str) -> Record | None:
    """Parse a ``date | value`` line; None for blank lines and a valid header."""
    if not line:
        return None
    date_part, separator, value_part = line.partition("|")
    if not separator:
        raise InputLineError(f"Error: bad input => {line}")

    messages: list[str] = []
    date: str | None = None
    value = 0.0
    try:
        date = check_date(date_part.strip(_TRIM_SPACE))
    except InputLineError as exc:
        messages.extend(exc.messages)
    try:
        value = check_value(value_part)
    except InputLineError as exc:
        messages.extend(exc.messages)

    if messages:
        raise InputLineError(*messages)
    if date is None:
        return None
    return Record(date, value)


def parse_database_line(line: str) -> Record | None:
    """Parse a ``date,rate`` line; an unreadable rate counts as zero."""
    date, separator, rate_part = line.partition(",")
    if not separator or not date:
        return None
    rate, _ = _leading_number(rate_part)
    return Record(date, 0.0 if rate is None else rate)


def _read_lines(path: str) -> Iterator[str]:
    with open(path, encoding="utf-8", errors="replace", newline="\n") as handle:
        for line in handle:
            yield line[:-1] if line.endswith("\n") else line


def load_database(path: str) -> ExchangeRates:
    """Load a rate table from a CSV file; raises OSError if it cannot be read."""
    rates = ExchangeRates()
    for line in _read_lines(path):
        record = parse_database_line(line)
        if record is not None:
            rates.add(record)
    return rates


def process_input(path: str, rates: ExchangeRates, out: TextIO, err: TextIO) -> None:
    """Convert every valid line of the input file and report the bad ones."""
    for line in _read_lines(path):
        try:
            record = parse_input_line(line)
        except InputLineError as exc:
            for message in exc.messages:
                err.write(message + "\n")
            continue
        if record is None:
            continue
        out.write(f"{record.date} >> {record.value:.2f}")
        try:
            rate = rates.rate_on(record.date)
        except DateOutOfRangeError:
            err.write(" => Error: date not in database range.")
        else:
            out.write(f" * {rate:.2f} = {record.value * rate:.2f}")
        out.write("\n")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: could not open file", file=sys.stderr)
        return 1
    input_path = args[0]
    if not input_path:
        print("Error: input file cannot be empty.", file=sys.stderr)
        return 1

    try:
        rates = load_database(DATABASE_PATH)
    except OSError:
        print(f"Error: could not open file {DATABASE_PATH} to read.", file=sys.stderr)
        print("Error: database file wasn't included.", file=sys.stderr)
        return 1

    try:
        process_input(input_path, rates, sys.stdout, sys.stderr)
    except OSError:
        print(f"Error: unable to open file {input_path} to read.", file=sys.stderr)
        print("Error: input file wasn't processed.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
# minitools

Three small, independent command-line tools, each also usable from Python.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## btc: bitcoin value converter

`btc` reads a database of exchange rates from `data.csv` in the current
directory. The path is fixed. Each line of the database has the form
`date,rate`. Lines without a comma are skipped. A rate that cannot be read as
a number counts as zero.

It then reads the input file named on the command line. Each line of the
input file has the form `date | value`:

```
2011-01-03 | 3
2011-01-09 | 1
2012-01-11 | 1001
```

```
btc input.txt
```

For each valid line, `btc` writes a line to standard output:

```
2011-01-03 >> 3.00 * 0.30 = 0.90
```

That line gives the date, the amount, the rate in effect and the converted
value, all with two decimals. The rate in effect is the one for the same date
or, failing that, the one for the closest earlier date in the database.

Blank lines are skipped. Problems are reported on standard error, one message
per problem:

- a line without `|` (`Error: bad input => ...`)
- a date that is not `YYYY-MM-DD`, has a year outside 2000–2050, a month
  outside 1–12 or a day outside 1–31 (`Error: bad date input format => ...`).
  The day is not checked against the month.
- a value that is not a number (`Error: bad value input => ...`)
- a negative value (`Error: not a positive number.`)
- a value greater than 1000 (`Error: too large a number.`)
- a date earlier than every date in the database. The date and amount are
  still written to standard output, followed by
  `=> Error: date not in database range.` on standard error.

A date field that reads exactly `date` is taken as a header, but its value
field must still be a valid number. A header line such as `date | value` is
therefore reported as a bad value.

`btc` exits with status 1 in these cases:

- it is not given exactly one argument
- the argument is empty
- `data.csv` cannot be read
- the input file cannot be read

### From Python

```python
import sys
from minitools.btc import load_database, process_input

rates = load_database("data.csv")
process_input("input.txt", rates, sys.stdout, sys.stderr)
```

The module `minitools.btc` also provides these functions:

- `check_date` validates a date field.
- `check_value` validates an amount.
- `parse_input_line` parses an input line.
- `parse_database_line` parses a database line.

Rejected input lines raise `minitools.btc.InputLineError`. Its `messages` list
holds every reason the line was rejected.

Rates are held in `minitools.exchange.ExchangeRates`, built from
`minitools.exchange.Record(date, value)` objects:

- `add(record)` stores a rate, replacing any rate already held for that date.
- `rate_on(date)` returns the rate in effect on a date. It raises
  `DateOutOfRangeError` for a date earlier than every stored date.
- `convert(record)` multiplies an amount by the rate in effect on its date.
- `dump()` renders the table as `date, rate` lines.
- `len(rates)` gives the number of dates held.

## rpn: reverse Polish notation calculator

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
42
```

Operands are single digits from 0 to 9. The operators are `+ - * /`. Tokens
are separated by spaces, though an operator may directly follow a digit.
Arithmetic is done in floating point and the result is printed in short
general form, for example `42` or `0.5`.

`rpn` prints `Error: expression wasn't processed.` and exits with status 1
in these cases:

- the expression is empty
- a number has more than one digit
- a token is unknown, such as a parenthesis or a decimal point
- there are too few operands for an operator
- there is a division by zero, which is also reported as
  `Error: division by 0`

If anything other than exactly one value is left at the end, `rpn` prints
`Error: invalid expression` and exits with status 1.

### From Python

```python
from minitools.rpn import evaluate

evaluate("7 7 * 7 -")  # 42.0
```

`evaluate` raises `minitools.rpn.RPNError` for an invalid expression and
`ZeroDivisionError` for a division by zero. The stack itself is available as
`minitools.rpn.RPNStack`, with these members:

- `push(operand)`
- `apply(operator)`
- `value()`
- `len(stack)`

## pmergeme: Ford-Johnson merge-insertion sort

```
pmergeme 5 3 1 2 4
```

`pmergeme` takes a sequence of distinct non-negative integers. Each argument
is digits with an optional leading `+` or `-`. Non-numeric arguments,
negative numbers and duplicates are rejected with a message on standard
error and exit status 1.

The sequence is sorted with the Ford-Johnson merge-insertion algorithm twice,
once held in a list and once in a deque. For each run, `pmergeme` prints the
sequence before and after sorting and the processor time the run took, in
microseconds. It then times 100 further runs of each, prints every run's
time, and reports the two averages.

### From Python

```python
from minitools.pmerge import ford_johnson_sort, sort_deque, sort_list

ford_johnson_sort([25, 10, 50, 75, 35, 15, 5])
# [5, 10, 15, 25, 35, 50, 75]
```

`ford_johnson_sort` returns a deque when given a deque, and a list otherwise.
`sort_list` and `sort_deque` always return a list or a deque respectively.
The module also exposes these helpers:

- `jacobsthal_insertion_order(n)` gives the order in which pending items are
  inserted.
- `make_pairs(values)` gives the `(larger, smaller)` pairs and any unpaired
  last item.
- `format_sequence(values)` renders values as they are printed.

`minitools.pmerge_cli` provides the command-line pieces:

- `validate_sequence(args)` raises `SequenceError` for invalid input.
- `is_sorted(values)`
- `find_duplicate(values)`
- `measure_sort_time(sorter, values, iterations, out, label)`
# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
operations. The program prints the sequence of operations that leaves
stack `a` sorted in ascending order, with the smallest value on top.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, `b`, or both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate up: the first element becomes the last |
| `rra` / `rrb` / `rrr` | rotate down: the last element becomes the first |

An operation that cannot apply (for example `sa` with fewer than two
elements in `a`, or `ss` unless both stacks hold two or more) changes
nothing and is not recorded.

## Command line

Install the package, then pass the numbers as separate arguments or as one
quoted, space-separated argument:

```
push-swap 3 2 1
push-swap "5 1 4 2 3"
```

Each operation is printed on its own line. Input that is already sorted
produces no output, and running with no arguments does nothing.

Input is rejected, and `Error` is written to standard error, when it holds
characters other than digits, `+`, `-` and spaces, a lone sign, a sign after
a digit, a repeated sign, a value outside the 32-bit signed range, a
duplicate value, or no numbers at all. The exit status is 0 in every case.

Up to five values are sorted with dedicated routines. Larger inputs are
first replaced by their ranks, then pushed to `b` in chunks whose width is
the integer square root of their count, and brought back largest first.

## Library use

```python
from pushswap.parsing import parse_arguments, InputError
from pushswap.sorting import push_swap

values = parse_arguments(["4", "2", "3", "1"])
moves = push_swap(values)   # a list of operation names
```

- `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, as deques with
  the top on the left) and has one method per operation (`sa`, `pb`, `rra`,
  ...). Every applied operation is appended to its `operations` list.
- `pushswap.parsing` validates and converts the program arguments:
  `parse_arguments` returns the integers or raises `InputError` (a
  `ValueError`). It also provides `split_words`, `parse_int`,
  `has_valid_characters`, `has_double_sign`, `is_well_formed`,
  `has_duplicates` and `format_list`.
- `pushswap.sorting` holds `push_swap` and the strategies it uses
  (`sort_three`, `sort_four`, `sort_five`, `push_min`, `max_to_top`,
  `chunk_sort`) along with `is_sorted`, `normalize`, `integer_sqrt`,
  `index_of_min` and `index_of_max`.
- `pushswap.printing` offers `render` and `printf`, a small formatter for
  `%c %s %p %d %i %u %x %X` and `%%`.
- `pushswap.cli.main` is the `push-swap` command.

The package also carries general helpers:

- `pushswap.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper` for character codes or one-character
  strings.
- `pushswap.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset` on `bytearray` and bytes-like objects.
- `pushswap.strings`: `itoa`, `strchr`, `strrchr`, `strdup`, `striteri`,
  `strjoin`, `strlcat`, `strlcpy`, `strlen`, `strmapi`, `strncmp`,
  `strnstr`, `strtrim`, `substr`; searches return an index or `None`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to a text stream (standard output by default).
- `pushswap.linked.LinkedList`: an ordered collection with `add_front`,
  `add_back`, `last`, `remove_first`, `clear`, `iterate` and `map`.

## Tests

```
pip install -e .[test]
pytest
```
# cppexperiments

A collection of small, self-contained computing experiments. Each module
explores one idea — several equivalent ways of checking the same condition,
printing the bits of a number, tracking floating-point error, storing strings
in a bitwise trie — and can be used as a library or run from the command line.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `cppexperiments.pattern_count` | Counts windows of equal values in a random 0/1 sequence, with several equivalent predicates (`random_digits`, `count_runs`, `count_runs_product`, `count_runs_abs_sum`, `count_runs_square_sum`). |
| `cppexperiments.bits` | Shows the binary layout of 32-bit floats and 8-bit integers (`float_to_bin`, `float32_bits`, `int8_bits`, `all_int8_bits`, `rounds_to_float_one`, `stepped_range`). |
| `cppexperiments.hello_server` | A minimal TCP server answering every connection with a fixed "Hello world!" HTML page (`HelloHandler`, `make_server`). |
| `cppexperiments.magic` | Many ways to decide whether a nine-digit string is a 3×3 magic square, plus an exhaustive search over all candidates (`is_magic_naive`, `is_magic_less_code`, `is_magic_numbers`, `is_magic_five_heuristic`, `is_magic_oddity`, `is_magic_permutation_shifts`, `is_magic_words`, `is_magic_words_oddity`, `magic_number`, `is_magic_64bits`, `candidates`, `find_magic`). |
| `cppexperiments.interval` | `DoubleInterval`, a float that carries an interval bounding its rounding error, with interval versions of `sqrt`, `sin`, `cos`, `tan`, `asin`, `acos`, `atan` and `fabs`, plus `sampled`, `isnan` and `quiet_nan`. |
| `cppexperiments.cubic` | A closed-form cubic solver that works on floats and on `DoubleInterval` values, and experiments measuring its real and predicted error (`solve_cubic`, `cubic_for_roots`, `round_trip`, `real_worst_relative_error`, `prognosed_worst_relative_error`, `error_grid`). |
| `cppexperiments.trie` | Radix tries with 1, 2, 4 or 8 bits per level: `TrieSet` (also behind `radix_sort`), `TrieMap`, and `made_up_words` for test data. |

## Library examples

```python
from cppexperiments.magic import is_magic_naive, is_magic_64bits

print(is_magic_naive("816357492"))      # True
print(is_magic_64bits("123456789"))     # False

from cppexperiments.pattern_count import count_runs

print(count_runs([1, 1, 1, 1, 1, 0], target=1, width=4))  # 2

from cppexperiments.bits import float_to_bin

print(float_to_bin(1.0))                # '0 01111111 00000000000000000000000 '

from cppexperiments.trie import TrieSet, TrieMap, radix_sort

trie = TrieSet(4)
for word in ["cat", "pat", "bed", "test"]:
    trie.store(word)
print(list(trie.sorted_keys()))         # ['bed', 'cat', 'pat', 'test']
print("cat" in trie)                    # True
print(radix_sort(["b", "a", "c"], 2))   # ['a', 'b', 'c']

table = TrieMap(8)
table.store("key", 42)
print(table.retrieve("key"))            # (True, 42)

from cppexperiments.interval import DoubleInterval

x = DoubleInterval.exact(0.1) * 3.0
print(float(x), x.width())              # value and the width of its error bound

from cppexperiments.cubic import solve_cubic, cubic_for_roots

print(solve_cubic(cubic_for_roots([1.0, 2.0, 3.0])))  # close to 1, 2 and 3
```

`find_magic(check)` runs a checker over all 9⁹ nine-digit strings, so it
takes a long time in pure Python.

## Command-line experiments

```
cppexp-pattern-count [--size N] [--seed S] [--target 0|1] [--width W]
                     [--method andand|and|mul|abs|square] [--float]
cppexp-bits [floats|int8|rounding|loop]
cppexp-hello-server [--host HOST] [--port PORT]     # default port 8080
cppexp-magic [--method NAME]                        # exhaustive search, timed
cppexp-cubic [roots|real|prognosed]
cppexp-trie [--sort-words N] [--map-words N] [--repeat R] [--seed S]
```

`cppexp-pattern-count` and `cppexp-trie` print timings; `cppexp-cubic real`
and `cppexp-cubic prognosed` print an 11×11×11 grid of worst relative errors.

## What the package does not do

It has no linear-equation solver, no small-array sorting routines and no
recursion demonstrations. The hello server only ever sends its one fixed page;
it does not read or route requests.
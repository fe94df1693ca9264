# eulerkit

Small, exact solvers for classic recreational mathematics problems: primes
and divisors, digit puzzles, figurate numbers, continued fractions, path sums
through grids and triangles, Roman numerals, Sudoku and more.

Every solver is a plain function whose parameters are explicit, so you can
run the well-known instance of a problem or a smaller one while you
experiment. Only the Python standard library is used; Python 3.10 or later is
required.

## Installation

From a checkout of the project:

```
pip install .
```

## Examples

```python
from eulerkit.arithmetic import sum_of_multiples, largest_prime_factor, nth_prime
from eulerkit.counting import nth_permutation, coin_sums
from eulerkit.roman import parse_roman, to_roman

sum_of_multiples(10, (3, 5))                  # 23
largest_prime_factor(13195)                   # 29
nth_prime(6)                                  # 13

nth_permutation([0, 1, 2], 3)                 # [1, 2, 0]
coin_sums(200, [1, 2, 5, 10, 20, 50, 100, 200])

parse_roman("CMXLIX")                         # 949
to_roman(2550)                                # "MMDL"
```

Functions that work on input data take the text of the data rather than a
file path, so you decide where the data comes from:

```python
from pathlib import Path
from eulerkit.grids import parse_matrix, minimal_path_sum_two_ways
from eulerkit.sudoku import sudoku_top_left_sum

matrix = parse_matrix(Path("matrix.txt").read_text())
print(minimal_path_sum_two_ways(matrix))

print(sudoku_top_left_sum(Path("sudoku.txt").read_text()))
```

Invalid arguments raise `ValueError`; searches that find nothing raise
`LookupError`.

## Modules

| Module                 | Contents |
|------------------------|----------|
| `eulerkit.arithmetic`  | multiples, even Fibonacci sum, largest prime factor, palindromic products, n-th prime, Pythagorean triplets, prime sums, triangle-number divisors, Collatz chains, digit sums of powers and factorials, Fibonacci digit counts, modular self powers, weekdays of month starts, largest `base,exponent` line |
| `eulerkit.grids`       | adjacent digit products, grid line products, lattice paths, triangle path sums, matrix path sums moving two, three or four ways |
| `eulerkit.bigsum`      | leading digits of the sum of many large numbers |
| `eulerkit.words`       | English number names and letter counts, name scores, triangle words, three-letter XOR key search, anagramic squares |
| `eulerkit.roman`       | Roman numeral parsing, minimal numerals, characters saved by rewriting |
| `eulerkit.divisors`    | proper divisor sums, amicable numbers, non-abundant sums, recurring decimal cycles, multiplicative factorizations, product-sum numbers, amicable chains |
| `eulerkit.primes`      | primes below a limit, quadratic primes, distinct powers, circular and truncatable primes, Goldbach's other conjecture, distinct prime factors, consecutive prime sums, prime partitions, prime power triples |
| `eulerkit.totients`    | totient maximum, totient permutation, Farey sequence length |
| `eulerkit.digits`      | digit powers and factorials, pandigital products and multiples, double-base palindromes, Champernowne's constant, Lychrel numbers, power digit sums, powerful digit counts, square digit chains |
| `eulerkit.counting`    | n-th permutation, spiral diagonals, coin sums, integer partitions, combinations, cube digit pairs |
| `eulerkit.figurate`    | a lazily grown `Sequence` class and figurate-number puzzles (pentagonal pairs, triangle/pentagonal/hexagonal numbers, cyclic figurate sets, cubic permutations) |
| `eulerkit.convergents` | square root of two expansions, odd-period square roots, convergents of e, Pell equations, ordered fractions, square root digits, arranged probability |
| `eulerkit.geometry`    | counting rectangles, cuboid routes, almost equilateral triangles |
| `eulerkit.sudoku`      | parsing, formatting, candidate computation, validity checks and a solver using singles, hidden singles and backtracking to a depth of three |

## What it does not do

- There is no command-line program; everything is used from Python.
- No data files are included. Functions such as `name_scores_total`,
  `xor_decrypt_sum`, `characters_saved`, `largest_exponential_line` and
  `sudoku_top_left_sum` need you to supply the text.
- The Sudoku solver is not a complete search. `solve_sudoku` returns `None`
  for a puzzle it cannot finish within its backtracking depth, and
  `sudoku_top_left_sum` leaves such puzzles out of the total.

## Running the tests

```
pip install ".[test]"
python -m pytest
```
# gf2bits

Working in bit-space, also known as GF(2): a fixed-length bit-array packed
into unsigned words, generators over bit sequences, and solvers for linear
systems whose entries are all 0 or 1.

The package has no dependencies outside the standard library.

## Installation

```
pip install gf2bits
```

## Modules

### `gf2bits.array`

`BitArray(n, word_bits=64)` is a vector of `n` bits whose length is fixed
when it is made. Bits live in words of 8, 16, 32, 64 or 128 bits; bit `i`
is bit `i % word_bits` of word `i // word_bits`, and unused high bits of the
last word are always zero.

Constructors (all class methods taking `n` first and `word_bits` last):
`zeros`, `ones`, `constant(n, val)`, `unit(n, i)`, `alternating` (starting
with a 1), `from_word(n, word)` (the word repeated and truncated),
`from_fn(n, f)`, `random`, `random_seeded(n, seed)`,
`random_biased(n, p)` and `random_biased_seeded(n, p, seed)`. A seed of 0
seeds from the clock; a bias outside `[0, 1]` gives all zeros or all ones.

A `BitArray` supports `len()`, indexing (negative indices too), item
assignment, iteration, equality and hashing. `str()` prints element 0 on the
left. Word access is through `words()`, `word(i)` and `set_word(i, word)`,
and `count_ones()` counts the set bits.

### `gf2bits.iterators`

Generators over any bit store, that is anything with `len()` and integer
indexing, such as a `BitArray` or a list of bools:

- `bits(store)` and `reversed_bits(store)` yield each bit as a bool.
- `set_bits(store)` and `unset_bits(store)` yield the indices of the set or
  unset bits in increasing order.
- `words(store, word_bits)` yields the bits packed into unsigned words.

### `gf2bits.lu`

`BitLU(a)` computes `P.A = L.U` for a square matrix given as a sequence of
rows of bits. It works for singular matrices too, in which case the solvers
return `None`.

Methods: `rank()`, `is_singular()`, `determinant()`, `lower()`, `upper()`,
`permutation_matrix()`, `swaps()` (LAPACK-style row swap instructions),
`permutation_vector()`, `permute_matrix(b)` and `permute_vector(b)` (in
place), `solve(b)` for `A.x = b`, `solve_matrix(b)` for `A.X = B`, and
`inverse()`. Matrices come back as lists of lists of bools and vectors as
lists of bools.

### `gf2bits.gauss`

`BitGauss(a, b)` brings the augmented system `A|b` to reduced row echelon
form for a square `A`. Methods: `rank()`, `free_count()`,
`is_underdetermined()`, `is_consistent()`, `solution_count()` (0, or
`2**f` for `f` free variables, capped at `2**63`), `x()` (a solution with
random values for the free variables) and `xi(i)` (the solution whose free
variables take the bits of `i`, lowest bit first).

### `gf2bits.naive`

Plain bit-by-bit reference functions on sequences of bools, useful to check
faster code against: `first_set`, `last_set`, `next_set`, `previous_set`,
their `*_unset` counterparts, `to_binary_string`, `to_hex_string`,
`shift_left`, `shift_right`, `convolution` and `reduce_x_to_power_n`
(coefficients of `x**n mod poly(x)`, lowest power first).

## Examples

```python
from gf2bits.array import BitArray
from gf2bits.iterators import set_bits

v = BitArray.alternating(10, 8)
print(v)                    # 1010101010
print(v.count_ones())       # 5
print(list(set_bits(v)))    # [0, 2, 4, 6, 8]

u = BitArray.unit(10, 5, 8)
print(u)                    # 0000010000
print(u.words())            # 2
```

```python
from gf2bits.gauss import BitGauss
from gf2bits.lu import BitLU

solver = BitGauss([[1, 1, 1]] * 3, [1, 1, 1])
print(solver.rank(), solver.free_count(), solver.solution_count())  # 1 2 4
print(solver.xi(0))         # [True, False, False]

lu = BitLU([[0, 1], [1, 0]])
print(lu.rank())            # 2
print(lu.inverse())         # [[False, True], [True, False]]
```

## What this package does not do

`BitArray` is the only bit container here. There is no growable bit-vector
type, no bit-matrix type and no bit-polynomial type: `BitLU`, `BitGauss` and
the `naive` functions take plain sequences and return plain lists. There is
no command-line program.

## Running the tests

```
pip install gf2bits[test]
pytest
```
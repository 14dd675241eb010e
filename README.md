# cpkit

A collection of algorithms and data structures for competitive programming,
and a helper that compares real-number output with an expected answer
within a tolerance.

## Installation

```
pip install cpkit
```

Tests need the `test` extra:

```
pip install "cpkit[test]"
pytest
```

## What is inside

Data structures

- `cpkit.ordered_set`: `OrderedMultiset` with `insert`, `erase` (one occurrence),
  `find_by_order` and `order_of_key`
- `cpkit.named_dsu`: `NamedDSU` (1-indexed sets, `merge(x, y)` moves set `y`
  into set `x`) and `NamedDSUUndo` (0-indexed, with `undo` of the last merge)
- `cpkit.weighted_dsu`: `WeightedDSU` (union by size with weighted edges,
  `root`, `same`, `lca`, `path_to_lca`)
- `cpkit.rect_sum`: `RectSum` (1-indexed 2D prefix sums filled cell by cell
  in row-major order)
- `cpkit.range_sum_2d`: `Static2DRangeSum` (add weighted points, `build`,
  then query inclusive rectangles)
- `cpkit.rooted_forest`: `RootedForest` (binary lifting: `ancestor`,
  `top_ancestor`)
- `cpkit.trie_multimap`: `TrieMultimap` (each node keeps the values of every
  key passing through it)
- `cpkit.segtree`: `SegTree` (monoid segment tree with point `set`, range
  `product` and range `reset` to the identity), `StaticRangeMin`,
  `StaticRangeMax`
- `cpkit.point_segtree`: `PointSegTree` (apply an associative operation to a
  point or a half-open range, read single points)

Algorithms

- `cpkit.nt`: `prime_divisors`, `divisors`, `factorize`, `factorize_p`,
  `get_primes`, `get_mpf`, `get_mpf_info`, `get_mu`, `phi`, `ext_gcd`,
  `mod_pow`, `discrete_log`, `discrete_log_mod_p`
- `cpkit.poly`: `poly_mul`, `poly_imul`, `lagrange_interpolation`
  (exact by default through `fractions.Fraction`)
- `cpkit.xor_basis`: `XorBasis` (GF(2) linear basis with `components` and
  membership tests)
- `cpkit.xor_convolution`: `transform`, `inv_transform`, `xor_convolution`
- `cpkit.gaussian`: `gaussian_elimination` (pivoting by `GaussMode.DEGREE` or
  `GaussMode.ABS`) and `solve_linear_system`
- `cpkit.search`: `ternary_search`, `bin_search`, `find_first`, `find_last`
  (the last three return `None` when nothing is found)
- `cpkit.parallel_binary_search`: `parallel_binary_search` for offline queries
- `cpkit.rational`: `Rational` (exact fractions in lowest terms; a zero
  denominator raises `BadRational`, except that `n/0` with `n != 0` stands for
  an infinity) and `rational_cast`
- `cpkit.slope_dp`: `SlopeDPMin` (convex hull trick for 1D/1D minimisation)
- `cpkit.strings`: `AhoCorasick`, `KMPSearcher`, `get_pi`
- `cpkit.suffix_array`: `suffix_array` (prefix doubling)
- `cpkit.scc`: `SCC` (Tarjan's algorithm returning the condensed graph) and
  `SimpleSCC`

Checking output

- `cpkit.compare_floats`: `compare_floats(output, answer)` reads numbers from
  both strings and accepts when each expected number is matched within an
  absolute or relative error of `1e-6`

## Examples

```python
from cpkit.segtree import SegTree
from cpkit.nt import divisors
from cpkit.rational import Rational
from cpkit.compare_floats import compare_floats

tree = SegTree([5, 1, 4], float("inf"), min)
assert tree.product(0, 2) == 1

assert divisors(12) == [1, 2, 3, 4, 6, 12]

assert Rational(2, 4) + 1 == Rational(3, 2)

assert compare_floats("0.3333333", "0.333333")
```

## What it does not do

The package is a library only. It has no command-line tool and does not build,
run or time solutions against sample tests, and it has no line-by-line output
checker or test report printer; `compare_floats` is the only output comparison
it provides.
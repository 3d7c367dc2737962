# algokit

Classic algorithmic routines in plain Python, with no runtime dependencies.

## Modules

- `algokit.geometry`: 2-D geometry on points given as complex numbers.
  - Vector helpers: `dot`, `cross`, `perp`, `sq`, `orient`.
  - Transformations: `scale`, `rotate`, `linear_transform`.
  - Angles: `angle`, `oriented_angle`, `angle_travelled`, `in_angle`.
  - Lines: the `Line` class (`Line.through`, `Line.from_equation`, `side`,
    `dist`, `proj`, `refl`, `translate`, `shift_left`, ...),
    `line_intersection` and `bisector`.
  - Segments: `on_segment`, `proper_intersection`, `segment_intersections`,
    `segment_point_distance`, `segment_segment_distance`.
  - Polygons: `is_convex`, `triangle_area`, `polygon_area`, `in_polygon`.
  - Circles: `circumcircle`, `circle_line`, `circle_circle`, `tangents`.
  - Results that may not exist come back as `None` or as an empty tuple or
    list. Degenerate input that has no answer raises `ValueError`: aligned
    points for a circumcircle, parallel lines for a bisector, identical circles.
- `algokit.triangles`: works on integer points given as `(x, y)` tuples.
  - `convex_hull` builds the hull by monotone chain.
  - `max_triangle_double_area` and `min_triangle_double_area` give twice the
    largest and the smallest positive triangle area on the hull.
- `algokit.divisors`: `build_spf(max_n)` is a smallest-prime-factor sieve.
  `divisors(x, spf)` lists the divisors of `x` other than 1.
- `algokit.lcm_subsequences`: `prime_power_factors(n)` and
  `count_subsequences_with_lcm(values, m)`. The count is the number of
  non-empty subsequences with LCM `m`, modulo 998244353.
- `algokit.lcs`: `longest_common_subsequence(s, t)` returns the length of the
  longest common subsequence.
- Range structures:
  - `algokit.affine.AffineSumTree` applies `a[i] = b*a[i] + c` over a range
    and answers range sums modulo 998244353. Ranges are half-open `[left, right)`.
  - `algokit.range_min.RangeAddMinTree` supports range addition and range
    minimum. Ranges are half-open.
  - `algokit.xor_subarrays.SubarrayXorSum` assigns a point and gives the sum of
    the XORs of all subarrays of `a[left..right]`, modulo 4001. Values are in
    0..2047.
  - `algokit.fibonacci.FibonacciRangeAdder` adds `F(1), F(2), ...` to a range
    and answers range sums modulo 1000000009.
  - `algokit.totient.TotientRangeProduct` multiplies a range by a value in
    1..300 and gives Euler's totient of a range product, modulo 1000000007.
  - The last three use 1-based, inclusive positions and raise `IndexError`
    for ranges outside the sequence.
- Offline problems:
  - `algokit.greedy_seq.longest_greedy_subsequences(values, k)` gives the
    longest greedy subsequence of every window of length `k`.
  - `algokit.race.max_race_profit(costs, races)` picks which roads to repair
    and which races to hold for the best profit.
  - `algokit.mex.mex_after_queries(queries)` gives the smallest missing
    positive integer after each add, remove or invert query on an interval.
- `algokit.graphs`: works on undirected graphs with vertices `1..n`.
  - `shortest_path_avoiding_triplets(n, edges, forbidden)` returns
    `(length, walk)` from 1 to `n`, or `None` when `n` cannot be reached.
  - `count_points_at_distance(n, edges, source, distance)` counts the vertices
    and points on edges whose shortest distance from `source` is exactly
    `distance`.

## Examples

```python
from algokit.geometry import polygon_area, in_polygon
square = [0j, 2 + 0j, 2 + 2j, 2j]
polygon_area(square)               # 4.0
in_polygon(square, 1 + 1j, True)   # True

from algokit.affine import AffineSumTree
tree = AffineSumTree([1, 2, 3, 4, 5])
tree.sum(0, 5)                     # 15
tree.apply(2, 4, 100, 101)         # a[i] = 100 * a[i] + 101 for i in [2, 4)
tree.sum(0, 3)                     # 304

from algokit.divisors import build_spf, divisors
spf = build_spf(100)
sorted(divisors(12, spf))          # [2, 3, 4, 6, 12]

from algokit.race import max_race_profit
max_race_profit([3, 2, 3, 2, 1, 2, 3], [(1, 2, 5), (2, 3, 5), (3, 5, 3), (7, 7, 5)])  # 4

from algokit.mex import mex_after_queries
mex_after_queries([(1, 3, 4), (3, 1, 6), (2, 1, 3)])  # [1, 3, 1]
```

## What it does not do

This is a library only. It has no command-line programs and does not read
problem input from standard input or print answers. You call the functions
and classes from your own code with Python values.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```
# cpbooklet

Classic competitive-programming algorithms as a plain Python library, with no
third-party dependencies. Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `cpbooklet.modular` | `Modular` residues (default modulus `MOD = 1_000_000_007`), `bpow`, `sqrt_mod` (Tonelli–Shanks) |
| `cpbooklet.euclid` | `xgcd`, the extended Euclidean algorithm |
| `cpbooklet.berlekamp_massey` | `mod_pow`, `berlekamp_massey` to recover linear recurrences over a prime field |
| `cpbooklet.fft` | `fft` (complex DFT of a power-of-two length) and integer convolution `multiply` |
| `cpbooklet.ntt` | `NTT` with `transform` and `multiply`; the primes `MOD1`, `MOD2`, `MOD3` (default `998244353`) |
| `cpbooklet.polynomials` | `Poly` over a prime field: arithmetic, `divmod`, `inverse` series, `evaluate`, `evaluate_many`, `interpolate`; `convolve_mod` |
| `cpbooklet.determinant` | `determinant` of a real square matrix by Gaussian elimination with partial pivoting |
| `cpbooklet.sat` | `sat`, brute-force satisfiability for up to 63 variables |
| `cpbooklet.xorsat` | `xorsat` and `solve_xor_system` over GF(2), with the `GaussResult` enum |
| `cpbooklet.hornsat` | `hornsat`, linear-time Horn satisfiability |
| `cpbooklet.aho_corasick` | `AhoCorasick` automaton over the letters `a`–`z`, with lazily computed `link`, `exit_link` and `go` |
| `cpbooklet.hashing` | `HashRange` double polynomial substring hashing modulo 2^61 − 1, and `mod_mul` |
| `cpbooklet.kmp` | `prefix_function` and `match` |
| `cpbooklet.manacher` | `manacher`, counts of even and odd palindromes around every centre |
| `cpbooklet.dbf` | `dbf`, dense ranks of the cyclic substrings of length 2^k by doubling |
| `cpbooklet.circles` | `Line`, `circum_center`, `circle_line`, `circle_circle`, `tangents` (points are complex numbers) |
| `cpbooklet.hungarian` | `hungarian` minimum-cost assignment |
| `cpbooklet.smawk` | `smawk` row maxima and `max_plus_convolution` for a concave second operand |
| `cpbooklet.simplex` | `LPSolver` for linear programs |

Literals for `sat`, `xorsat` and `hornsat` are encoded as `2*i` for variable
`i` and `2*i + 1` for its negation. When a formula has no solution these
functions return `None`.

## Examples

Extended gcd:

```python
from cpbooklet.euclid import xgcd

x, y, g = xgcd(240, 46)
assert 240 * x + 46 * y == g == 2
```

Modular arithmetic:

```python
from cpbooklet.modular import Modular, sqrt_mod

assert Modular(2) ** -1 * 2 == 1
sqrt_mod(4)  # 2
```

Guessing a linear recurrence:

```python
from cpbooklet.berlekamp_massey import berlekamp_massey

berlekamp_massey([0, 1, 1, 3, 5, 11])  # [1, 2]
```

Convolution and polynomials:

```python
from cpbooklet.fft import multiply
from cpbooklet.polynomials import Poly

multiply([1, 2], [3, 4])  # [3, 10, 8]

p = Poly.interpolate([0, 1, 2], [1, 2, 5])
p.coefficients            # [1, 0, 1]
p.evaluate_many([3])      # [10]
```

Pattern matching:

```python
from cpbooklet.kmp import prefix_function, match

prefix_function("abacaba")  # [0, 0, 1, 0, 1, 2, 3]
match("abababa", "aba")      # [0, 2, 4]
```

Assignment and (max, +) convolution:

```python
from cpbooklet.hungarian import hungarian
from cpbooklet.smawk import max_plus_convolution

hungarian([[4, 1, 3], [2, 0, 5], [3, 2, 2]])  # 5
max_plus_convolution([0, 1], [0, 1, 1])       # [0, 1, 2, 2]
```

Linear programming (maximise `c·x` subject to `A x <= b`, `x >= 0`):

```python
from cpbooklet.simplex import LPSolver

value, x = LPSolver([[1, -1], [-1, 1], [-1, -2]], [1, 1, -4], [-1, -1]).solve()
```

`solve` returns `(-inf, None)` when the program is infeasible, `inf` with some
feasible `x` when it is unbounded, and the optimum with an optimal `x`
otherwise.

## What it does not do

The package is a library only: it has no command-line tool, and it reads no
input files. Each function works on the Python values passed to it.
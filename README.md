# algolab

A small collection of classic data-structure and algorithm exercises,
each usable as a library and from the command line:

- **Red-black tree with order statistics** (`algolab.rbtree`) – a
  balanced binary search tree in which every node records the size of
  its subtree, so membership tests, insertion, removal and "how many
  keys are smaller than *k*" all take logarithmic time.
- **Hash functions and hash tables** (`algolab.hashing`,
  `algolab.hashtables`) – a polynomial rolling hash and a Jenkins
  one-at-a-time hash; separate chaining (list buckets or red-black tree
  buckets) and open addressing with linear probing, quadratic probing
  and double hashing.
- **Hash table benchmark** (`algolab.benchmark`) – compares average
  search time and probe counts across load factors 0.4 to 0.9, before
  and after deleting a tenth of the keys.
- **Band matrix minimisation** (`algolab.band_bounds`,
  `algolab.band_search`) – permutes the rows and columns of a sparse
  square matrix to make its band as narrow as possible, by branch and
  bound (depth-first with pruning, or best-first with a priority queue).

It needs nothing beyond the Python standard library (3.10 or newer).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

### Red-black tree

```python
from algolab.rbtree import RedBlackTree

tree = RedBlackTree()
for key in (10, 4, 17, 8):
    tree.insert(key, key)

8 in tree               # True
tree.find(8)            # True
tree.get(8)             # 8, the stored value (default None)
tree.count_less(10)     # 2: keys smaller than 10
tree.remove(4)          # True
len(tree)               # 3
list(tree)              # [8, 10, 17], keys in ascending order
print(tree.render())    # preorder dump: value->size->COLOUR(left)(right)
```

`insert` and `remove` return whether the tree changed: inserting a key
that is already present, or removing one that is absent, returns
`False` and leaves the tree untouched. `render()` of an empty tree is
`"The Tree is empty"`.

### Hash functions

```python
from algolab.hashing import hash1, hash2, effectiveness, random_words
import random

hash1("example")          # polynomial rolling hash, base 31 modulo 1e9+9
hash2("example", 101)     # Jenkins one-at-a-time hash, in 1..100
random_words(5, random.Random(1))      # distinct 7-letter words, sorted
effectiveness(hash1, 101, random.Random(1))  # distinct codes among 100 words
```

### Hash tables

```python
from algolab.hashtables import HashType, make_table, SeparateChainingTable

table = make_table(HashType.DOUBLE_HASHING, 101)
table.insert("apple", 1)
table.search("apple")   # 1
table.remove("apple")
table.search("apple")   # None once the key is gone
```

`make_table` returns an `OpenAddressingTable` for the probing
strategies and a `TreeChainingTable` (one red-black tree per bucket)
for `HashType.SEPARATE_CHAINING`. `SeparateChainingTable` keeps plain
list buckets, with new entries at the front. Open addressing leaves a
tombstone on removal so later searches probe past it;
`OpenAddressingTable.probe_index(key, attempt)` gives the slot tried on
each attempt.

Every table counts the probes its searches make in `probe_count`; call
`reset_probe_count()` before a batch of searches to measure them.

### Benchmark

```python
import random
from algolab.benchmark import generate_data, run_benchmark, format_report

n = 1009
datasets = generate_data(n, random.Random(0))
results = run_benchmark(datasets, n)
print(format_report(results, n))
```

`primes_up_to(limit)` is a sieve of Eratosthenes, and
`sweep_primes(limit, rng)` runs the benchmark for every prime table
size up to `limit`.

### Band matrices

```python
from algolab.band_search import parse_matrix, minimize_band, format_solution

matrix = parse_matrix("""
4
X O O X
O O X O
X O O X
O X X X
""")
solution = minimize_band(matrix)
print(solution.band, solution.row_perm, solution.col_perm)
print(format_solution(matrix, solution, "O"))
```

A cell counts as non-zero when it is `"X"` (or, for non-string cells,
when it is truthy). `minimize_band_best_first` explores the same search
space best-first. `algolab.band_bounds` provides the building blocks:
`float_left`, `float_right`, `lower_bound` and `band_width`.

## Command-line tools

```
algolab-rbt [INPUT] [OUTPUT] [--generate COUNT] [--seed SEED]
algolab-hashbench [N] [--seed SEED] [--sweep LIMIT]
algolab-band [INPUT] [--best-first]
```

- `algolab-rbt` reads tree operations from `INPUT` (default `input.in`)
  and writes results to `OUTPUT` (default `output.in`). The input
  starts with the number of operations, then one `op key` pair each,
  where `op` is 0 (remove), 1 (insert), 2 (find) or 3 (count smaller
  keys). Each operation is echoed with its result; an unknown `op`
  writes `ERROR: Invalid Command` and exits with status 1. With
  `--generate COUNT` it instead writes `COUNT` random operations to
  `INPUT`.
- `algolab-hashbench` takes the table size `N` as an argument or from
  standard input (default 1000003), prints how many distinct codes each
  hash gives for 100 random words, then the benchmark report. With
  `--sweep LIMIT` it runs the benchmark for every prime size up to
  `LIMIT`, printing each size.
- `algolab-band` reads a matrix size followed by its cells from `INPUT`
  or standard input and prints the minimal band width and the permuted
  matrix. `--best-first` uses the priority-queue search and prints
  non-zero cells as `X` and the rest as `0`.

Run any of them with `--help` for their options.
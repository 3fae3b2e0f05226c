# zsdist

zsdist computes the edit distance between ordered, labelled trees. It
offers two implementations in `zsdist.distance`:

- `zhang_shasha_distance(tree1, tree2)` uses the Zhang-Shasha algorithm.
  It runs the forest-distance computation only for pairs of keyroots.
- `naive_distance(tree1, tree2)` runs the same recurrence for every pair
  of nodes. It serves as a baseline.

Inserting, deleting or relabelling a node each costs 1. If either tree is
empty, the distance is the total node count of both trees.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Tree notation

A tree is written as a label, optionally followed by its children inside
parentheses or square brackets. Children are separated by commas or
spaces. Labels are runs of ASCII letters and digits.

```
f(d(a,c(b)),e)
r[a, b, c]
```

`zsdist.parser.parse_tree(text)` turns this notation into a `Tree`. An
empty string gives an empty tree. Closing brackets that are missing at the
end of the text are accepted. A closing bracket at the top level ends the
input. `ParseError`, a subclass of `ValueError`, is raised in these cases:

- a character appears where a label should start but begins no label,
  so the label would be empty;
- a second top-level node follows the root;
- the text holds no nodes at all, for example only separators.

## Trees

`zsdist.tree` provides `Node`, a dataclass with a `label` and a list of
`children`, and `Tree`, which wraps a root node (or `None` for an empty
tree). A `Tree` supports `len()`, which gives its node count. Iterating
over a `Tree` yields its nodes in postorder.

`Tree.build()` numbers the nodes 1..n in postorder and fills three lists:

- `labels`: the label of each node, in postorder;
- `left`: for each node, the number of its leftmost leaf;
- `keyroots`: in ascending order, the nodes that are the highest node
  sharing their leftmost leaf.

Both distance functions call `build()` on their arguments themselves.

## Usage

```python
from zsdist.parser import parse_tree
from zsdist.distance import zhang_shasha_distance, naive_distance

t1 = parse_tree("f(d(a,c(b)),e)")
t2 = parse_tree("f(c(d(a,b)),e)")

print(len(t1), len(t2))             # node counts
print(zhang_shasha_distance(t1, t2))
print(naive_distance(t1, t2))
```

## Benchmark

The package includes a benchmark over a fixed set of tree pairs. The
pairs include small cases, a deep chain, a wide tree, a tall comb, a low
wide bush and a mixed tree. Both algorithms are timed on each pair:

```
zsdist-benchmark
zsdist-benchmark --repetitions 100 --output timings.csv
```

Options:

- `-n`, `--repetitions`: runs per algorithm and pair. The default is 1000,
  and the value must be at least 1.
- `-o`, `--output`: the CSV file to write. The default is `results.csv`.

For each pair the command prints the node counts, each algorithm's
distance and its mean time per run in milliseconds. It then writes the
results as CSV with these columns:

```
Tree1_Size,Tree2_Size,ZS_Distance,ZS_Time_ms_avg,ZS_Space_bytes,Naive_Distance,Naive_Time_ms_avg,Naive_Space_bytes
```

The space columns give the size of one distance table, (n1 + 1) × (n2 + 1)
four-byte integers. This is the same figure for both algorithms. If the
file cannot be written, the command prints an error and exits with
status 1.

The same functionality is available from Python through `zsdist.benchmark`:

```python
from zsdist.benchmark import benchmark_pair, run_benchmark, write_csv

result = benchmark_pair("a(b,c)", "a(c,b)", 100)
results = run_benchmark([("a(b,c)", "a(c,b)"), ("d", "g(h)")], 100)
write_csv(results, "results.csv")
```

`benchmark_pair` returns a frozen `BenchmarkResult` and raises `ValueError`
if `repetitions` is below 1. `run_benchmark` returns a list of results.
When a pair fails to parse, it reports the pair on standard error and
skips it. Called without arguments, `run_benchmark` uses the built-in
pairs (`DEFAULT_CASES`) and 1000 repetitions.

## Limitations

- The costs are fixed at 1 for each operation and cannot be changed.
- Only the distance is returned. The package does not produce the edit
  script or the node mapping behind it.
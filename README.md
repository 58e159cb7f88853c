# searchlab

Search algorithms over sorted sequences, a few small numeric helpers, and a
micro-benchmark runner that times them.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Searching

Every search function in `searchlab.search` takes a sorted sequence and a
value, and returns the index of the value, or `-1` when it is not present.

```python
from searchlab.search import (
    binary_search,
    ternary_search,
    exponential_search,
    binary_search_par,
)

data = list(range(0, 100, 3))

binary_search(data, 27)          # 9
ternary_search(data, 27)         # 9
exponential_search(data, 27)     # 9
binary_search(data, 28)          # -1

# Splits the sequence into chunks and binary searches each chunk in its own
# thread; the first chunk, in order, that holds the value gives the result.
binary_search_par(data, 27, number_of_threads=4)   # 9
```

`binary_search_par` uses 10 threads by default and raises `ValueError` when
`number_of_threads` is less than 1.

## Helpers

`searchlab.cpplib` holds three small functions:

```python
from searchlab.cpplib import hello_world, fib, find_max

hello_world()            # "**** Hello World ****"
fib(10)                  # 55
fib(-3)                  # -3  (any n <= 1 is returned unchanged)
find_max([1, 12, 8, 22]) # 22
find_max([])             # -1
```

## Benchmarks

`searchlab.benchmarks` holds:

- the timed workloads `compare_strings(size)`, `add_by_value(n, value)` and
  `increment(n)` (the last two wrap around at 2**64);
- data builders `sorted_data(size)` (`0 .. size - 1`) and
  `random_data(size, seed=10)` (seeded, sorted random integers);
- `power_range(low, high, multiplier=2)`, which gives `low`, the powers of
  `multiplier` strictly between, and `high`;
- `measure(name, func, arg, min_time=0.5)`, which calls `func` repeatedly for
  at least `min_time` seconds and returns a `BenchmarkResult` (label,
  iterations, wall-clock and CPU time per iteration in nanoseconds, and items
  per second when items were counted);
- `run_all(min_time=0.5)`, which runs the string-comparison, increment,
  binary-search, exponential-search and threaded binary-search benchmarks
  over their size ranges;
- `to_csv(results)`, which renders results as CSV with times in nanoseconds.

Run the whole suite from the command line:

```
searchlab-bench                       # aligned table
searchlab-bench --format csv          # CSV
searchlab-bench --min-time 0.1        # spend at least 0.1 s per benchmark
```

CSV output can be redirected to a file for use elsewhere:

```
searchlab-bench --format csv > results.csv
```

## What it does not do

The package only prints benchmark results; it draws no plots and keeps no
history of earlier runs.